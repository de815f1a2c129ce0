import logging

from dataclasses import dataclass
from preprocessing import Term
from preprocessing.normalizer import Normalizer, SingleCharacterCaseNormalizer
from preprocessing.sub_tokenizers.whitespace_tokenizer import WhitespaceTokenizer

logger = logging.getLogger(__name__)


@dataclass
class TokenizedOutput:
    tokenized_text: list[Term]
    original_number_of_words: int = 0

    def __iter__(self):
        for term in self.tokenized_text:
            yield term.term


DEFAULT_NORMALIZER_OPERATIONS = [
    SingleCharacterCaseNormalizer(),
]


class Tokenizer:
    def __init__(self, normalizer_operations=DEFAULT_NORMALIZER_OPERATIONS):
        self.word_tokenizer = WhitespaceTokenizer()
        self.normalizer = Normalizer(normalizer_operations)

    def __repr__(self):
        return f"Tokenizer(word_tokenizer={self.word_tokenizer}, normalizer={self.normalizer})"

    def __call__(self, *args, **kwargs):
        return self.tokenize(*args, **kwargs)

    def tokenize(self, line: str) -> TokenizedOutput:
        if line is None:
            return TokenizedOutput(tokenized_text=[], original_number_of_words=0)

        tokenized_out = self.word_tokenizer(line)
        return TokenizedOutput(
            tokenized_text=self.normalizer(tokenized_out),
            original_number_of_words=len(tokenized_out),
        )
