import logging

from inverted_index.structures import Document, PartialIndex
from preprocessing.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class PartitionIndexBuilder:
    def __init__(self, document: Document, start: int, end: int, tokenizer: Tokenizer):
        """
        Builds the partial index for lines [start, end) of a document.
        Nothing shared is modified here; the result is handed to the `IndexMerger`

        Args:
            document: Document
                Read-only document shared with the other workers
            start: int
            end: int
            tokenizer: Tokenizer
        """
        self.document = document
        self.start = start
        self.end = end
        self.tokenizer = tokenizer

        self.partial_index = PartialIndex()
        self.word_count = 0

    def __repr__(self):
        return f"PartitionIndexBuilder(doc_id={self.document.doc_id}, start={self.start}, end={self.end})"

    def add_line(self, line: str):
        tokenized_out = self.tokenizer(line)
        self.word_count += tokenized_out.original_number_of_words

        for term in tokenized_out:
            self.partial_index.add(term, self.document.doc_id)

    def build(self) -> PartialIndex:
        for line in self.document.get_lines(self.start, self.end):
            self.add_line(line)

        logger.debug(
            f"Built partial index for lines [{self.start}, {self.end}) of {self.document.doc_id}: "
            f"{self.word_count} words, {len(self.partial_index)} terms"
        )
        return self.partial_index
