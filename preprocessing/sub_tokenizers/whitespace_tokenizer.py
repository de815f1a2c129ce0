import re

from preprocessing import Term

ASCII_WHITESPACE = " \t\n\x0c\r"


class WhitespaceTokenizer:
    """
    Splits a line into words on runs of ASCII whitespace
    (space, tab, line feed, form feed and carriage return)

    Punctuation is kept as part of the word (e.g. "file." stays "file.")
    and non-ASCII whitespace such as a no-break space does not split words.
    """

    def __init__(self):
        self.split_re = re.compile(f"[{re.escape(ASCII_WHITESPACE)}]+")

    def __call__(self, *args, **kwargs):
        return self.tokenize(*args, **kwargs)

    def tokenize(self, text) -> list[Term]:
        if not text:
            return []

        tokens = []
        for word in self.split_re.split(text):
            if not word:
                continue

            tokens.append(Term(term=word, original_term=word, position=len(tokens)))

        return tokens
