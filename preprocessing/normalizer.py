from abc import ABC, abstractmethod
from preprocessing import Term


class SubNormalizer(ABC):
    @abstractmethod
    def normalize_term(self, term: Term):
        pass


class SingleCharacterCaseNormalizer(SubNormalizer):
    """
    Upper-cases words made of a single ASCII character and lower-cases everything else
        e.g. "a" -> "A", "Hello" -> "hello", "jOker" -> "joker", "é" -> "é"
    """

    def normalize_term(self, term: Term):
        if len(term.term) == 1 and term.term.isascii():
            term.term = term.term.upper()
        else:
            term.term = term.term.lower()


class Normalizer:
    def __init__(self, operations: list[SubNormalizer] = []):
        self.operations = operations

    def __call__(self, *args, **kwargs):
        return self.normalize(*args, **kwargs)

    def __repr__(self):
        return f"Normalizer(operations={self.operations})"

    def normalize(self, terms, filter_empty_terms=True):
        new_terms = []
        for term in terms:
            for operation in self.operations:
                operation.normalize_term(term)

            if filter_empty_terms and len(term.term) > 0:
                new_terms.append(term)

        return new_terms
