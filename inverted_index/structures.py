from dataclasses import dataclass


Postings = set[str]


def split_lines(content: str) -> tuple[str, ...]:
    """
    Lines are separated by "\\n", a trailing "\\r" is dropped from each line
    and a final newline does not start an extra empty line
    """
    if not content:
        return ()

    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()

    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


@dataclass(frozen=True)
class Document:
    doc_id: str
    lines: tuple[str, ...]

    @staticmethod
    def from_text(doc_id: str, content: str) -> "Document":
        return Document(doc_id, split_lines(content))

    def __len__(self):
        return len(self.lines)

    def get_lines(self, start: int, end: int) -> tuple[str, ...]:
        return self.lines[start:end]


class PartialIndex:
    """
    Term -> postings built by a single worker before it is merged into the shared index
    """

    def __init__(self):
        self.term_map: dict[str, Postings] = {}

    def __len__(self):
        return len(self.term_map)

    def add(self, term: str, doc_id: str):
        postings = self.term_map.get(term)
        if postings is None:
            self.term_map[term] = {doc_id}
        else:
            postings.add(doc_id)

    def items(self):
        return self.term_map.items()
