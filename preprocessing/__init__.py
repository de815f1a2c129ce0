from dataclasses import dataclass


@dataclass
class Term:
    term: str = ""
    original_term: str = ""  # raw word before normalization
    position: int = -1  # word position within the tokenized line
