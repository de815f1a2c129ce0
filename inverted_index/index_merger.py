import logging
import threading

from inverted_index.structures import PartialIndex, Postings

logger = logging.getLogger(__name__)


class IndexMerger:
    """
    Owns the shared term map and the only lock protecting it.

    Workers tokenize without the lock and call `merge` once with their partial index.
    Merging is a set union per term, so the result does not depend on the order
    in which workers reach the lock.
    """

    def __init__(self):
        self.term_map: dict[str, Postings] = {}
        self.lock = threading.Lock()

    def merge(self, partial_index: PartialIndex):
        with self.lock:
            new_terms = 0
            for term, postings in partial_index.items():
                existing = self.term_map.get(term)
                if existing is None:
                    self.term_map[term] = set(postings)
                    new_terms += 1
                else:
                    existing.update(postings)

            term_count = len(self.term_map)

        logger.debug(
            f"Merged {len(partial_index)} terms ({new_terms} new), index now has {term_count} terms"
        )

    def term_count(self) -> int:
        with self.lock:
            return len(self.term_map)

    def get_postings(self, term: str) -> frozenset[str] | None:
        with self.lock:
            postings = self.term_map.get(term)
            if postings is None:
                return None

            return frozenset(postings)

    def terms(self) -> list[str]:
        with self.lock:
            return sorted(self.term_map.keys())
