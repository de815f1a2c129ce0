import logging
import concurrent.futures
import time

from inverted_index.doc_reader import read_document
from inverted_index.errors import WorkerFailure
from inverted_index.index_builder import PartitionIndexBuilder
from inverted_index.index_merger import IndexMerger
from inverted_index.partitioner import calculate_partitions, validate_thread_count
from inverted_index.structures import Document
from preprocessing.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class InMemoryIndex:
    def __init__(self, tokenizer: Tokenizer | None = None):
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self.index_merger = IndexMerger()

    def __len__(self):
        return self.get_term_count()

    def __str__(self):
        return f"{len(self)} inverted indexes in memory"

    def __repr__(self):
        return f"InMemoryIndex(terms={len(self)}, tokenizer={self.tokenizer})"

    def __contains__(self, term: str):
        return self.index_merger.get_postings(term) is not None

    def __getitem__(self, term: str) -> frozenset[str]:
        return self.get_postings(term)

    def index(self, document_path: str, thread_count: int):
        """
        Indexes a single document using `thread_count` worker threads.

        The document is read once and its lines are split into contiguous partitions.
        Each worker builds a partial index for its partition and merges it into the
        shared index under the lock. All workers are joined before returning or raising.

        Raises:
            InvalidThreadCountError: `thread_count` is not a positive integer
            DocumentReadError: the document could not be read. No worker is started
            WorkerFailure: a worker failed. Terms merged by the other workers are kept
        """
        validate_thread_count(thread_count)

        start_time = time.time()
        document = read_document(document_path)
        partitions = calculate_partitions(len(document), thread_count)
        logger.info(
            f"Indexing {document_path} ({len(document)} lines) with {len(partitions)} workers"
        )

        with concurrent.futures.ThreadPoolExecutor(
            max_workers=len(partitions),
        ) as executor:
            futures = [
                executor.submit(self._index_partition, document, start, end)
                for start, end in partitions
            ]

        failures = [
            (idx + 1, future.exception())
            for idx, future in enumerate(futures)
            if future.exception() is not None
        ]
        for ordinal, e in failures:
            logger.error(f"Worker {ordinal} failed while indexing {document_path}: {e!r}")

        if failures:
            ordinal, e = failures[0]
            raise WorkerFailure(ordinal, document_path) from e

        logger.info(
            f"Indexed {document_path} in {time.time() - start_time:.3f}s. Index has {len(self)} terms"
        )

    def _index_partition(self, document: Document, start: int, end: int):
        partial_index = PartitionIndexBuilder(document, start, end, self.tokenizer).build()
        self.index_merger.merge(partial_index)

    def get_term_count(self) -> int:
        return self.index_merger.term_count()

    def get_postings(self, term: str) -> frozenset[str]:
        postings = self.index_merger.get_postings(term)
        if postings is None:
            raise ValueError(f"Term {term} not found in index")

        return postings

    def get_document_frequency(self, term: str) -> int:
        return len(self.get_postings(term))

    def terms(self) -> list[str]:
        return self.index_merger.terms()
