import argparse
import logging
import sys

from tqdm import tqdm

from constants.index import (
    DEFAULT_THREAD_COUNT,
    DOCUMENTS_DIR,
    DOCUMENT_PATTERN,
    LOG_LEVEL,
    LOG_LEVELS,
)
from inverted_index.errors import InvertedIndexError
from inverted_index.in_memory_index import InMemoryIndex
from utils.document_utils import list_documents

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Build an in-memory inverted index over a set of text documents"
    )
    parser.add_argument(
        "documents",
        nargs="*",
        help="Documents to index. Defaults to every matching file in --documents-dir",
    )
    parser.add_argument("--threads", type=int, default=DEFAULT_THREAD_COUNT)
    parser.add_argument("--documents-dir", type=str, default=DOCUMENTS_DIR)
    parser.add_argument("--pattern", type=str, default=DOCUMENT_PATTERN)
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=LOG_LEVEL
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    documents = args.documents
    if not documents:
        try:
            documents = list_documents(args.documents_dir, args.pattern)
        except FileNotFoundError as e:
            logger.error(str(e))
            return 1

    inverted_index = InMemoryIndex()
    for document_path in tqdm(documents, desc="Indexing", unit="doc"):
        try:
            inverted_index.index(document_path, args.threads)
        except InvertedIndexError as e:
            logger.error(f"Failed to index {document_path}: {e}")
            return 1

        tqdm.write(str(inverted_index))

    return 0


if __name__ == "__main__":
    sys.exit(main())
