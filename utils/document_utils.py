import os
import glob
import logging

logger = logging.getLogger(__name__)


def list_documents(documents_dir: str, pattern: str = "*.doc.txt") -> list[str]:
    if not os.path.isdir(documents_dir):
        raise FileNotFoundError(f"Documents directory {documents_dir} does not exist")

    documents = sorted(glob.glob(os.path.join(documents_dir, pattern)))
    logger.info(f"Found {len(documents)} documents in {documents_dir}")

    return documents
