import logging

from inverted_index.errors import DocumentReadError
from inverted_index.structures import Document

logger = logging.getLogger(__name__)


def read_document(document_path: str, encoding: str = "utf-8") -> Document:
    """
    Reads the whole document into an immutable `Document`
    The document path is used as the document identifier.

    Raises:
        DocumentReadError: the file is missing, unreadable or not valid text
    """
    try:
        with open(document_path, "r", encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading document {document_path}: {e}")
        raise DocumentReadError(document_path, str(e)) from e

    document = Document.from_text(document_path, content)
    logger.info(f"Read document {document_path} with {len(document)} lines")

    return document
