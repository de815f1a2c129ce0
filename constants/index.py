import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_positive_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default

    if not value.strip().isdigit() or int(value) <= 0:
        logger.warning(f"Ignoring {name}={value!r}, expected a positive integer")
        return default

    return int(value)


def get_choice_env(name: str, choices, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default

    if value.upper() not in choices:
        logger.warning(f"Ignoring {name}={value!r}, expected one of {choices}")
        return default

    return value.upper()


DEFAULT_THREAD_COUNT = get_positive_int_env("INVERTED_INDEX_THREADS", 100)
DOCUMENTS_DIR = os.getenv("INVERTED_INDEX_DOCUMENTS_DIR", "documents")
DOCUMENT_PATTERN = os.getenv("INVERTED_INDEX_DOCUMENT_PATTERN", "*.doc.txt")
LOG_LEVEL = get_choice_env("INVERTED_INDEX_LOG_LEVEL", LOG_LEVELS, "INFO")
