class InvertedIndexError(Exception):
    pass


class DocumentReadError(InvertedIndexError, OSError):
    """
    Raised when a document cannot be read (missing, permission denied, invalid encoding)
    The underlying exception is available as `__cause__`
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read document {path}: {reason}")

    def __str__(self):
        return self.args[0]


class WorkerFailure(InvertedIndexError):
    """
    Raised when a worker terminates abnormally while tokenizing or merging its partition.
    `ordinal` is 1-based. Merges committed by other workers are kept.
    """

    def __init__(self, ordinal: int, document_path: str = ""):
        self.ordinal = ordinal
        self.document_path = document_path
        super().__init__(
            f"Something went wrong in worker {ordinal} while indexing {document_path}"
        )


class InvalidThreadCountError(InvertedIndexError, ValueError):
    def __init__(self, thread_count):
        self.thread_count = thread_count
        super().__init__(
            f"Thread count must be a positive integer, got {thread_count!r}"
        )
