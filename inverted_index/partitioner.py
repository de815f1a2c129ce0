from inverted_index.errors import InvalidThreadCountError


def validate_thread_count(thread_count):
    # rejects True/False as well
    if (
        not isinstance(thread_count, int)
        or isinstance(thread_count, bool)
        or thread_count <= 0
    ):
        raise InvalidThreadCountError(thread_count)

    return thread_count


def calculate_partitions(line_count: int, thread_count: int) -> list[tuple[int, int]]:
    """
    Splits `line_count` lines into contiguous (start, end) ranges, one per worker

    Fewer workers than `thread_count` are used when the document has fewer lines than that,
    except for an empty document, which still gets `thread_count` empty ranges.
    Every worker gets the same number of lines and the last one also takes the remainder
        e.g. 10 lines over 3 workers -> [(0, 3), (3, 6), (6, 10)]
    """
    validate_thread_count(thread_count)
    if line_count < 0:
        raise ValueError(f"Line count must not be negative, got {line_count}")

    num_workers = line_count if 0 < line_count < thread_count else thread_count

    leftover = line_count % num_workers
    lines_per_worker = (line_count - leftover) // num_workers

    partitions = []
    for i in range(num_workers):
        start = i * lines_per_worker
        end = start + lines_per_worker
        if i == num_workers - 1:
            end += leftover

        partitions.append((start, end))

    return partitions
