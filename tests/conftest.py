import pytest

SCENARIO_TEXT = (
    "Hello its an inverted index test file. Just to see how it works and indexes this file."
)


@pytest.fixture
def write_document(tmp_path):
    """Write `content` to a file under tmp_path and return its path as a string."""

    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def scenario_document(write_document):
    return write_document("inverted_index_test_1.txt", SCENARIO_TEXT)
