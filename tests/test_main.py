import pytest

from constants.index import LOG_LEVELS, get_choice_env, get_positive_int_env
from inverted_index.main import main


class TestMain:
    def test_indexes_given_documents(self, scenario_document, write_document, capsys):
        second = write_document("second.txt", "boss.\njOker")

        assert main([scenario_document, second, "--threads", "4"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "16 inverted indexes in memory",
            "18 inverted indexes in memory",
        ]

    def test_indexes_documents_dir(self, tmp_path, capsys):
        (tmp_path / "1.doc.txt").write_text("one two", encoding="utf-8")
        (tmp_path / "2.doc.txt").write_text("two three", encoding="utf-8")
        (tmp_path / "ignored.txt").write_text("four", encoding="utf-8")

        assert main(["--documents-dir", str(tmp_path), "--threads", "2"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "2 inverted indexes in memory",
            "3 inverted indexes in memory",
        ]

    def test_missing_documents_dir(self, tmp_path):
        assert main(["--documents-dir", str(tmp_path / "missing")]) == 1

    def test_unreadable_document(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_thread_count(self, scenario_document):
        assert main([scenario_document, "--threads", "0"]) == 1

    def test_log_level_is_case_insensitive(self, scenario_document):
        assert main([scenario_document, "--threads", "1", "--log-level", "debug"]) == 0

    def test_unknown_log_level(self, scenario_document):
        with pytest.raises(SystemExit) as exc_info:
            main([scenario_document, "--log-level", "verbose"])

        assert exc_info.value.code == 2


class TestEnvironmentConfig:
    def test_thread_count_from_env(self, monkeypatch):
        monkeypatch.setenv("INVERTED_INDEX_THREADS", "8")
        assert get_positive_int_env("INVERTED_INDEX_THREADS", 100) == 8

    def test_thread_count_unset(self, monkeypatch):
        monkeypatch.delenv("INVERTED_INDEX_THREADS", raising=False)
        assert get_positive_int_env("INVERTED_INDEX_THREADS", 100) == 100

    @pytest.mark.parametrize("value", ["many", "", "-3", "0", "2.5"])
    def test_invalid_thread_count_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("INVERTED_INDEX_THREADS", value)
        assert get_positive_int_env("INVERTED_INDEX_THREADS", 100) == 100

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("INVERTED_INDEX_LOG_LEVEL", "warning")
        assert get_choice_env("INVERTED_INDEX_LOG_LEVEL", LOG_LEVELS, "INFO") == "WARNING"

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("INVERTED_INDEX_LOG_LEVEL", "verbose")
        assert get_choice_env("INVERTED_INDEX_LOG_LEVEL", LOG_LEVELS, "INFO") == "INFO"
