"""Tests for the JSON-lines logger."""

import json

from utils import logger as logger_module
from utils.logger import LoggerClient


class TestLogSync:
    def test_appends_json_lines(self, tmp_path):
        log_client = LoggerClient(log_file=str(tmp_path / "logs" / "api.log"))

        log_client.log_sync("error", "first", {"query": "whip"})
        log_client.log_sync("info", "second")

        with open(log_client.log_file) as f:
            entries = [json.loads(line) for line in f]
        assert [e["message"] for e in entries] == ["first", "second"]
        assert entries[0]["context"] == {"query": "whip"}
        assert entries[1]["context"] == {}

    def test_console_only_without_a_file(self, monkeypatch, capsys):
        monkeypatch.delenv("LOG_FILE_PATH", raising=False)
        log_client = LoggerClient()

        assert log_client.log_sync("info", "hello")
        assert log_client.log_file is None
        assert "[info] hello" in capsys.readouterr().out

    def test_rotates_large_files(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logger_module, "LOG_ROTATION_SIZE", 10)
        log_client = LoggerClient(log_file=str(tmp_path / "api.log"))

        log_client.log_sync("info", "x" * 50)
        log_client.log_sync("info", "after rotation")

        rotated = [p.name for p in tmp_path.iterdir() if p.name != "api.log"]
        assert len(rotated) == 1
        with open(log_client.log_file) as f:
            assert [json.loads(line)["message"] for line in f] == ["after rotation"]
