"""Tests for the shutdown signal handling."""

import json
import signal

import pytest

from api import lifecycle
from utils.logger import LoggerClient


@pytest.fixture()
def file_logger(tmp_path, monkeypatch):
    log_client = LoggerClient(log_file=str(tmp_path / "api.log"))
    monkeypatch.setattr(lifecycle, "logger", log_client)
    yield log_client
    lifecycle.shutdown_event.clear()


class TestSignalHandler:
    def test_sets_shutdown_event(self, file_logger):
        lifecycle._signal_handler(signal.SIGTERM, None)

        assert lifecycle.shutdown_event.is_set()

    def test_logs_the_signal(self, file_logger):
        lifecycle._signal_handler(signal.SIGINT, None)

        with open(file_logger.log_file) as f:
            entry = json.loads(f.readline())
        assert entry["type"] == "info"
        assert entry["context"] == {"signal": int(signal.SIGINT)}
        assert "graceful shutdown" in entry["message"]
