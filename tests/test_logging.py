"""Tests for logging helpers."""

import logging

import pytest

from scriptree import resolve_scripts
from scriptree.logging import log_operation, logger, set_log_level


class TestLogOperation:
    """Tests for log_operation."""

    def test_logs_start_and_completion(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="scriptree")
        with log_operation("resolve_scripts", {"scripts": 3}) as timing:
            pass
        assert "Starting resolve_scripts scripts=3" in caplog.text
        assert "Completed resolve_scripts" in caplog.text
        assert timing.elapsed_ms >= 0

    def test_logs_and_reraises_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="scriptree")
        with pytest.raises(RuntimeError):
            with log_operation("resolve_scripts"):
                raise RuntimeError("boom")
        assert "resolve_scripts failed" in caplog.text
        assert "boom" in caplog.text

    def test_resolver_logs_elapsed_time(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="scriptree")
        resolve_scripts({"build:css": "sass", "build": "npm run build:css"}, {"prune": True})
        assert "Resolved 1 of 2 scripts in" in caplog.text


class TestSetLogLevel:
    """Tests for set_log_level."""

    def test_accepts_names(self) -> None:
        previous = logger.level
        try:
            set_log_level("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
