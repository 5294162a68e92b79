"""Tests for carcenter.logging."""

from __future__ import annotations

import logging

import pytest
import structlog

from carcenter.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_mode(self):
        setup_logging(json=True, level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_console_mode(self):
        setup_logging(json=False, level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_case_insensitive(self):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_replaces_existing_handlers(self):
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())
        setup_logging()
        assert len(root.handlers) == 1

    def test_uvicorn_loggers_propagate_to_root(self):
        logging.getLogger("uvicorn.access").addHandler(logging.StreamHandler())
        setup_logging()
        access = logging.getLogger("uvicorn.access")
        assert access.handlers == []
        assert access.propagate is True

    def test_json_output(self, capsys):
        setup_logging(json=True, level="DEBUG")
        structlog.get_logger("test_logger").info("user_login", username="alice")
        out = capsys.readouterr().out
        assert '"event": "user_login"' in out
        assert '"username": "alice"' in out
