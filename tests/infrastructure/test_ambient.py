"""Tests for settings and structured logging."""

import io
import json
import logging
import sys

import pytest

from watchstore.config import DEFAULT_DATABASE_URL, Settings
from watchstore.logging_config import (
    StructuredFormatter,
    configure_logging,
    get_logger,
)


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in (
            "WATCHSTORE_DATABASE_URL",
            "WATCHSTORE_LOG_LEVEL",
            "WATCHSTORE_SQL_ECHO",
            "WATCHSTORE_LOW_STOCK_WATCH",
            "WATCHSTORE_LOW_STOCK_COMPONENT",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.log_level == "INFO"
        assert settings.sql_echo is False
        assert settings.low_stock_watch_threshold == 5
        assert settings.low_stock_component_threshold == 10

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("WATCHSTORE_DATABASE_URL", "sqlite://")
        monkeypatch.setenv("WATCHSTORE_LOG_LEVEL", "debug")
        monkeypatch.setenv("WATCHSTORE_SQL_ECHO", "yes")
        monkeypatch.setenv("WATCHSTORE_LOW_STOCK_COMPONENT", "3")
        settings = Settings.from_env()
        assert settings.database_url == "sqlite://"
        assert settings.log_level == "DEBUG"
        assert settings.sql_echo is True
        assert settings.low_stock_component_threshold == 3

    def test_bad_threshold(self, monkeypatch):
        monkeypatch.setenv("WATCHSTORE_LOW_STOCK_WATCH", "many")
        with pytest.raises(ValueError, match="WATCHSTORE_LOW_STOCK_WATCH"):
            Settings.from_env()


class TestLogging:

    def test_get_logger_is_namespaced(self):
        assert get_logger("ledger").name == "watchstore.ledger"
        assert get_logger("watchstore.ledger").name == "watchstore.ledger"

    def test_json_line_with_extras(self):
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("test").info("order_created", extra={"order_id": "o-1", "items": 2})

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "order_created"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "watchstore.test"
        assert payload["order_id"] == "o-1"
        assert payload["items"] == 2

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        get_logger("test").info("quiet")
        assert stream.getvalue() == ""

    def test_configure_is_idempotent(self):
        configure_logging(logging.INFO, stream=io.StringIO())
        configure_logging(logging.DEBUG, stream=io.StringIO())
        root = logging.getLogger("watchstore")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_default_handler_follows_swapped_stderr(self, monkeypatch):
        configure_logging(logging.INFO)
        first, second = io.StringIO(), io.StringIO()

        monkeypatch.setattr(sys, "stderr", first)
        get_logger("test").info("to_first")
        monkeypatch.setattr(sys, "stderr", second)
        get_logger("test").info("to_second")

        assert json.loads(first.getvalue())["message"] == "to_first"
        assert json.loads(second.getvalue())["message"] == "to_second"
        handler = logging.getLogger("watchstore").handlers[0]
        assert not isinstance(handler, logging.StreamHandler)

    def test_exception_fields(self):
        record = logging.LogRecord("watchstore.x", logging.ERROR, __file__, 1, "failed", (), None)
        try:
            raise ValueError("bad")
        except ValueError:
            record.exc_info = sys.exc_info()
        payload = json.loads(StructuredFormatter().format(record))
        assert payload["exc_type"] == "ValueError"
        assert payload["exc_message"] == "bad"
