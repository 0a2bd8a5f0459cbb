"""
Unit tests for logging formatters.
"""

import json
import logging
import sys

import pytest
from rich.logging import RichHandler

from taurus_config.logging.formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)


def make_record(msg="Test message", exc_info=None):
    record = logging.LogRecord(
        name="taurus_config.core.store",
        level=logging.INFO,
        pathname="/path/to/store.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.created = 1642684800.0
    return record


@pytest.mark.unit
class TestStructuredFormatter:

    def test_init_default_values(self):
        formatter = StructuredFormatter()
        assert formatter.service_name == "taurus-config"
        assert formatter.version == "unknown"

    def test_format_basic_record(self):
        formatter = StructuredFormatter(service_name="test", version="1.0")

        log_entry = json.loads(formatter.format(make_record()))

        assert log_entry["timestamp"].startswith("2022-01-20T")
        assert log_entry["timestamp"].endswith("+00:00")
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Test message"
        assert log_entry["service"] == "test"
        assert log_entry["version"] == "1.0"
        assert log_entry["logger"] == "taurus_config.core.store"
        assert log_entry["line"] == 42

    def test_format_with_extra_context(self):
        record = make_record()
        record.extra_context = {"path": "app.json"}

        log_entry = json.loads(StructuredFormatter().format(record))

        assert log_entry["path"] == "app.json"

    def test_format_with_exception(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        log_entry = json.loads(StructuredFormatter().format(record))

        assert log_entry["exception"]["type"] == "ValueError"
        assert log_entry["exception"]["message"] == "bad value"
        assert any("ValueError" in line for line in log_entry["exception"]["traceback"])


@pytest.mark.unit
class TestFormatterFactories:

    def test_console_formatter(self):
        formatter = create_console_formatter()
        output = formatter.format(make_record())

        assert "[    INFO] taurus_config.core.store: Test message" in output

    def test_rich_handler(self):
        handler = create_rich_handler()
        assert isinstance(handler, RichHandler)
