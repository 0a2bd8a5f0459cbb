"""
Log formatters for different output formats.

Provides structured JSON formatting, console formatting, and Rich terminal output.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from ..constants import DEFAULT_SERVICE_NAME


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME, version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "extra_context"):
            log_entry.update(record.extra_context)

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


def create_console_formatter() -> logging.Formatter:
    """Create a console formatter for human-readable output."""
    return logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_rich_handler() -> logging.Handler:
    """Create a Rich handler for enhanced terminal output."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
