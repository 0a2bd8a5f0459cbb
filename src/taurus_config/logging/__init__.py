"""
taurus-config logging package.

- config: LoggingConfig and verbosity helpers
- formatters: console, JSON and Rich output
- manager: LoggingManager singleton that owns the root handlers
"""

from .config import LoggingConfig, create_default_config, level_from_verbosity
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "StructuredFormatter",
    "configure_logging",
    "create_console_formatter",
    "create_default_config",
    "create_rich_handler",
    "get_logger",
    "level_from_verbosity",
    "logging_manager",
]
