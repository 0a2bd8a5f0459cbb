"""
Logging configuration management.

Provides configuration classes and utilities for setting up logging.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_SERVICE_NAME,
)

FORMAT_TYPES = ("console", "json", "rich")
OUTPUTS = ("console", "file")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file", ["console", "file"]
        file_path: Optional[Path] = None,
        max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = DEFAULT_SERVICE_NAME,
        version: str = "unknown",
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        if format_type not in FORMAT_TYPES:
            raise ValueError(
                f"Unknown log format '{format_type}', expected one of {', '.join(FORMAT_TYPES)}"
            )
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version


def create_default_config() -> LoggingConfig:
    """Create a default logging configuration."""
    return LoggingConfig(
        level=logging.WARNING,
        format_type="console",
        output="console",
    )


def level_from_verbosity(verbose: int, base: Union[str, int] = logging.WARNING) -> int:
    """Map a -v count onto a logging level, never going above ``base``."""
    base_level = base if isinstance(base, int) else getattr(logging, base.upper())
    if verbose >= 2:
        return min(base_level, logging.DEBUG)
    if verbose == 1:
        return min(base_level, logging.INFO)
    return base_level
