"""
taurus-config exception hierarchy.

Exception Hierarchy:
    TaurusConfigError (base)
    ├── ConfigurationError
    │   ├── ConfigPathError
    │   ├── ConfigDecodeError
    │   ├── UnsupportedFormatError
    │   └── EnvFileError
    └── CLIError
        └── InvalidCommandError
"""

from .base import ExceptionContext, TaurusConfigError
from .cli import CLIError, InvalidCommandError
from .config import (
    ConfigDecodeError,
    ConfigPathError,
    ConfigurationError,
    EnvFileError,
    UnsupportedFormatError,
)

__all__ = [
    "TaurusConfigError",
    "ExceptionContext",
    "ConfigurationError",
    "ConfigPathError",
    "ConfigDecodeError",
    "UnsupportedFormatError",
    "EnvFileError",
    "CLIError",
    "InvalidCommandError",
]
