"""
Configuration-related exceptions.

All exceptions raised while locating, reading and decoding configuration sources.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from .base import ExceptionContext, TaurusConfigError

PathLike = Union[str, Path]


class ConfigurationError(TaurusConfigError):
    """Base class for configuration-related errors."""
    pass


class ConfigPathError(ConfigurationError):
    """Raised when a configuration path cannot be accessed."""

    def __init__(self, path: PathLike, reason: str):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to access config path: {self.path}: {reason}"
        context = ExceptionContext(
            help_text="Check that the path exists and is readable",
            error_code="CONFIG_PATH",
            context={"path": self.path},
        )
        super().__init__(message, context)


class ConfigDecodeError(ConfigurationError):
    """Raised when a configuration file contains malformed content."""

    def __init__(self, path: PathLike, format_name: str, reason: str):
        self.path = str(path)
        self.format_name = format_name
        self.reason = reason
        message = f"Failed to parse {format_name} config file: {self.path}; error: {reason}"
        context = ExceptionContext(
            help_text=f"Fix the {format_name} syntax in {self.path}",
            error_code="CONFIG_DECODE",
            context={"path": self.path, "format": format_name},
            technical_details=reason,
        )
        super().__init__(message, context)


class UnsupportedFormatError(ConfigurationError):
    """Raised when a configuration file has an unrecognized extension."""

    def __init__(self, path: PathLike, supported: Sequence[str] = ()):
        self.path = str(path)
        self.supported = list(supported)
        message = f"Unsupported config file format: {self.path}"
        help_text = None
        if self.supported:
            help_text = f"Use one of the supported extensions: {', '.join(self.supported)}"
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_UNSUPPORTED",
            context={"path": self.path},
        )
        super().__init__(message, context)


class EnvFileError(ConfigurationError):
    """Raised when an environment file cannot be read."""

    def __init__(self, path: PathLike, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to read env file: {self.path}"
        if reason:
            message += f": {reason}"
        context = ExceptionContext(
            help_text="Check the env file path or omit it",
            error_code="ENV_FILE",
            context={"path": self.path},
        )
        super().__init__(message, context)
