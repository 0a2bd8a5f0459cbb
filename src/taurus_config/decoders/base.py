"""
Base decoder interface.

A decoder turns the (placeholder-substituted) text of one configuration file
into a Python value. The registry is responsible for turning decoder failures
into ConfigDecodeError and for enforcing that documents are mappings.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple, Type


class ConfigDecoder(ABC):
    """Abstract base class for configuration file decoders."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable format name used in log and error messages."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> Tuple[str, ...]:
        """Lower-case file extensions, including the leading dot."""
        pass

    @property
    def errors(self) -> Tuple[Type[BaseException], ...]:
        """Exception types that signal malformed content."""
        return (ValueError,)

    @abstractmethod
    def decode(self, content: str) -> Any:
        """Decode file text into a value."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(self.extensions)})"
