"""
Centralized file error handling.

Maps operating-system errors raised while reading configuration sources onto
the taurus-config exception hierarchy so callers only deal with one family.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from ..constants import DEFAULT_FILE_ENCODING
from ..exceptions.config import ConfigPathError

T = TypeVar("T")

logger = logging.getLogger(__name__)

ERROR_TEMPLATES = {
    "file_permission": "Cannot {operation} {file_type}: permission denied",
    "file_not_found": "Cannot {operation} {file_type}: file not found",
    "file_os_error": "Cannot {operation} {file_type}: {error}",
}


class FileOperationHandler:
    """Handles common file operation error patterns with consistent messaging."""

    @staticmethod
    def safe_file_operation(
        file_path: Union[str, Path],
        operation: Callable[[Any], T],
        mode: str = "rb",
        file_type: str = "file",
        operation_name: str = "access",
        error_factory: Optional[Callable[[Union[str, Path], str], Exception]] = None,
    ) -> T:
        """
        Run ``operation`` on an open file handle with consistent error handling.

        Args:
            file_path: Path to the file
            operation: Function to execute with file handle
            mode: File open mode
            file_type: Type description for error messages
            operation_name: Operation description for error messages
            error_factory: Builds the exception raised for OS errors from
                (path, reason); defaults to ConfigPathError

        Returns:
            Result of operation

        Raises:
            ConfigPathError: (or the factory's type) for missing, unreadable
                or otherwise inaccessible files
        """
        factory = error_factory or ConfigPathError
        encoding = None if "b" in mode else DEFAULT_FILE_ENCODING
        try:
            with open(file_path, mode, encoding=encoding) as f:
                return operation(f)
        except FileNotFoundError:
            reason = ERROR_TEMPLATES["file_not_found"].format(
                operation=operation_name, file_type=file_type
            )
        except PermissionError:
            reason = ERROR_TEMPLATES["file_permission"].format(
                operation=operation_name, file_type=file_type
            )
        except (OSError, UnicodeDecodeError) as e:
            reason = ERROR_TEMPLATES["file_os_error"].format(
                operation=operation_name, file_type=file_type, error=e
            )
        logger.debug(f"{reason}: {file_path}")
        raise factory(file_path, reason)

    @staticmethod
    def read_text(
        file_path: Union[str, Path],
        file_type: str = "config file",
        error_factory: Optional[Callable[[Union[str, Path], str], Exception]] = None,
    ) -> str:
        """Read a whole text file, raising a configuration error on failure."""
        return FileOperationHandler.safe_file_operation(
            file_path=file_path,
            operation=lambda f: f.read(),
            mode="r",
            file_type=file_type,
            operation_name="read",
            error_factory=error_factory,
        )
