"""Shared helpers for taurus-config."""

from .error_handling import FileOperationHandler

__all__ = ["FileOperationHandler"]
