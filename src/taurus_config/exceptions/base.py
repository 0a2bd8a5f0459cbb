"""
Base exception classes for taurus-config.

Every error carries an ExceptionContext: a help line for the CLI, a stable
error code, the configuration source it concerns and a short correlation id
that ties the CLI message to the matching log record.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Context information for taurus-config exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None


class TaurusConfigError(Exception):
    """Base exception for all taurus-config errors.

    Attributes:
        message: The error message
        help_text: Optional actionable guidance for the user
        error_code: Optional error code for programmatic handling
        context: Where the error happened, e.g. ``{"path": ..., "format": ...}``
        technical_details: The underlying parser or OS message, if any
        correlation_id: Short id shown by the CLI and attached to log records
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        self.technical_details = context.technical_details
        self.correlation_id = context.correlation_id or uuid.uuid4().hex[:8]
        super().__init__(message)

    def log_fields(self) -> Dict[str, Any]:
        """Fields for a log record's ``extra_context``; None values are left out."""
        fields = {"error_code": self.error_code, "correlation_id": self.correlation_id}
        fields.update(self.context)
        return {k: v for k, v in fields.items() if v is not None}

    def __str__(self) -> str:
        result = self.message

        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        context_items = [f"{k}: {v}" for k, v in self.context.items() if v is not None]
        if context_items:
            result += f"\n\nContext: {', '.join(context_items)}"

        result += f"\n\nError ID: {self.correlation_id}"
        return result
