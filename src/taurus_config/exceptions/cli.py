"""
CLI-related exceptions.
"""

from .base import ExceptionContext, TaurusConfigError


class CLIError(TaurusConfigError):
    """Base class for command-line interface errors."""
    pass


class InvalidCommandError(CLIError):
    """Raised when a command is given arguments it cannot act on."""

    def __init__(self, command: str, reason: str):
        self.command = command
        message = f"Invalid usage of '{command}': {reason}"
        context = ExceptionContext(
            help_text=f"Run 'taurus-config {command} --help' for usage",
            error_code="CLI_INVALID",
        )
        super().__init__(message, context)
