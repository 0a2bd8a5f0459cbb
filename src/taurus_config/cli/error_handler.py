"""
Centralized error handling for the taurus-config CLI.

Every command is wrapped so that library errors are rendered consistently and
mapped onto stable exit codes instead of tracebacks.
"""

import logging
from functools import wraps
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape

from ..exceptions import CLIError, ConfigurationError, TaurusConfigError

logger = logging.getLogger(__name__)

EXIT_GENERIC = 1
EXIT_USAGE = 2
EXIT_CONFIGURATION = 3


class CLIErrorHandler:
    """Render taurus-config errors on the console and pick the exit code."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def _render(self, title: str, error: TaurusConfigError) -> None:
        self.console.print(f"[red]{title}: {escape(error.message)}[/red]")
        if error.help_text:
            self.console.print(f"[blue]Help: {escape(error.help_text)}[/blue]")
        self.console.print(f"[dim]Error ID: {error.correlation_id}[/dim]")

    def handle(self, error: TaurusConfigError) -> int:
        """Print ``error`` and return the exit code for it."""
        if isinstance(error, ConfigurationError):
            self._render("Configuration Error", error)
            code = EXIT_CONFIGURATION
        elif isinstance(error, CLIError):
            self._render("Usage Error", error)
            code = EXIT_USAGE
        else:
            self._render("Error", error)
            code = EXIT_GENERIC

        logger.debug(
            f"{error.__class__.__name__}: {error.message}",
            extra={"extra_context": error.log_fields()},
        )
        return code


def handle_cli_errors(func: Callable) -> Callable:
    """Decorator turning TaurusConfigError into a rendered message and exit code."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TaurusConfigError as e:
            raise SystemExit(CLIErrorHandler().handle(e))
        except KeyboardInterrupt:
            click.echo("\nOperation cancelled by user", err=True)
            raise SystemExit(EXIT_GENERIC)

    return wrapper
