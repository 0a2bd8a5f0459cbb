"""Command-line interface for taurus-config."""

from .main import cli, main

__all__ = ["cli", "main"]
