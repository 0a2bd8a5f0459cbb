"""Check that every configuration file under a path loads."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.store import ConfigStore
from ...exceptions import ConfigurationError
from ..error_handler import handle_cli_errors
from ..utils import resolve_paths
from .show import env_file_option, path_argument

logger = logging.getLogger(__name__)

console = Console()


def check_files(path: Path, env_file: Optional[Path] = None, sort_files: bool = True) -> List[Tuple[Path, Optional[str]]]:
    """Load each file under ``path`` on its own; return ``(file, error or None)``."""
    # Holds the environment shared by the per-file stores
    env_store = ConfigStore(sort_files=sort_files)
    if env_file:
        try:
            env_store.load_env(env_file)
        except ConfigurationError as e:
            logger.error(
                f"Error loading .env file: {e.message}",
                extra={"extra_context": e.log_fields()},
            )

    files = list(env_store.iter_files(path)) if path.is_dir() else [path]
    results = []
    for file_path in files:
        try:
            ConfigStore(environ=env_store.environ).load_config_file(file_path)
        except ConfigurationError as e:
            results.append((file_path, e.message))
        else:
            results.append((file_path, None))
    return results


@click.command()
@path_argument
@env_file_option
@click.pass_context
@handle_cli_errors
def check(ctx: click.Context, path: Optional[Path], env_file: Optional[Path]) -> None:
    """Load every file under PATH strictly and report failures.

    Exits with status 1 when any file fails to load.
    """
    path, env_file = resolve_paths(ctx, "check", path, env_file)
    results = check_files(Path(path), env_file, ctx.obj["settings"].sort_files)

    table = Table(title=f"Configuration files in {escape(str(path))}")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    for file_path, error in results:
        status = "[green]ok[/green]" if error is None else f"[red]{escape(error)}[/red]"
        table.add_row(escape(str(file_path)), status)
    console.print(table)

    failures = sum(1 for _, error in results if error is not None)
    if failures:
        console.print(f"[red]{failures} of {len(results)} files failed to load[/red]")
        ctx.exit(1)
    console.print(f"[green]✓ {len(results)} files loaded[/green]")
