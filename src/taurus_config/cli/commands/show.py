"""Show the merged configuration or a single key."""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core import cast
from ..error_handler import handle_cli_errors
from ..utils import flatten, format_value, load_store

console = Console()

VALUE_TYPES = ("raw", "string", "int", "bool", "float", "list", "map")

path_argument = click.argument(
    "path", required=False, type=click.Path(exists=True, path_type=Path)
)
env_file_option = click.option(
    "--env-file", "-e",
    type=click.Path(path_type=Path),
    help="KEY=VALUE file loaded into the environment first (default: TAURUS_ENV_FILE)"
)


@click.command()
@path_argument
@env_file_option
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format"
)
@click.pass_context
@handle_cli_errors
def show(ctx: click.Context, path: Optional[Path], env_file: Optional[Path], output_format: str) -> None:
    """Show the merged configuration found at PATH.

    \b
    Examples:
        taurus-config show config/
        taurus-config show app.yaml --format json
    """
    store = load_store(ctx, "show", path, env_file)

    if output_format == "json":
        click.echo(json.dumps(store.as_dict(), indent=2, default=cast.json_default))
        return

    table = Table(title="Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in flatten(store.as_dict()):
        table.add_row(escape(key), escape(format_value(value)))
    console.print(table)


@click.command()
@click.argument("key")
@path_argument
@env_file_option
@click.option(
    "--type", "value_type",
    type=click.Choice(VALUE_TYPES),
    default="raw",
    help="Typed getter used to read the value"
)
@click.pass_context
@handle_cli_errors
def get(ctx: click.Context, key: str, path: Optional[Path], env_file: Optional[Path], value_type: str) -> None:
    """Print the value at dotted KEY (e.g. http.port).

    Missing keys print the zero value of the requested type, or nothing for
    --type raw.
    """
    store = load_store(ctx, "get", path, env_file)

    getters = {
        "raw": store.get,
        "string": store.get_string,
        "int": store.get_int,
        "bool": store.get_bool,
        "float": store.get_float,
        "list": store.get_string_list,
        "map": store.get_string_map,
    }
    value = getters[value_type](key)

    if value is None:
        return
    if isinstance(value, bool):
        click.echo("true" if value else "false")
    else:
        click.echo(format_value(value))
