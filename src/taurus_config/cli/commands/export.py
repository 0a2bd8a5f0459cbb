"""Export the merged configuration to JSON, YAML or TOML."""

import json
from pathlib import Path
from typing import Any, Optional

import click
import tomli_w
import yaml
from rich.console import Console

from ...constants import JSON_EXTENSIONS, TOML_EXTENSIONS, YAML_EXTENSIONS
from ...core import cast
from ...exceptions import ConfigurationError, ExceptionContext, UnsupportedFormatError
from ...utils.error_handling import FileOperationHandler
from ..error_handler import handle_cli_errors
from ..utils import load_store
from .show import env_file_option, path_argument

console = Console()

EXPORT_EXTENSIONS = JSON_EXTENSIONS + YAML_EXTENSIONS + TOML_EXTENSIONS


def _filter_none_values(data: Any) -> Any:
    """Recursively filter out None values, which TOML cannot represent."""
    if isinstance(data, dict):
        return {k: _filter_none_values(v) for k, v in data.items() if v is not None}
    elif isinstance(data, list):
        return [_filter_none_values(item) for item in data if item is not None]
    else:
        return data


def render(data: dict, suffix: str) -> str:
    """Serialize ``data`` for a file with extension ``suffix``."""
    if suffix in JSON_EXTENSIONS:
        return json.dumps(data, indent=2, default=cast.json_default) + "\n"
    if suffix in YAML_EXTENSIONS:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if suffix in TOML_EXTENSIONS:
        return tomli_w.dumps(_filter_none_values(data))
    raise ValueError(f"No exporter for '{suffix}'")


@click.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@path_argument
@env_file_option
@click.pass_context
@handle_cli_errors
def export(ctx: click.Context, output: Path, path: Optional[Path], env_file: Optional[Path]) -> None:
    """Write the merged configuration at PATH to OUTPUT.

    The format follows OUTPUT's extension: .json, .yaml/.yml or .toml.

    \b
    Examples:
        taurus-config export merged.json config/
        taurus-config export merged.toml config/ --env-file .env
    """
    suffix = output.suffix.lower()
    if suffix not in EXPORT_EXTENSIONS:
        raise UnsupportedFormatError(output, EXPORT_EXTENSIONS)

    store = load_store(ctx, "export", path, env_file)

    try:
        content = render(store.as_dict(), suffix)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Cannot export configuration as {suffix}: {e}",
            ExceptionContext(
                help_text="Export to .json, which accepts any loaded value",
                error_code="CONFIG_EXPORT",
            ),
        ) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    FileOperationHandler.safe_file_operation(
        file_path=output,
        operation=lambda f: f.write(content),
        mode="w",
        file_type="export file",
        operation_name="write",
    )
    console.print(f"[green]✓ Configuration exported to {output}[/green]")
