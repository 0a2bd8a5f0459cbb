"""Helpers shared by the CLI commands."""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

import click

from ..core import cast
from ..core.store import ConfigStore
from ..exceptions import InvalidCommandError
from ..settings import LoaderSettings


def resolve_paths(
    ctx: click.Context, command: str, path: Optional[Path], env_file: Optional[Path]
) -> Tuple[Path, Optional[Path]]:
    """Fill in the config path and env file from TAURUS_* settings when omitted."""
    settings: LoaderSettings = ctx.obj["settings"]
    path = path or settings.config_path
    if path is None:
        raise InvalidCommandError(command, "no PATH given and TAURUS_CONFIG_PATH is not set")
    return path, env_file or settings.env_file


def load_store(ctx: click.Context, command: str, path: Optional[Path], env_file: Optional[Path]) -> ConfigStore:
    """Create and initialize a store the way every command needs it."""
    settings: LoaderSettings = ctx.obj["settings"]
    path, env_file = resolve_paths(ctx, command, path, env_file)
    store = ConfigStore(print_enable=settings.print_enable, sort_files=settings.sort_files)
    return store.initialize(path, env_file)


def flatten(data: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """Yield ``(dotted_key, leaf_value)`` pairs; empty mappings are leaves."""
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict) and value:
            yield from flatten(value, dotted)
        else:
            yield dotted, value


def format_value(value: Any) -> str:
    """Render a leaf value for display: scalars as text, containers as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, default=cast.json_default)
