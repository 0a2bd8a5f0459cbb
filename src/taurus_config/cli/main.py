#!/usr/bin/env python3
"""taurus-config CLI main entry point.

Inspect layered configuration from the command line: show the merged store,
read single keys with the typed getters, export to another format and check
that every file in a directory decodes.
"""

from typing import Optional

import click
from pydantic import ValidationError

from .. import __version__
from ..logging import LoggingConfig, configure_logging, level_from_verbosity
from ..logging.config import FORMAT_TYPES
from ..settings import LoaderSettings
from .commands.check import check
from .commands.export import export
from .commands.show import get, show


def setup_logging(settings: LoaderSettings, verbose: int = 0, log_format: Optional[str] = None) -> None:
    """Set up logging from loader settings and command-line verbosity."""
    configure_logging(
        LoggingConfig(
            level=level_from_verbosity(verbose, settings.log_level),
            format_type=log_format or settings.log_format,
            output="console",
            service_name="taurus-config-cli",
            version=__version__,
        )
    )


@click.group()
@click.version_option(version=__version__, prog_name="taurus-config")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--log-format",
    type=click.Choice(FORMAT_TYPES),
    default=None,
    help="Log output format (default: TAURUS_LOG_FORMAT or console)"
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, log_format: Optional[str]) -> None:
    """taurus-config: layered application configuration.

    Loads JSON, YAML, TOML and XML files, resolves ${NAME:default}
    placeholders from the environment and merges everything into one store.

    \b
    Examples:
        taurus-config show config/ --env-file .env.local
        taurus-config get http.port config/ --type int
        taurus-config export merged.toml config/
        taurus-config check config/
    """
    try:
        settings = LoaderSettings()
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="TAURUS_* environment")

    setup_logging(settings, verbose, log_format)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose


cli.add_command(show)
cli.add_command(get)
cli.add_command(export)
cli.add_command(check)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
