"""Entry point for the calligraphy command."""

from __future__ import annotations

from pathlib import Path

import click

from calligraphy import __version__
from calligraphy.cli.commands import expand, resolve, show
from calligraphy.log import setup_logging


@click.group()
@click.version_option(__version__, prog_name="calligraphy")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="Font config YAML file (default: $CALLIGRAPHY_CONFIG)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str) -> None:
    """Resolve font asset paths for text styles."""
    ctx.ensure_object(dict)
    setup_logging(log_level)
    ctx.obj["log_level"] = log_level.upper()
    ctx.obj["config_path"] = config_path


cli.add_command(show)
cli.add_command(resolve)
cli.add_command(expand)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
