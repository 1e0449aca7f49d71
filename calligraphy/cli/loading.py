"""Config loading shared by the commands that need a font config."""

from __future__ import annotations

import click
from rich.console import Console

from calligraphy.config import FontConfig
from calligraphy.exceptions import CalligraphyError
from calligraphy.loader import init_from_file

console = Console()


def active_config(ctx: click.Context) -> FontConfig:
    """Load the config named by ``--config`` (or the environment) into the store.

    Exits with status 1 when the config cannot be loaded.
    """
    try:
        return init_from_file(ctx.obj.get("config_path"))
    except CalligraphyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e
