"""Resolve command - print the font path for a style."""

from __future__ import annotations

import click
from rich.console import Console

from calligraphy.cli.loading import active_config
from calligraphy.styles import parse_style

console = Console()


@click.command()
@click.argument("style", default="normal")
@click.pass_context
def resolve(ctx: click.Context, style: str) -> None:
    """Print the font path applied to STYLE (normal, bold, italic, bold-italic)."""
    config = active_config(ctx)

    try:
        font_style = parse_style(style)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    path = config.get_styled_font_path(font_style)
    if path is None:
        console.print("[yellow]No font configured, platform default applies[/yellow]")
        return
    click.echo(path)
