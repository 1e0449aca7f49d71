"""Show command - display the active font configuration."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from calligraphy.cli.loading import active_config

console = Console()


@click.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show configured font paths."""
    config = active_config(ctx)

    table = Table(title="Font Configuration")
    table.add_column("Style", style="cyan")
    table.add_column("Path", style="green")

    for label, path in (
        ("normal", config.font_path),
        ("bold", config.bold_font_path),
        ("italic", config.italic_font_path),
        ("bold-italic", config.bold_italic_font_path),
    ):
        table.add_row(label, path if path else "[dim]not set[/dim]")

    console.print(table)
    console.print(f"\n[bold]Font set:[/bold] {'yes' if config.is_font_set else 'no'}")
    attr = config.attribute_id if config.attribute_id is not None else "not set"
    console.print(f"[bold]Attribute id:[/bold] {attr}")
