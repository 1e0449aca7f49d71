"""Expand command - show the style variants of a templated path."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from calligraphy.templates import STYLE_MARKER, expand_font_paths, is_templated_path

console = Console()


@click.command()
@click.argument("template")
def expand(template: str) -> None:
    """Expand TEMPLATE into normal, bold, italic and bold-italic paths."""
    if not is_templated_path(template):
        console.print(f"[red]Error:[/red] '{template}' has no {STYLE_MARKER} marker")
        raise SystemExit(1)

    table = Table(title="Expanded Font Paths")
    table.add_column("Style", style="cyan")
    table.add_column("Path", style="green")

    labels = ("normal", "bold", "italic", "bold-italic")
    for label, path in zip(labels, expand_font_paths(template)):
        table.add_row(label, path)

    console.print(table)
