"""CLI commands for calligraphy."""

from calligraphy.cli.commands.expand import expand
from calligraphy.cli.commands.resolve import resolve
from calligraphy.cli.commands.show import show

__all__ = ["show", "resolve", "expand"]
