"""Command-line interface for calligraphy."""

from calligraphy.cli.main import cli

__all__ = ["cli"]
