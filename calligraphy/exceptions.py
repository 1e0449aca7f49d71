"""Exception hierarchy for calligraphy.

Font resolution itself never raises; these cover loading configuration from
files and the environment.
"""

from __future__ import annotations

from pathlib import Path


class CalligraphyError(Exception):
    """Base exception for calligraphy errors."""


class ConfigFileError(CalligraphyError):
    """Raised when a font configuration file cannot be used."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)
