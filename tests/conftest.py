"""Pytest configuration and shared fixtures for calligraphy tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

import calligraphy
from calligraphy import ConfigStore

TEMPLATE_PATH = "fonts/Roboto-{style}.ttf"


@pytest.fixture(autouse=True)
def clean_default_store(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate every test from the process-wide config and env overrides."""
    for name in ("CALLIGRAPHY_CONFIG", "CALLIGRAPHY_FONT_PATH", "CALLIGRAPHY_ATTRIBUTE_ID"):
        monkeypatch.delenv(name, raising=False)
    calligraphy.reset()
    yield
    calligraphy.reset()


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo handlers and settings the CLI attaches to the package logger."""
    logger = logging.getLogger("calligraphy")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def store() -> ConfigStore:
    """Return a fresh store independent of the global one."""
    return ConfigStore()


@pytest.fixture
def template_config_file(tmp_path: Path) -> Path:
    """Create a YAML config using a templated regular path."""
    config_path = tmp_path / "fonts.yaml"
    config_path.write_text(
        "fonts:\n"
        f"  regular: {TEMPLATE_PATH}\n"
        "attribute_id: 100\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def explicit_config_file(tmp_path: Path) -> Path:
    """Create a YAML config with explicit style variants."""
    config_path = tmp_path / "explicit.yaml"
    config_path.write_text(
        "fonts:\n"
        "  regular: fonts/Lato-Regular.ttf\n"
        "  bold: fonts/Lato-Black.ttf\n",
        encoding="utf-8",
    )
    return config_path
