"""Load font configuration from YAML files or environment variables.

Config file format::

    fonts:
      regular: fonts/Roboto-{style}.ttf
      bold: fonts/Roboto-Bold.ttf        # optional
      italic: fonts/Roboto-Italic.ttf    # optional
      bold_italic: fonts/Roboto-BI.ttf   # optional
    attribute_id: 100                    # optional

When any of bold / italic / bold_italic is given, the four paths are used as
written. Otherwise ``regular`` may be a templated path and is expanded.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from calligraphy.config import FontConfig
from calligraphy.exceptions import ConfigFileError
from calligraphy.store import ConfigStore, default_store

logger = logging.getLogger(__name__)

CONFIG_ENV = "CALLIGRAPHY_CONFIG"
FONT_PATH_ENV = "CALLIGRAPHY_FONT_PATH"
ATTRIBUTE_ID_ENV = "CALLIGRAPHY_ATTRIBUTE_ID"

_FONT_KEYS = ("regular", "bold", "italic", "bold_italic")
_VARIANT_KEYS = _FONT_KEYS[1:]


def _optional_str(value: Any, field_name: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ConfigFileError(
        f"{field_name}: expected string, got {type(value).__name__}"
    )


def _optional_int(value: Any, field_name: str) -> int | None:
    # bool is an int subclass; reject it explicitly
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    raise ConfigFileError(
        f"{field_name}: expected integer, got {type(value).__name__}"
    )


def config_from_mapping(data: dict[str, Any] | None) -> FontConfig:
    """Build a FontConfig from parsed config data.

    Raises:
        ConfigFileError: If a field has the wrong type or an unknown key.
    """
    if data is None:
        return FontConfig()
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"expected a mapping at top level, got {type(data).__name__}"
        )

    fonts = data.get("fonts") or {}
    if isinstance(fonts, str):
        fonts = {"regular": fonts}
    if not isinstance(fonts, dict):
        raise ConfigFileError(
            f"fonts: expected mapping or string, got {type(fonts).__name__}"
        )

    unknown = sorted(set(fonts) - set(_FONT_KEYS), key=str)
    if unknown:
        names = ", ".join(str(key) for key in unknown)
        raise ConfigFileError(f"fonts: unknown keys {names}")

    paths = {
        key: _optional_str(fonts.get(key), f"fonts.{key}") for key in _FONT_KEYS
    }
    attribute_id = _optional_int(data.get("attribute_id"), "attribute_id")

    if any(paths[key] is not None for key in _VARIANT_KEYS):
        return FontConfig(
            paths["regular"],
            paths["bold"],
            paths["italic"],
            paths["bold_italic"],
            attribute_id,
        )
    return FontConfig.from_path(paths["regular"], attribute_id)


def config_from_env(environ: dict[str, str] | None = None) -> FontConfig:
    """Build a FontConfig from CALLIGRAPHY_FONT_PATH / CALLIGRAPHY_ATTRIBUTE_ID."""
    env = os.environ if environ is None else environ
    font_path = env.get(FONT_PATH_ENV) or None
    raw_attr = env.get(ATTRIBUTE_ID_ENV)

    attribute_id = None
    if raw_attr:
        try:
            attribute_id = int(raw_attr)
        except ValueError:
            raise ConfigFileError(
                f"{ATTRIBUTE_ID_ENV}: expected integer, got {raw_attr!r}"
            ) from None
    return FontConfig.from_path(font_path, attribute_id)


def load_font_config(path: Path | str | None = None) -> FontConfig:
    """Load a FontConfig from a YAML file.

    Args:
        path: Config file. Defaults to the file named by CALLIGRAPHY_CONFIG;
            without that variable the config is built from the environment.

    Returns:
        The loaded config.

    Raises:
        ConfigFileError: If the file is missing, not valid YAML, or invalid.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV)
        if not env_path:
            return config_from_env()
        path = env_path

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"cannot read config: {e}", config_path) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"invalid YAML: {e}", config_path) from e

    try:
        config = config_from_mapping(data)
    except ConfigFileError as e:
        raise ConfigFileError(str(e), config_path) from e

    logger.debug("Loaded font config from %s", config_path)
    return config


def init_from_file(
    path: Path | str | None = None, store: ConfigStore | None = None
) -> FontConfig:
    """Load a config file and publish it into ``store`` (default: global)."""
    return (store or default_store).configure(load_font_config(path))
