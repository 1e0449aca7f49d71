"""calligraphy: Resolve which font asset to apply for each text style.

This library provides a process-wide font configuration with:
- Per-style font paths (normal, bold, italic, bold-italic) with fallback
- Templated paths that expand into all four style variants
- An optional attribute token for per-element font overrides
- YAML / environment configuration loading

Example:
    >>> import calligraphy
    >>> from calligraphy import FontStyle
    >>> config = calligraphy.init_default("fonts/Roboto-{style}.ttf")
    >>> config.get_styled_font_path(FontStyle.BOLD)
    'fonts/Roboto-Bold.ttf'
"""

from calligraphy.config import NO_ATTRIBUTE, FontConfig
from calligraphy.exceptions import CalligraphyError, ConfigFileError
from calligraphy.loader import init_from_file, load_font_config
from calligraphy.store import (
    ConfigStore,
    configure,
    default_store,
    get,
    init_default,
    init_styles,
    reset,
)
from calligraphy.styles import FontStyle, parse_style, style_from_css
from calligraphy.templates import expand_font_paths, is_templated_path

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "FontConfig",
    "FontStyle",
    "NO_ATTRIBUTE",
    # Process-wide store
    "ConfigStore",
    "default_store",
    "init_default",
    "init_styles",
    "configure",
    "get",
    "reset",
    # Loading
    "load_font_config",
    "init_from_file",
    # Helpers
    "parse_style",
    "style_from_css",
    "is_templated_path",
    "expand_font_paths",
    # Exceptions
    "CalligraphyError",
    "ConfigFileError",
    # Metadata
    "__version__",
]
