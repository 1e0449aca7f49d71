"""Templated font asset paths.

A templated path holds a ``{style}`` marker, e.g. ``fonts/Roboto-{style}.ttf``,
which expands into one concrete path per style variant.
"""

from __future__ import annotations

import re

STYLE_MARKER = "{style}"

# Expansion order is fixed: normal, bold, italic, bold-italic
DEFAULT_STYLE_NAMES: tuple[str, str, str, str] = (
    "Regular",
    "Bold",
    "Italic",
    "BoldItalic",
)

_TEMPLATE_RE = re.compile(re.escape(STYLE_MARKER))


def is_templated_path(path: object) -> bool:
    """Return True if ``path`` is a string containing the style marker."""
    if not isinstance(path, str) or not path:
        return False
    return _TEMPLATE_RE.search(path) is not None


def expand_font_paths(
    path: str,
    names: tuple[str, str, str, str] = DEFAULT_STYLE_NAMES,
) -> tuple[str, str, str, str]:
    """Expand a templated path into its four style variants.

    Args:
        path: Path containing one or more ``{style}`` markers.
        names: Replacement for each variant, in normal, bold, italic,
            bold-italic order.

    Returns:
        Four paths in normal, bold, italic, bold-italic order. A path without
        a marker yields four copies of itself.
    """
    regular, bold, italic, bold_italic = (
        _TEMPLATE_RE.sub(lambda _m, name=name: name, path) for name in names
    )
    return regular, bold, italic, bold_italic
