"""Text style codes.

The numeric values follow the usual typeface convention (normal=0, bold=1,
italic=2, bold-italic=3) so that integer style codes coming from a renderer
can be passed straight through.
"""

from __future__ import annotations

import re
from enum import IntEnum


class FontStyle(IntEnum):
    """Font variant requested by a text element."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


_NAME_ALIASES: dict[str, FontStyle] = {
    "normal": FontStyle.NORMAL,
    "regular": FontStyle.NORMAL,
    "bold": FontStyle.BOLD,
    "italic": FontStyle.ITALIC,
    "oblique": FontStyle.ITALIC,
    "bolditalic": FontStyle.BOLD_ITALIC,
    "italicbold": FontStyle.BOLD_ITALIC,
    "boldoblique": FontStyle.BOLD_ITALIC,
}


def parse_style(value: FontStyle | int | str) -> FontStyle:
    """Convert a style name or code into a FontStyle.

    Names are matched case-insensitively and ignore spaces, dashes and
    underscores, so "Bold Italic", "bold-italic" and "BOLD_ITALIC" are equal.

    Args:
        value: FontStyle member, integer code, or style name.

    Returns:
        The matching FontStyle.

    Raises:
        ValueError: If the value does not name a known style.
    """
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, int):
        return FontStyle(value)

    text = value.strip()
    if text.lstrip("+-").isdigit():
        return FontStyle(int(text))

    key = re.sub(r"[\s_-]+", "", text.lower())
    try:
        return _NAME_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unknown font style: {value!r}") from None


def _is_bold_weight(font_weight: str | int | None) -> bool:
    if font_weight is None:
        return False
    if isinstance(font_weight, int):
        return font_weight >= 600
    weight = font_weight.strip().lower()
    if weight in ("bold", "bolder"):
        return True
    try:
        return float(weight) >= 600
    except ValueError:
        return False


def style_from_css(
    font_weight: str | int | None = None, font_style: str | None = None
) -> FontStyle:
    """Map CSS font-weight / font-style values to a FontStyle.

    Unrecognized values count as normal, so this never raises.
    """
    bold = _is_bold_weight(font_weight)
    italic = (font_style or "").strip().lower() in ("italic", "oblique")

    if bold and italic:
        return FontStyle.BOLD_ITALIC
    if bold:
        return FontStyle.BOLD
    if italic:
        return FontStyle.ITALIC
    return FontStyle.NORMAL
