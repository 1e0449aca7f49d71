"""Immutable font configuration and style-to-path resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from calligraphy.styles import FontStyle
from calligraphy.templates import expand_font_paths, is_templated_path

# Legacy sentinel for "no custom attribute configured"
NO_ATTRIBUTE = -1


@dataclass(frozen=True)
class FontConfig:
    """Font asset paths for each text style plus an optional attribute token.

    Any path may be None (or empty), meaning the style is not configured.
    ``is_font_set`` is computed once from ``font_path`` alone; the bold and
    italic variants never affect it.

    Attributes:
        font_path: Path used for normal text and as fallback for every style.
        bold_font_path: Path used for bold text.
        italic_font_path: Path used for italic text.
        bold_italic_font_path: Path used for bold italic text.
        attribute_id: Token used by font injectors to look up per-element
            overrides. None when not configured.
        is_font_set: True if ``font_path`` was non-empty at construction.
    """

    font_path: str | None = None
    bold_font_path: str | None = None
    italic_font_path: str | None = None
    bold_italic_font_path: str | None = None
    attribute_id: int | None = None
    is_font_set: bool = field(init=False)

    def __post_init__(self) -> None:
        if self.attribute_id == NO_ATTRIBUTE:
            object.__setattr__(self, "attribute_id", None)
        object.__setattr__(self, "is_font_set", bool(self.font_path))

    @classmethod
    def from_path(
        cls, font_path: str | None = None, attribute_id: int | None = None
    ) -> FontConfig:
        """Build a config from a single, possibly templated, path.

        A templated path fills all four style fields; anything else (None
        included) is stored verbatim as ``font_path`` only.
        """
        if is_templated_path(font_path):
            regular, bold, italic, bold_italic = expand_font_paths(font_path)
            return cls(regular, bold, italic, bold_italic, attribute_id)
        return cls(font_path, attribute_id=attribute_id)

    @property
    def attr_id(self) -> int:
        """Attribute token, or -1 if not configured."""
        return NO_ATTRIBUTE if self.attribute_id is None else self.attribute_id

    def get_styled_font_path(self, style: FontStyle | int) -> str | None:
        """Resolve the font path for a style.

        Each variant falls back to ``font_path`` when it is None or empty.
        Unknown style codes resolve like NORMAL.

        Args:
            style: FontStyle or integer style code.

        Returns:
            The path to apply, or None to keep the platform default font.
        """
        if style == FontStyle.BOLD:
            variant = self.bold_font_path
        elif style == FontStyle.ITALIC:
            variant = self.italic_font_path
        elif style == FontStyle.BOLD_ITALIC:
            variant = self.bold_italic_font_path
        else:
            return self.font_path
        return variant if variant else self.font_path
