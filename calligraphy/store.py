"""Process-wide font configuration holder.

The store keeps a single reference to an immutable FontConfig. Every init call
builds a complete new FontConfig and then swaps the reference, so concurrent
readers observe either the old or the new config and never a partial one.
There is no locking: re-initializing while another thread is applying fonts
gives last-writer-wins ordering.

Typical use::

    import calligraphy
    from calligraphy import FontStyle

    calligraphy.init_default("fonts/Roboto-{style}.ttf")
    path = calligraphy.get().get_styled_font_path(FontStyle.BOLD)
"""

from __future__ import annotations

import logging

from calligraphy.config import FontConfig

logger = logging.getLogger(__name__)


class ConfigStore:
    """Holds the active FontConfig, built lazily on first read."""

    def __init__(self, config: FontConfig | None = None) -> None:
        self._config = config

    def init_default(
        self, font_path: str | None = None, *, attribute_id: int | None = None
    ) -> FontConfig:
        """Replace the config from a single path and/or attribute token.

        A templated path (see ``calligraphy.templates``) is expanded into all
        four style variants. Any other path, including None, becomes the
        normal-style path with no variants.

        Args:
            font_path: Font asset path, e.g. "fonts/roboto-light.ttf".
                None keeps the platform default font.
            attribute_id: Custom attribute to look up on elements.

        Returns:
            The newly published config.
        """
        return self.configure(FontConfig.from_path(font_path, attribute_id))

    def init_styles(
        self,
        font_path: str | None,
        bold_font_path: str | None,
        italic_font_path: str | None,
        bold_italic_font_path: str | None,
        attribute_id: int | None = None,
    ) -> FontConfig:
        """Replace the config from four explicit paths. No template expansion."""
        return self.configure(
            FontConfig(
                font_path,
                bold_font_path,
                italic_font_path,
                bold_italic_font_path,
                attribute_id,
            )
        )

    def configure(self, config: FontConfig) -> FontConfig:
        """Publish a prebuilt config."""
        logger.debug(
            "Font config replaced: path=%r bold=%r italic=%r bold_italic=%r attr=%r",
            config.font_path,
            config.bold_font_path,
            config.italic_font_path,
            config.bold_italic_font_path,
            config.attribute_id,
        )
        self._config = config
        return config

    def get(self) -> FontConfig:
        """Return the active config, creating the default one if unset."""
        config = self._config
        if config is None:
            config = FontConfig()
            self._config = config
        return config

    def reset(self) -> None:
        """Forget the active config; the next get() builds the default."""
        self._config = None


default_store = ConfigStore()


def init_default(
    font_path: str | None = None, *, attribute_id: int | None = None
) -> FontConfig:
    """Initialize the process-wide config. See ConfigStore.init_default."""
    return default_store.init_default(font_path, attribute_id=attribute_id)


def init_styles(
    font_path: str | None,
    bold_font_path: str | None,
    italic_font_path: str | None,
    bold_italic_font_path: str | None,
    attribute_id: int | None = None,
) -> FontConfig:
    """Initialize the process-wide config. See ConfigStore.init_styles."""
    return default_store.init_styles(
        font_path,
        bold_font_path,
        italic_font_path,
        bold_italic_font_path,
        attribute_id,
    )


def configure(config: FontConfig) -> FontConfig:
    return default_store.configure(config)


def get() -> FontConfig:
    return default_store.get()


def reset() -> None:
    default_store.reset()
