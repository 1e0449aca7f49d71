"""Unit tests for calligraphy.loader module.

Tests cover YAML config loading, validation errors, environment fallbacks,
and publishing a loaded config into a store.
"""

from pathlib import Path
from textwrap import dedent

import pytest

import calligraphy
from calligraphy import ConfigFileError, ConfigStore, FontConfig, FontStyle
from calligraphy.loader import (
    config_from_env,
    config_from_mapping,
    init_from_file,
    load_font_config,
)


class TestLoadFontConfig:
    """Tests for reading YAML config files."""

    def test_templated_regular_is_expanded(self, template_config_file: Path) -> None:
        config = load_font_config(template_config_file)
        assert config.font_path == "fonts/Roboto-Regular.ttf"
        assert config.bold_italic_font_path == "fonts/Roboto-BoldItalic.ttf"
        assert config.attribute_id == 100

    def test_explicit_variants_used_as_written(self, explicit_config_file: Path) -> None:
        config = load_font_config(explicit_config_file)
        assert config.font_path == "fonts/Lato-Regular.ttf"
        assert config.bold_font_path == "fonts/Lato-Black.ttf"
        assert config.italic_font_path is None
        assert config.get_styled_font_path(FontStyle.ITALIC) == "fonts/Lato-Regular.ttf"

    def test_fonts_as_plain_string(self, tmp_path: Path) -> None:
        config_file = tmp_path / "short.yaml"
        config_file.write_text("fonts: fonts/roboto-light.ttf\n")
        config = load_font_config(config_file)
        assert config == FontConfig("fonts/roboto-light.ttf")

    def test_empty_file_gives_default(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_font_config(config_file) == FontConfig()

    def test_path_from_env(
        self, template_config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CALLIGRAPHY_CONFIG", str(template_config_file))
        assert load_font_config().bold_font_path == "fonts/Roboto-Bold.ttf"

    def test_no_file_and_no_env_gives_default(self) -> None:
        assert load_font_config() == FontConfig()


class TestLoadFontConfigErrors:
    """Tests for invalid config files."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileError, match="cannot read config") as exc_info:
            load_font_config(tmp_path / "missing.yaml")
        assert exc_info.value.path == tmp_path / "missing.yaml"

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "binary.yaml"
        config_file.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ConfigFileError, match="cannot read config"):
            load_font_config(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad_yaml.yaml"
        config_file.write_text("fonts: [unclosed\n")
        with pytest.raises(ConfigFileError, match="invalid YAML"):
            load_font_config(config_file)

    def test_wrong_path_type(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad_type.yaml"
        config_file.write_text(
            dedent("""
            fonts:
              regular: fonts/a.ttf
              bold: 12
        """)
        )
        with pytest.raises(ConfigFileError, match="fonts.bold: expected string, got int"):
            load_font_config(config_file)

    def test_wrong_attribute_type(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad_attr.yaml"
        config_file.write_text("attribute_id: yes\n")
        with pytest.raises(ConfigFileError, match="attribute_id: expected integer, got bool"):
            load_font_config(config_file)

    def test_error_message_includes_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad_attr.yaml"
        config_file.write_text("attribute_id: abc\n")
        with pytest.raises(ConfigFileError, match="bad_attr.yaml"):
            load_font_config(config_file)


class TestConfigFromMapping:
    """Tests for mapping validation."""

    def test_none_gives_default(self) -> None:
        assert config_from_mapping(None) == FontConfig()

    def test_top_level_list_rejected(self) -> None:
        with pytest.raises(ConfigFileError, match="expected a mapping at top level"):
            config_from_mapping(["fonts/a.ttf"])  # type: ignore[arg-type]

    def test_unknown_font_key_rejected(self) -> None:
        with pytest.raises(ConfigFileError, match="fonts: unknown keys heavy"):
            config_from_mapping({"fonts": {"regular": "a.ttf", "heavy": "h.ttf"}})

    def test_non_string_font_keys_rejected(self) -> None:
        with pytest.raises(ConfigFileError, match="fonts: unknown keys 1, None, heavy"):
            config_from_mapping({"fonts": {1: "a.ttf", None: "b.ttf", "heavy": "h.ttf"}})

    def test_non_string_key_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "int_key.yaml"
        config_file.write_text("fonts:\n  1: a.ttf\n")
        with pytest.raises(ConfigFileError, match="fonts: unknown keys 1"):
            load_font_config(config_file)

    def test_attribute_only(self) -> None:
        config = config_from_mapping({"attribute_id": 3})
        assert config.attribute_id == 3
        assert config.is_font_set is False


class TestConfigFromEnv:
    """Tests for environment configuration."""

    def test_font_path_and_attribute(self) -> None:
        config = config_from_env(
            {
                "CALLIGRAPHY_FONT_PATH": "fonts/Roboto-{style}.ttf",
                "CALLIGRAPHY_ATTRIBUTE_ID": "100",
            }
        )
        assert config.italic_font_path == "fonts/Roboto-Italic.ttf"
        assert config.attribute_id == 100

    def test_empty_values_are_unset(self) -> None:
        config = config_from_env(
            {"CALLIGRAPHY_FONT_PATH": "", "CALLIGRAPHY_ATTRIBUTE_ID": ""}
        )
        assert config == FontConfig()

    def test_invalid_attribute(self) -> None:
        with pytest.raises(ConfigFileError, match="CALLIGRAPHY_ATTRIBUTE_ID"):
            config_from_env({"CALLIGRAPHY_ATTRIBUTE_ID": "abc"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALLIGRAPHY_FONT_PATH", "fonts/env.ttf")
        assert load_font_config().font_path == "fonts/env.ttf"


class TestInitFromFile:
    """Tests for publishing loaded configs."""

    def test_publishes_into_default_store(self, template_config_file: Path) -> None:
        config = init_from_file(template_config_file)
        assert calligraphy.get() is config

    def test_publishes_into_given_store(
        self, template_config_file: Path, store: ConfigStore
    ) -> None:
        config = init_from_file(template_config_file, store)
        assert store.get() is config
        assert calligraphy.get().font_path is None
