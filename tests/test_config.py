"""Tests for project configuration loading and overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from phrasesync.config import Config, LocaleConfig, load_config
from phrasesync.errors import ConfigurationError
from phrasesync.formats.registry import DEFAULT_REGISTRY
from phrasesync.models import Locale


class TestLoadConfig:
    """Reading the project file."""

    def test_missing_file_yields_defaults(self, tmp_path: Path) -> None:
        """No project file is not an error."""
        config = load_config(tmp_path / ".phrase")
        assert config == Config()
        assert config.domain == "phrase"
        assert config.default_locale == "en"

    def test_valid_file(self, tmp_path: Path) -> None:
        """Known keys are read; unknown keys are ignored."""
        path = tmp_path / ".phrase"
        path.write_text(
            json.dumps({
                "secret": "s3cret",
                "format": "xml",
                "target_directory": "app/src/main/res/",
                "locale_filename": "<domain>.<format>",
                "project_id": "abc123",
            }),
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.secret == "s3cret"
        assert config.format == "xml"
        assert config.target_directory == "app/src/main/res/"
        assert config.locale_filename == "<domain>.<format>"
        assert config.domain == "phrase"

    def test_reads_working_directory_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without a path, .phrase in the working directory is read."""
        (tmp_path / ".phrase").write_text('{"format": "yml"}', encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_config().format == "yml"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON is a configuration error."""
        path = tmp_path / ".phrase"
        path.write_text("{format: yml", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Error parsing project file"):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        """The top level must be a JSON object."""
        path = tmp_path / ".phrase"
        path.write_text('["yml"]', encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            load_config(path)

    def test_non_string_value(self, tmp_path: Path) -> None:
        """Known fields must hold strings."""
        path = tmp_path / ".phrase"
        path.write_text('{"format": 3}', encoding="utf-8")
        with pytest.raises(ConfigurationError, match="'format' must be a string, got int"):
            load_config(path)


class TestFromMapping:
    """Config.from_mapping()."""

    def test_empty_values_get_defaults(self) -> None:
        """Empty domain and default locale fall back to the defaults."""
        config = Config.from_mapping({"domain": "", "default_locale": None, "format": "po"})
        assert config.domain == "phrase"
        assert config.default_locale == "en"
        assert config.format == "po"

    def test_explicit_values_kept(self) -> None:
        """Non-empty values are not replaced."""
        config = Config.from_mapping({"domain": "app", "default_locale": "de"})
        assert config.domain == "app"
        assert config.default_locale == "de"


class TestWithOverrides:
    """Config.with_overrides()."""

    def test_non_empty_values_replace(self) -> None:
        """Set flags win over the project file."""
        config = Config(format="yml", encoding="UTF-8").with_overrides(format="xml")
        assert config.format == "xml"
        assert config.encoding == "UTF-8"

    def test_empty_values_ignored(self) -> None:
        """Unset flags keep the project file value."""
        config = Config(format="yml")
        assert config.with_overrides(format="", encoding="") is config

    def test_receiver_unchanged(self) -> None:
        """Config is immutable."""
        config = Config(format="yml")
        config.with_overrides(format="xml")
        assert config.format == "yml"


class TestValidate:
    """Config.validate()."""

    def test_known_format(self) -> None:
        """Returns the format's spec."""
        assert Config(format="gettext").validate(DEFAULT_REGISTRY).id == "gettext"

    def test_unknown_format(self) -> None:
        """Unregistered formats are rejected."""
        with pytest.raises(ConfigurationError, match="Unrecognized format: docx"):
            Config(format="docx").validate(DEFAULT_REGISTRY)

    def test_empty_format(self) -> None:
        """An empty format is not registered either."""
        with pytest.raises(ConfigurationError):
            Config().validate(DEFAULT_REGISTRY)


class TestLocaleConfig:
    """LocaleConfig paths."""

    def test_path_joins_parts(self) -> None:
        """directory and path combine the resolved parts."""
        layout = LocaleConfig(
            config=Config(format="gettext"),
            format=DEFAULT_REGISTRY.lookup("gettext"),
            locale=Locale(name="de"),
            target_directory="locales/",
            locale_directory="./de/",
            locale_filename="phrase.po",
        )
        assert layout.directory == Path("locales/de")
        assert layout.path == Path("locales/de/phrase.po")
