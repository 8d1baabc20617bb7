"""Tests for recovering locale identifiers from file paths."""

from __future__ import annotations

import pytest

from phrasesync.errors import ServiceError
from phrasesync.formats.extraction import extract_locale
from phrasesync.formats.registry import DEFAULT_REGISTRY


def _default_lookup() -> str:
    return "default"


def _failing_lookup() -> str:
    msg = "locale list unavailable"
    raise ServiceError(msg, status_code=503)


class TestXmlExtraction:
    """Android resource paths."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/res/values-fr/strings.xml", "fr"),
            ("/res/values-de-DE/strings.xml", "de-DE"),
            ("/res/values-pt-rBR/strings.xml", "pt-BR"),
            ("res/values-pt-rBR/strings.xml", "pt-BR"),
            ("values-es/strings.xml", "es"),
            ("/res/values/strings.xml", "default"),
            ("/res/values-fr/other.xml", ""),
            ("", ""),
        ],
    )
    def test_extract(self, path: str, expected: str) -> None:
        """Qualifier is decoded; bare values/ asks for the default locale."""
        spec = DEFAULT_REGISTRY.lookup("xml")
        assert extract_locale(spec, path, _default_lookup) == expected

    def test_lookup_errors_propagate(self) -> None:
        """Failures of the default locale lookup are not swallowed."""
        spec = DEFAULT_REGISTRY.lookup("xml")
        with pytest.raises(ServiceError, match="locale list unavailable") as exc_info:
            extract_locale(spec, "/res/values/strings.xml", _failing_lookup)
        assert exc_info.value.status_code == 503

    def test_lookup_not_called_for_qualified_paths(self) -> None:
        """The lookup runs only for the unqualified values/ folder."""
        spec = DEFAULT_REGISTRY.lookup("xml")
        assert extract_locale(spec, "/res/values-fr/strings.xml", _failing_lookup) == "fr"


class TestLprojExtraction:
    """Apple bundle paths."""

    @pytest.mark.parametrize("format_id", ["strings", "stringsdict"])
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/ios/fr_FR.lproj/Localizable.strings", "fr_FR"),
            ("en.lproj/Localizable.strings", "en"),
            ("/ios/zh-Hans.lproj/Localizable.stringsdict", "zh-Hans"),
            ("/ios/Base/Localizable.strings", ""),
        ],
    )
    def test_extract(self, format_id: str, path: str, expected: str) -> None:
        """The bundle name before .lproj is the locale."""
        spec = DEFAULT_REGISTRY.lookup(format_id)
        assert extract_locale(spec, path, _failing_lookup) == expected


class TestTemplateFormats:
    """Formats that do not encode the locale in the path."""

    @pytest.mark.parametrize("format_id", ["yml", "gettext", "json", "play_properties"])
    def test_returns_empty(self, format_id: str) -> None:
        """No locale, and no lookup."""
        spec = DEFAULT_REGISTRY.lookup(format_id)
        path = "/config/locales/de/values-fr/strings.xml"
        assert extract_locale(spec, path, _failing_lookup) == ""

    def test_spec_method_delegates(self) -> None:
        """FormatSpec.extract_locale_from_path uses the same rules."""
        spec = DEFAULT_REGISTRY.lookup("xml")
        path = "/res/values-pt-rBR/strings.xml"
        assert spec.extract_locale_from_path(path, _default_lookup) == "pt-BR"
