"""Localization file format table.

Each supported format is described by an immutable FormatSpec. Per-format
path behavior is selected by its FormatKind tag (a closed set) rather
than by subclassing, so the whole table is plain data.

Components:
    FormatSpec - Immutable description of one format
    FormatRegistry - Immutable id -> FormatSpec table with extension lookups
    template_format - Factory for the common template-driven formats
    build_default_registry - The table of formats the service supports
    DEFAULT_REGISTRY - Process-wide instance built once at import

The registry is never mutated after construction. Components accept one
explicitly and default to DEFAULT_REGISTRY.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING

from phrasesync.enums import FormatKind
from phrasesync.errors import ConfigurationError
from phrasesync.formats.extraction import extract_locale
from phrasesync.formats.placeholders import resolve_for_locale
from phrasesync.locale_utils import android_qualifier, apple_lproj_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from phrasesync.config import Config
    from phrasesync.formats.extraction import DefaultLocaleLookup
    from phrasesync.models import Locale

__all__ = [
    "DEFAULT_REGISTRY",
    "FormatRegistry",
    "FormatSpec",
    "build_default_registry",
    "file_extension",
    "template_format",
]

_XML_DEFAULT_DIRECTORY = "values"
_XML_FILENAME = "strings.xml"
_LPROJ_SUFFIX = ".lproj"
_APPLE_FILENAMES: Mapping[FormatKind, str] = MappingProxyType({
    FormatKind.STRINGS: "Localizable.strings",
    FormatKind.STRINGSDICT: "Localizable.stringsdict",
})


def file_extension(path: str) -> str:
    """Lower-cased extension of path without the leading dot ("" if none)."""
    return PurePath(path).suffix.lstrip(".").lower()


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Immutable description of a localization file format.

    Attributes:
        id: Format key used by the service (e.g., 'yml', 'xml', 'strings')
        kind: Path rule family; selects the programmatic directory/filename rules
        extensions: Recognized file extensions, lower case, without dot
        locale_aware: One file per locale (True) or one file for all (False)
        locale_as_extension: The locale code is the file extension itself
        directory_template: Placeholder template for the locale directory
        filename_template: Placeholder template for the locale filename
        target_directory: Default root directory; empty when the format has none

    Raises:
        ConfigurationError: If the format has no extensions and does not render
            the locale as its extension
    """

    id: str
    kind: FormatKind = FormatKind.DEFAULT
    extensions: tuple[str, ...] = ()
    locale_aware: bool = False
    locale_as_extension: bool = False
    directory_template: str = ""
    filename_template: str = ""
    target_directory: str = ""

    def __post_init__(self) -> None:
        """Validate the extension invariant."""
        if not self.extensions and not self.locale_as_extension:
            msg = f"Format '{self.id}' must declare at least one extension"
            raise ConfigurationError(msg)

    def directory_for_locale(self, config: Config, locale: Locale) -> str:
        """Locale directory this format computes when the user sets none."""
        match self.kind:
            case FormatKind.XML:
                if locale.is_default:
                    return _XML_DEFAULT_DIRECTORY
                return f"{_XML_DEFAULT_DIRECTORY}-{android_qualifier(locale.identifier)}"
            case FormatKind.STRINGS | FormatKind.STRINGSDICT:
                return f"{apple_lproj_name(locale.identifier)}{_LPROJ_SUFFIX}"
            case _:
                return resolve_for_locale(self.directory_template, config, locale)

    def filename_for_locale(self, config: Config, locale: Locale) -> str:
        """Locale filename this format computes when the user sets none."""
        match self.kind:
            case FormatKind.XML:
                return _XML_FILENAME
            case FormatKind.STRINGS | FormatKind.STRINGSDICT:
                return _APPLE_FILENAMES[self.kind]
            case _:
                return resolve_for_locale(self.filename_template, config, locale)

    def extract_locale_from_path(
        self, path: str, default_locale_lookup: DefaultLocaleLookup
    ) -> str:
        """Locale identifier encoded in path, or "" (see formats.extraction)."""
        return extract_locale(self, path, default_locale_lookup)


def template_format(
    format_id: str,
    extension: str,
    *,
    locale_aware: bool = False,
) -> FormatSpec:
    """Build a template-driven format named phrase.<locale.name>.<extension> in ./.

    Example:
        >>> template_format("yml_symfony", "yml").filename_template
        'phrase.<locale.name>.yml'
    """
    return FormatSpec(
        id=format_id,
        extensions=(extension,),
        locale_aware=locale_aware,
        directory_template="./",
        filename_template=f"phrase.<locale.name>.{extension}",
    )


@dataclass(frozen=True, slots=True)
class FormatRegistry:
    """Immutable table of FormatSpec keyed by format id.

    Use FormatRegistry.from_specs() to build one; it rejects duplicate ids.

    Example:
        >>> registry = FormatRegistry.from_specs([template_format("yml", "yml")])
        >>> registry.lookup("yml").extensions
        ('yml',)
    """

    _formats: Mapping[str, FormatSpec] = field(default_factory=lambda: MappingProxyType({}))
    _extensions: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Freeze the table and precompute the accepted extension set."""
        object.__setattr__(self, "_formats", MappingProxyType(dict(self._formats)))
        extensions = frozenset(
            ext for spec in self._formats.values() for ext in spec.extensions
        )
        object.__setattr__(self, "_extensions", extensions)

    @classmethod
    def from_specs(cls, specs: Iterable[FormatSpec]) -> FormatRegistry:
        """Build a registry, preserving spec order.

        Raises:
            ConfigurationError: If two specs share an id
        """
        formats: dict[str, FormatSpec] = {}
        for spec in specs:
            if spec.id in formats:
                msg = f"Duplicate format id: {spec.id}"
                raise ConfigurationError(msg)
            formats[spec.id] = spec
        return cls(formats)

    def __contains__(self, format_id: object) -> bool:
        return format_id in self._formats

    def __iter__(self) -> Iterator[FormatSpec]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)

    @property
    def ids(self) -> tuple[str, ...]:
        """Registered format ids in registration order."""
        return tuple(self._formats)

    @property
    def supported_extensions(self) -> frozenset[str]:
        """Union of the extensions of every registered format."""
        return self._extensions

    def get(self, format_id: str) -> FormatSpec | None:
        """Return the FormatSpec for format_id, or None."""
        return self._formats.get(format_id)

    def lookup(self, format_id: str) -> FormatSpec:
        """Return the FormatSpec for format_id.

        Raises:
            ConfigurationError: If format_id is not registered
        """
        spec = self._formats.get(format_id)
        if spec is None:
            msg = f"Unrecognized format: {format_id}"
            raise ConfigurationError(msg)
        return spec

    def renders_locale_as_extension(self, format_id: str) -> bool:
        """True if format_id is registered and uses the locale as extension."""
        spec = self._formats.get(format_id) if format_id else None
        return spec is not None and spec.locale_as_extension

    def guess_format(self, path: str) -> str:
        """Guess a format id from path's extension.

        A format whose id equals the extension wins; otherwise the first
        registered format listing the extension. Returns "" when none match.

        Example:
            >>> DEFAULT_REGISTRY.guess_format("locales/de/app.po")
            'gettext'
        """
        extension = file_extension(path)
        if not extension:
            return ""
        if extension in self._formats:
            return extension
        for spec in self._formats.values():
            if extension in spec.extensions:
                return spec.id
        return ""


def build_default_registry() -> FormatRegistry:
    """Build the table of formats supported by the translation service."""
    return FormatRegistry.from_specs([
        template_format("json", "json"),
        template_format("csv", "csv"),
        FormatSpec(
            id="gettext",
            extensions=("po",),
            locale_aware=True,
            directory_template="./<locale.name>/",
            filename_template="<domain>.po",
            target_directory="locales/",
        ),
        FormatSpec(
            id="gettext_template",
            extensions=("pot",),
            directory_template="./",
            filename_template="phrase.pot",
        ),
        template_format("ini", "ini"),
        template_format("properties", "properties", locale_aware=True),
        template_format("properties_xml", "xml"),
        template_format("plist", "plist", locale_aware=True),
        template_format("qph", "qph", locale_aware=True),
        template_format("ts", "ts", locale_aware=True),
        template_format("resx", "resx"),
        template_format("resx_windowsphone", "resx"),
        template_format("windows8_resource", "resw"),
        template_format("simple_json", "json"),
        template_format("nested_json", "json"),
        FormatSpec(
            id="node_json",
            extensions=("js",),
            directory_template="./",
            filename_template="<locale.name>.js",
            target_directory="locales/",
        ),
        FormatSpec(
            id="strings",
            kind=FormatKind.STRINGS,
            extensions=("strings",),
            locale_aware=True,
            target_directory="./",
        ),
        FormatSpec(
            id="stringsdict",
            kind=FormatKind.STRINGSDICT,
            extensions=("stringsdict",),
            locale_aware=True,
            target_directory="./",
        ),
        FormatSpec(
            id="xml",
            kind=FormatKind.XML,
            extensions=("xml",),
            locale_aware=True,
            target_directory="res/",
        ),
        FormatSpec(
            id="xlf",
            extensions=("xlf", "xliff"),
            locale_aware=True,
            directory_template="./",
            filename_template="phrase.<locale.name>.xlf",
        ),
        template_format("tmx", "tmx"),
        template_format("yml", "yml", locale_aware=True),
        template_format("yml_symfony", "yml"),
        template_format("yml_symfony2", "yml"),
        template_format("php_array", "php"),
        template_format("angular_translate", "json"),
        template_format("laravel", "php"),
        template_format("mozilla_properties", "properties", locale_aware=True),
        FormatSpec(
            id="go_i18n",
            extensions=("json",),
            directory_template="./",
            filename_template="<locale.name>.all.json",
            target_directory="locales/",
        ),
        FormatSpec(
            id="play_properties",
            locale_as_extension=True,
            directory_template="./",
            filename_template="messages.<locale.code>",
        ),
    ])


DEFAULT_REGISTRY: FormatRegistry = build_default_registry()
