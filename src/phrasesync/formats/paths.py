"""Per-locale file layout resolution.

PathResolver turns a Config and a Locale into the directory and filename the
locale's file lives at. User templates from the config win; otherwise the
format's own rule applies.

Resolution order, per field:
    1. config.locale_directory / config.locale_filename, if non-empty after
       placeholder resolution
    2. FormatSpec.directory_for_locale / filename_for_locale
Target directory:
    1. config.target_directory
    2. FormatSpec.target_directory
    3. DEFAULT_TARGET_DIRECTORY ("phrase/locales/")

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phrasesync.config import LocaleConfig
from phrasesync.constants import DEFAULT_TARGET_DIRECTORY
from phrasesync.formats.placeholders import resolve_for_locale
from phrasesync.formats.registry import DEFAULT_REGISTRY

if TYPE_CHECKING:
    from phrasesync.config import Config
    from phrasesync.formats.extraction import DefaultLocaleLookup
    from phrasesync.formats.registry import FormatRegistry
    from phrasesync.models import Locale

__all__ = [
    "PathResolver",
    "directory_for_locale",
    "extract_locale_from_path",
    "filename_for_locale",
]


class PathResolver:
    """Resolve locale directories, filenames and target roots for a registry.

    Stateless apart from the registry it was given; safe to share between
    threads.

    Example:
        >>> resolver = PathResolver()
        >>> resolver.filename_for_locale(Config(format="yml"), Locale(name="de"))
        'phrase.de.yml'
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: FormatRegistry = DEFAULT_REGISTRY) -> None:
        """Initialize resolver.

        Args:
            registry: Format table used to look up config.format
        """
        self._registry = registry

    @property
    def registry(self) -> FormatRegistry:
        """Format table this resolver looks formats up in."""
        return self._registry

    def directory_for_locale(self, config: Config, locale: Locale) -> str:
        """Locale directory for config.format, honoring config.locale_directory.

        Raises:
            ConfigurationError: If config.format is not registered
        """
        override = resolve_for_locale(config.locale_directory, config, locale)
        if override:
            return override
        return config.validate(self._registry).directory_for_locale(config, locale)

    def filename_for_locale(self, config: Config, locale: Locale) -> str:
        """Locale filename for config.format, honoring config.locale_filename.

        Raises:
            ConfigurationError: If config.format is not registered
        """
        override = resolve_for_locale(config.locale_filename, config, locale)
        if override:
            return override
        return config.validate(self._registry).filename_for_locale(config, locale)

    def target_directory(self, config: Config) -> str:
        """Root directory for config.format, honoring config.target_directory.

        Raises:
            ConfigurationError: If config.format is not registered
        """
        if config.target_directory:
            return config.target_directory
        spec = config.validate(self._registry)
        return spec.target_directory or DEFAULT_TARGET_DIRECTORY

    def for_locale(self, config: Config, locale: Locale) -> LocaleConfig:
        """Build the fully resolved LocaleConfig for locale.

        Raises:
            ConfigurationError: If config.format is not registered
        """
        return LocaleConfig(
            config=config,
            format=config.validate(self._registry),
            locale=locale,
            target_directory=self.target_directory(config),
            locale_directory=self.directory_for_locale(config, locale),
            locale_filename=self.filename_for_locale(config, locale),
        )


_DEFAULT_RESOLVER = PathResolver()


def directory_for_locale(format_id: str, config: Config, locale: Locale) -> str:
    """Locale directory for format_id in the default registry."""
    return _DEFAULT_RESOLVER.directory_for_locale(
        config.with_overrides(format=format_id), locale
    )


def filename_for_locale(format_id: str, config: Config, locale: Locale) -> str:
    """Locale filename for format_id in the default registry."""
    return _DEFAULT_RESOLVER.filename_for_locale(
        config.with_overrides(format=format_id), locale
    )


def extract_locale_from_path(
    format_id: str, path: str, default_locale_lookup: DefaultLocaleLookup
) -> str:
    """Locale identifier encoded in path for format_id in the default registry.

    Raises:
        ConfigurationError: If format_id is not registered
    """
    return DEFAULT_REGISTRY.lookup(format_id).extract_locale_from_path(
        path, default_locale_lookup
    )
