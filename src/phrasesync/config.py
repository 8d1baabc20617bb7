"""Project configuration.

Config holds the project-wide defaults read from the ``.phrase`` project
file. It is loaded once, optionally replaced by command-line overrides before
a sync starts, and read-only while units of work run.

LocaleConfig is Config specialized for one locale: the locale directory,
filename and target directory are concrete values, never templates. It is
built on demand by PathResolver.for_locale() and never persisted.

Components:
    Config - Project-wide defaults (frozen dataclass)
    LocaleConfig - Per-locale resolved layout (frozen dataclass)
    load_config - Read a project file; missing file yields defaults

Writing the project file belongs to the command-line layer.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from phrasesync.constants import CONFIG_FILENAME, DEFAULT_DOMAIN, DEFAULT_LOCALE
from phrasesync.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from phrasesync.formats.registry import FormatRegistry, FormatSpec
    from phrasesync.models import Locale

__all__ = ["Config", "LocaleConfig", "load_config"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Project-wide synchronization defaults.

    Attributes:
        secret: Project auth token (consumed by the transport layer)
        default_locale: Default locale name of the project
        domain: Gettext domain and filename prefix
        format: Format id used when a command names none
        target_directory: Root directory for downloaded files; empty means
            the format's own default
        locale_directory: Placeholder template for the locale directory;
            empty means the format's own rule
        locale_filename: Placeholder template for the locale filename;
            empty means the format's own rule
        encoding: Requested file encoding (e.g., 'UTF-8', 'UTF-16')
    """

    secret: str = ""
    default_locale: str = DEFAULT_LOCALE
    domain: str = DEFAULT_DOMAIN
    format: str = ""
    target_directory: str = ""
    locale_directory: str = ""
    locale_filename: str = ""
    encoding: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a Config from a flat record, applying defaults to empty fields.

        Unknown keys are ignored. ``None`` values count as empty.

        Raises:
            ConfigurationError: If a known field holds a non-string value
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if not isinstance(value, str):
                msg = f"Config field '{key}' must be a string, got {type(value).__name__}"
                raise ConfigurationError(msg)
            values[key] = value
        config = cls(**values)
        return config.with_overrides(
            domain=config.domain or DEFAULT_DOMAIN,
            default_locale=config.default_locale or DEFAULT_LOCALE,
        )

    def with_overrides(self, **overrides: str) -> Config:
        """Return a copy with the given fields replaced.

        Empty override values are ignored so that unset command-line flags
        keep the project file's value.

        Example:
            >>> Config(format="yml").with_overrides(format="xml", encoding="").format
            'xml'
        """
        applied = {key: value for key, value in overrides.items() if value}
        return replace(self, **applied) if applied else self

    def validate(self, registry: FormatRegistry) -> FormatSpec:
        """Return the FormatSpec named by this config's format.

        Raises:
            ConfigurationError: If the format is not registered
        """
        return registry.lookup(self.format)


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Layout of one locale's file, with every template resolved.

    Attributes:
        config: Project config the layout was derived from
        format: FormatSpec named by config.format
        locale: Locale the layout is for
        target_directory: Root directory (never empty)
        locale_directory: Directory below the root
        locale_filename: Filename inside the locale directory
    """

    config: Config
    format: FormatSpec
    locale: Locale
    target_directory: str
    locale_directory: str
    locale_filename: str

    @property
    def directory(self) -> Path:
        """Directory the locale file lives in."""
        return Path(self.target_directory) / self.locale_directory

    @property
    def path(self) -> Path:
        """Full path of the locale file."""
        return self.directory / self.locale_filename


def load_config(path: str | Path = CONFIG_FILENAME) -> Config:
    """Read the project file at path.

    The file is a flat JSON object with the keys ``secret``,
    ``default_locale``, ``domain``, ``format``, ``target_directory``,
    ``locale_directory``, ``locale_filename`` and ``encoding``.

    Args:
        path: Project file location (default: ``.phrase`` in the working directory)

    Returns:
        Config with defaults applied; plain defaults if the file does not exist

    Raises:
        ConfigurationError: If the file is not valid JSON or not a JSON object
        OSError: If the file exists but cannot be read
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("No project file at %s, using defaults", config_path)
        return Config()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Error parsing project file {config_path}: {e}"
        raise ConfigurationError(msg) from e

    if not isinstance(data, dict):
        msg = f"Project file {config_path} must contain a JSON object"
        raise ConfigurationError(msg)

    logger.debug("Loaded project file %s", config_path)
    return Config.from_mapping(data)
