"""Translation service entities and request specs.

These are the values exchanged with a TranslationService implementation.
JSON (de)serialization belongs to the transport layer; here they are plain
immutable records.

Components:
    Locale - A project locale as reported by the service
    Tag - A project tag as reported by the service
    RateLimit - Quota metadata attached to a download response
    DownloadRequest - Options for downloading one locale's translations
    UploadRequest - Options and content for uploading one file

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "DownloadRequest",
    "Locale",
    "RateLimit",
    "Tag",
    "UploadRequest",
]


def _empty_mapping() -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Locale:
    """A locale of the remote project.

    At most one locale per project has ``is_default`` set; the service
    enforces that, not this package.

    Attributes:
        id: Service-assigned identifier
        name: Human key used in requests and paths (e.g., 'en', 'de-DE')
        code: BCP-47-ish code (e.g., 'en-US'); may be empty
        country_code: ISO 3166 country code; may be empty
        writing_direction: 'ltr' or 'rtl'
        is_default: Whether this is the project's default locale
        pluralizations: Plural form labels per category, as reported
    """

    name: str
    code: str = ""
    id: int = 0
    country_code: str = ""
    writing_direction: str = "ltr"
    is_default: bool = False
    pluralizations: Mapping[str, Mapping[str, str]] = field(
        default_factory=_empty_mapping, compare=False, repr=False
    )

    @property
    def identifier(self) -> str:
        """Code when known, else name. Used by the region-aware path rules."""
        return self.code or self.name


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag of the remote project."""

    name: str
    keys_count: int = 0


@dataclass(frozen=True, slots=True)
class RateLimit:
    """Quota metadata returned with a download.

    Attributes:
        limit: Requests allowed per window
        remaining: Requests left in the current window
        reset: When the window resets, if reported
    """

    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None

    @property
    def exhausted(self) -> bool:
        """True when the service reports zero remaining requests."""
        return self.remaining == 0


@dataclass(frozen=True, slots=True)
class DownloadRequest:
    """Options for downloading one locale's translations.

    Pull builds one shared request and derives a per-locale copy with
    ``dataclasses.replace``; the shared instance is never mutated.
    """

    format: str = ""
    locale: str = ""
    encoding: str = ""
    tag: str = ""
    updated_since: datetime | None = None
    include_empty_translations: bool = False
    convert_emoji: bool = False
    skip_unverified_translations: bool = False


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """Options and content for uploading one file.

    Push derives one copy per file carrying the resolved locale, filename and
    file content, so concurrent uploads never share mutable state.
    """

    format: str = ""
    locale: str = ""
    tags: tuple[str, ...] = ()
    filename: str = ""
    file_content: str = field(default="", repr=False)
    update_translations: bool = False
    skip_unverification: bool = False
    skip_upload_tags: bool = False
    convert_emoji: bool = False
