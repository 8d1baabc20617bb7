"""Enumerations for phrasesync type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they log and compare cleanly.

Python 3.13+.
"""

from enum import StrEnum


class FormatKind(StrEnum):
    """Path rule family of a localization file format.

    The set is closed: every FormatSpec carries exactly one of these tags and
    path resolution dispatches on it.
    """

    DEFAULT = "default"
    """Template-driven layout: phrase.<locale.name>.yml"""

    XML = "xml"
    """Android resources: values-de-rDE/strings.xml"""

    STRINGS = "strings"
    """Apple strings files: de-DE.lproj/Localizable.strings"""

    STRINGSDICT = "stringsdict"
    """Apple plural dictionaries: de-DE.lproj/Localizable.stringsdict"""


class UnitStatus(StrEnum):
    """Outcome of a single pull or push unit of work."""

    SUCCESS = "success"
    """Transfer completed."""

    RATE_LIMITED = "rate_limited"
    """Download completed but the service reported zero remaining quota."""

    IO_ERROR = "io_error"
    """Local directory, file creation or read failed."""

    SERVICE_ERROR = "service_error"
    """The translation service rejected or failed the request."""

    ENCODING_ERROR = "encoding_error"
    """File content could not be transcoded for upload."""

    UNSUPPORTED = "unsupported"
    """File extension not accepted by any registered format; never scheduled."""


__all__ = [
    "FormatKind",
    "UnitStatus",
]
