"""Recover a locale identifier from the path of an existing file.

Used by push when a file is uploaded without an explicit locale. Only the
region-aware formats encode the locale in their directory names; template
formats cannot be inverted and yield the empty identifier.

An empty result is not an error: callers fall back to the project's default
locale. The only call that can fail is ``default_locale_lookup``, which asks
the service for its locale list; its exceptions propagate unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from phrasesync.enums import FormatKind
from phrasesync.locale_utils import android_identifier

if TYPE_CHECKING:
    from phrasesync.formats.registry import FormatSpec

__all__ = ["DefaultLocaleLookup", "extract_locale"]

logger = logging.getLogger(__name__)

DefaultLocaleLookup: TypeAlias = Callable[[], str]
"""Zero-argument callable returning the name of the project's default locale."""

_XML_DEFAULT_PATH = re.compile(r"/values/strings\.xml", re.IGNORECASE)
_XML_LOCALE_PATH = re.compile(r"/values-([a-zA-Z_\-]*)/strings\.xml", re.IGNORECASE)
_LPROJ_PATH = re.compile(r"/([a-zA-Z_\-]*)\.lproj/", re.IGNORECASE)


def _as_posix(path: str) -> str:
    # Anchor relative paths so a leading directory name still matches.
    posix = PurePath(path).as_posix()
    return posix if posix.startswith("/") else f"/{posix}"


def _extract_xml(path: str, default_locale_lookup: DefaultLocaleLookup) -> str:
    if _XML_DEFAULT_PATH.search(path):
        return default_locale_lookup()
    match = _XML_LOCALE_PATH.search(path)
    if match is None:
        return ""
    return android_identifier(match.group(1))


def _extract_lproj(path: str) -> str:
    match = _LPROJ_PATH.search(path)
    return match.group(1) if match else ""


def extract_locale(
    spec: FormatSpec,
    path: str,
    default_locale_lookup: DefaultLocaleLookup,
) -> str:
    """Return the locale identifier encoded in path, or "" if there is none.

    Args:
        spec: Format the file is written in
        path: Path of the file (relative or absolute, any separator)
        default_locale_lookup: Called when the path denotes the default
            locale (Android ``values/`` without a qualifier)

    Returns:
        Locale identifier, or the empty string when path carries none

    Raises:
        Whatever default_locale_lookup raises (typically ServiceError)

    Example:
        >>> extract_locale(registry.lookup("xml"), "res/values-pt-rBR/strings.xml", lookup)
        'pt-BR'
    """
    posix_path = _as_posix(path)
    match spec.kind:
        case FormatKind.XML:
            locale = _extract_xml(posix_path, default_locale_lookup)
        case FormatKind.STRINGS | FormatKind.STRINGSDICT:
            locale = _extract_lproj(posix_path)
        case _:
            locale = ""
    logger.debug("Extracted locale '%s' from %s (%s)", locale, path, spec.id)
    return locale
