"""Locale identifier utilities.

Region-subtag conventions used by platform file layouts, plus Babel lookups
for human-readable locale names in progress messages.

Conventions:
    Android resource qualifiers insert an ``r`` before an upper-cased region:
    ``de-DE`` -> ``de-rDE``.
    Apple ``.lproj`` bundles upper-case the region, except for Chinese where
    only the first letter of the region subtag is capitalized:
    ``fr-fr`` -> ``fr-FR``, ``ZH-cn`` -> ``zh-Cn``.

Only the first and last subtags survive either transform; middle subtags
(scripts, variants) are dropped, matching what the service's other clients
write to disk.

Python 3.13+. Uses Babel for display names.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "android_identifier",
    "android_qualifier",
    "apple_lproj_name",
    "get_babel_locale",
    "locale_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

_SUBTAG_SEPARATOR = "-"
_ANDROID_REGION_MARKER = "-r"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


def android_qualifier(identifier: str) -> str:
    """Encode a locale identifier as an Android resource qualifier.

    Example:
        >>> android_qualifier("de-DE")
        'de-rDE'
        >>> android_qualifier("fr")
        'fr'
    """
    if _SUBTAG_SEPARATOR not in identifier:
        return identifier
    parts = identifier.split(_SUBTAG_SEPARATOR)
    return f"{parts[0]}{_ANDROID_REGION_MARKER}{parts[-1].upper()}"


def android_identifier(qualifier: str) -> str:
    """Decode an Android resource qualifier back into a locale identifier.

    Qualifiers without the ``-r`` region marker are returned unchanged.

    Example:
        >>> android_identifier("pt-rBR")
        'pt-BR'
        >>> android_identifier("de-DE")
        'de-DE'
    """
    if _ANDROID_REGION_MARKER not in qualifier:
        return qualifier
    parts = qualifier.split(_ANDROID_REGION_MARKER)
    return f"{parts[0]}{_SUBTAG_SEPARATOR}{parts[-1]}"


def apple_lproj_name(identifier: str) -> str:
    """Encode a locale identifier as an Apple ``.lproj`` bundle name (sans suffix).

    Not invertible: ``foo-bar`` becomes ``foo-BAR`` and nothing on disk
    records the original casing.

    Example:
        >>> apple_lproj_name("fr-fr")
        'fr-FR'
        >>> apple_lproj_name("ZH-cn")
        'zh-Cn'
    """
    if _SUBTAG_SEPARATOR not in identifier:
        return identifier
    parts = identifier.split(_SUBTAG_SEPARATOR)
    primary, region = parts[0], parts[-1]
    if primary.lower().startswith("zh"):
        return f"{primary.lower()}{_SUBTAG_SEPARATOR}{region[:1].upper()}{region[1:]}"
    return f"{primary}{_SUBTAG_SEPARATOR}{region.upper()}"


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def locale_display_name(identifier: str) -> str:
    """Return an English display name for a locale, or the identifier itself.

    Service locale names are free-form ("default", "en-custom"), so lookups
    that Babel cannot resolve fall back to the raw identifier.

    Example:
        >>> locale_display_name("de-DE")
        'German (Germany)'
        >>> locale_display_name("default")
        'default'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not identifier:
        return identifier
    try:
        name = get_babel_locale(identifier).get_display_name("en")
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No display name for locale '%s': %s", identifier, e)
        return identifier
    return name or identifier
