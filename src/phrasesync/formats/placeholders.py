"""Placeholder substitution for user-configurable file layouts.

Templates such as ``./<locale.name>/`` or ``<domain>.<format>`` let users
override the directory and filename a format would compute on its own.

Recognized tokens:
    <domain>       Config.domain
    <format>       Config.format
    <locale.name>  Locale.name
    <locale.code>  Locale.code
    <locale>       Locale.name (alias)

Substitution is a single left-to-right pass: replacement values are never
rescanned, so a value that happens to contain a token is emitted literally
and the result does not depend on substitution order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from phrasesync.config import Config
    from phrasesync.models import Locale

__all__ = [
    "TOKENS",
    "placeholders_for",
    "resolve",
    "resolve_for_locale",
]

TOKENS: tuple[str, ...] = (
    "<domain>",
    "<format>",
    "<locale.name>",
    "<locale.code>",
    "<locale>",
)

_TOKEN_PATTERN = re.compile(r"<[a-z.]+>")


def placeholders_for(config: Config, locale: Locale) -> dict[str, str]:
    """Build the token table for one project/locale pair."""
    return {
        "<domain>": config.domain,
        "<format>": config.format,
        "<locale.name>": locale.name,
        "<locale.code>": locale.code,
        "<locale>": locale.name,
    }


def resolve(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace every known token in template with its value.

    Markers that look like tokens but are not in substitutions are left as is.
    The empty template resolves to the empty string, which callers treat as
    "not overridden".

    Args:
        template: String containing zero or more <token> markers
        substitutions: Token (including angle brackets) to replacement value

    Returns:
        Template with all known tokens replaced

    Example:
        >>> resolve("<domain>.<locale>.yml", {"<domain>": "app", "<locale>": "de"})
        'app.de.yml'
    """
    if not template:
        return template
    return _TOKEN_PATTERN.sub(
        lambda match: substitutions.get(match.group(0), match.group(0)),
        template,
    )


def resolve_for_locale(template: str, config: Config, locale: Locale) -> str:
    """Resolve template against the values of config and locale."""
    return resolve(template, placeholders_for(config, locale))
