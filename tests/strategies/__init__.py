"""Hypothesis strategies for phrasesync property-based testing.

Usage:
    from tests.strategies import locale_identifiers, layout_templates
"""

from .locales import (
    languages,
    layout_templates,
    locale_identifiers,
    regions,
    substitution_values,
)

__all__ = [
    "languages",
    "layout_templates",
    "locale_identifiers",
    "regions",
    "substitution_values",
]
