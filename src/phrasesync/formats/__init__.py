"""Localization file formats and their per-locale layouts.

Submodules:
    placeholders - <token> substitution in user layout templates
    registry     - FormatSpec, FormatRegistry and the default format table
    paths        - PathResolver (config + locale -> directory, filename, root)
    extraction   - Locale recovery from existing file paths

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from phrasesync.formats.extraction import DefaultLocaleLookup, extract_locale
from phrasesync.formats.paths import (
    PathResolver,
    directory_for_locale,
    extract_locale_from_path,
    filename_for_locale,
)
from phrasesync.formats.placeholders import placeholders_for, resolve, resolve_for_locale
from phrasesync.formats.registry import (
    DEFAULT_REGISTRY,
    FormatRegistry,
    FormatSpec,
    build_default_registry,
    file_extension,
    template_format,
)

__all__ = [
    # Format table
    "DEFAULT_REGISTRY",
    "FormatRegistry",
    "FormatSpec",
    "build_default_registry",
    "template_format",
    "file_extension",
    # Layout resolution
    "PathResolver",
    "directory_for_locale",
    "filename_for_locale",
    # Locale recovery
    "DefaultLocaleLookup",
    "extract_locale",
    "extract_locale_from_path",
    # Templates
    "placeholders_for",
    "resolve",
    "resolve_for_locale",
]
