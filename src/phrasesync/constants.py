"""Shared constants for phrasesync.

Centralized defaults used by the configuration layer, the format registry
and both orchestrators.

Constants are grouped by domain:
- Project defaults: values applied when the project file leaves a field empty
- Layout defaults: fallback directories for pull and push
- Concurrency: admission limits for the orchestrators
- Validation: patterns applied during pre-flight checks

Python 3.13+.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Project defaults
    "CONFIG_FILENAME",
    "DEFAULT_DOMAIN",
    "DEFAULT_LOCALE",
    "DEFAULT_DOWNLOAD_FORMAT",
    # Layout defaults
    "DEFAULT_TARGET_DIRECTORY",
    "DEFAULT_LOCALE_FOLDER",
    # Concurrency
    "PULL_CONCURRENCY",
    # Validation
    "TAG_PATTERN",
]

# ============================================================================
# PROJECT DEFAULTS
# ============================================================================

# Project file read by load_config() when no path is given.
CONFIG_FILENAME: str = ".phrase"

# Gettext domain and filename prefix.
DEFAULT_DOMAIN: str = "phrase"

DEFAULT_LOCALE: str = "en"

# Format used by pull when neither the project file nor the caller names one.
DEFAULT_DOWNLOAD_FORMAT: str = "yml"

# ============================================================================
# LAYOUT DEFAULTS
# ============================================================================

# Last-resort download root when neither the config nor the format has one.
DEFAULT_TARGET_DIRECTORY: str = "phrase/locales/"

# Conventional source folder pushed when push is called without paths.
DEFAULT_LOCALE_FOLDER: str = "config/locales"

# ============================================================================
# CONCURRENCY
# ============================================================================

# Simultaneous in-flight downloads during pull.
PULL_CONCURRENCY: int = 2

# ============================================================================
# VALIDATION
# ============================================================================

# Upload tags: letters, digits, underscore, dash and dot.
TAG_PATTERN: re.Pattern[str] = re.compile(r"\A[a-zA-Z0-9_.\-]+\Z")
