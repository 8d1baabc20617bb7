"""phrasesync - Locale-aware file layouts and synchronization with Phrase.

Resolves where each locale's translation file lives for every file format the
Phrase service supports, and synchronizes those files: pull downloads locales
with bounded parallelism, push uploads files with per-file locale inference.

Public API:
    Config - Project-wide defaults; load_config() reads the .phrase file
    PullOrchestrator - Download translations for many locales
    PushOrchestrator - Upload translation files
    TranslationService - Protocol implemented by service clients
    PathResolver - Config + locale -> directory, filename, target root
    DEFAULT_REGISTRY - Table of supported file formats

Exceptions:
    PhraseSyncError - Base exception class
    ConfigurationError - Unknown format or malformed project file
    SelectionError - Push pre-flight rejection
    ServiceError - Service request failure
    EncodingError - Malformed UTF-16 content

Submodules:
    phrasesync.formats - Format table, path resolution, locale extraction
    phrasesync.sync - Orchestrators and result summaries
    phrasesync.models - Service entities and request specs
    phrasesync.encoding - UTF-16 detection and transcoding
"""

from .config import Config, LocaleConfig, load_config
from .errors import (
    ConfigurationError,
    EncodingError,
    PhraseSyncError,
    SelectionError,
    ServiceError,
)
from .formats import (
    DEFAULT_REGISTRY,
    FormatRegistry,
    FormatSpec,
    PathResolver,
    directory_for_locale,
    extract_locale_from_path,
    filename_for_locale,
)
from .models import DownloadRequest, Locale, RateLimit, Tag, UploadRequest
from .service import TranslationService, find_default_locale_name
from .sync import PullOrchestrator, PullSummary, PushOrchestrator, PushSummary

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("phrasesync")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_REGISTRY",
    "Config",
    "ConfigurationError",
    "DownloadRequest",
    "EncodingError",
    "FormatRegistry",
    "FormatSpec",
    "Locale",
    "LocaleConfig",
    "PathResolver",
    "PhraseSyncError",
    "PullOrchestrator",
    "PullSummary",
    "PushOrchestrator",
    "PushSummary",
    "RateLimit",
    "SelectionError",
    "ServiceError",
    "Tag",
    "TranslationService",
    "UploadRequest",
    "__version__",
    "directory_for_locale",
    "extract_locale_from_path",
    "filename_for_locale",
    "find_default_locale_name",
    "load_config",
]
