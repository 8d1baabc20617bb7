"""Translation service boundary.

The orchestrators talk to the remote service only through the
TranslationService protocol. HTTP transport, authentication and JSON decoding
live in implementations outside this package.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from phrasesync.models import DownloadRequest, Locale, RateLimit, Tag, UploadRequest

__all__ = ["TranslationService", "find_default_locale_name"]

logger = logging.getLogger(__name__)


class TranslationService(Protocol):
    """Protocol for the remote translation-management service.

    Implementations must be safe to call from several threads at once: pull
    runs two downloads in parallel and push runs one upload per file.

    Every method raises ServiceError (or a subclass) when the service
    rejects or fails the request.

    Example:
        >>> class InMemoryService:
        ...     def list_locales(self):
        ...         return [Locale(name="en", is_default=True)]
        ...     ...
        >>> PullOrchestrator(InMemoryService(), Config(format="yml")).pull(DownloadRequest())
    """

    def list_locales(self) -> Sequence[Locale]:
        """Return every locale of the project."""

    def download_translations(self, request: DownloadRequest, stream: BinaryIO) -> RateLimit:
        """Write request.locale's translations to stream.

        Args:
            request: Download options; request.locale names the locale
            stream: Binary sink the response body is written to

        Returns:
            Rate-limit metadata reported with the response
        """

    def upload_file(self, request: UploadRequest) -> None:
        """Upload request.file_content as request.filename for request.locale."""

    def create_locale(self, name: str) -> Locale:
        """Create a locale named name."""

    def make_default_locale(self, name: str) -> Locale:
        """Promote the locale named name to project default."""

    def list_tags(self) -> Sequence[Tag]:
        """Return every tag of the project."""


def find_default_locale_name(service: TranslationService) -> str:
    """Name of the project's default locale, or "" if none is flagged.

    Raises:
        ServiceError: If listing locales fails
    """
    for locale in service.list_locales():
        if locale.is_default:
            return locale.name
    logger.debug("Project has no default locale")
    return ""
