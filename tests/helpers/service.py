"""In-memory TranslationService for orchestrator tests.

Records every call, tracks how many downloads run at the same time, and lets
tests inject per-locale or per-file failures.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, BinaryIO

from phrasesync.errors import ServiceError
from phrasesync.models import Locale, RateLimit, Tag

if TYPE_CHECKING:
    from collections.abc import Sequence

    from phrasesync.models import DownloadRequest, UploadRequest


@dataclass
class FakeService:
    """Thread-safe recording fake of the translation service.

    Attributes:
        locales: Locales returned by list_locales()
        download_delay: Seconds each download sleeps (widens overlap windows)
        rate_limit: RateLimit returned by every download
        failing_locales: Locale names whose download raises ServiceError
        failing_files: Filenames whose upload raises ServiceError
        list_error: Raised by list_locales() when set
        injected_errors: Locale name or filename -> exception raised by its
            download or upload
    """

    locales: list[Locale] = field(default_factory=list)
    download_delay: float = 0.0
    rate_limit: RateLimit = field(default_factory=lambda: RateLimit(limit=60, remaining=59))
    failing_locales: frozenset[str] = frozenset()
    failing_files: frozenset[str] = frozenset()
    list_error: Exception | None = None
    injected_errors: dict[str, Exception] = field(default_factory=dict)

    downloads: list[DownloadRequest] = field(default_factory=list)
    uploads: list[UploadRequest] = field(default_factory=list)
    list_calls: int = 0
    max_in_flight: int = 0
    _in_flight: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def list_locales(self) -> Sequence[Locale]:
        with self._lock:
            self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.locales)

    def download_translations(self, request: DownloadRequest, stream: BinaryIO) -> RateLimit:
        with self._lock:
            self._in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            if self.download_delay:
                time.sleep(self.download_delay)
            if request.locale in self.injected_errors:
                raise self.injected_errors[request.locale]
            if request.locale in self.failing_locales:
                msg = f"404 Not Found: {request.locale}"
                raise ServiceError(msg, status_code=404)
            stream.write(f"{request.locale}: {request.format}\n".encode())
            with self._lock:
                self.downloads.append(request)
            return self.rate_limit
        finally:
            with self._lock:
                self._in_flight -= 1

    def upload_file(self, request: UploadRequest) -> None:
        if request.filename in self.injected_errors:
            raise self.injected_errors[request.filename]
        if request.filename in self.failing_files:
            msg = f"422 Unprocessable Entity: {request.filename}"
            raise ServiceError(msg, status_code=422)
        with self._lock:
            self.uploads.append(request)

    def create_locale(self, name: str) -> Locale:
        locale = Locale(name=name, code=name)
        with self._lock:
            self.locales.append(locale)
        return locale

    def make_default_locale(self, name: str) -> Locale:
        with self._lock:
            self.locales = [
                Locale(name=loc.name, code=loc.code, id=loc.id, is_default=loc.name == name)
                for loc in self.locales
            ]
            return next(loc for loc in self.locales if loc.name == name)

    def list_tags(self) -> Sequence[Tag]:
        return []

    def uploaded(self, filename: str) -> UploadRequest | None:
        """Return the recorded upload for filename, if any."""
        return next((r for r in self.uploads if r.filename == filename), None)
