"""Per-unit results and batch summaries for pull and push.

Each unit of work (one locale download, one file upload) produces exactly one
immutable result. Orchestrators collect them into a summary after the join
barrier, so no result is ever shared between threads while it is written.

Components:
    DownloadResult - Outcome of downloading one locale
    UploadResult - Outcome of uploading one file
    PullSummary - Aggregate of a pull batch
    PushSummary - Aggregate of a push batch

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from phrasesync.enums import UnitStatus

if TYPE_CHECKING:
    from phrasesync.models import RateLimit

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unit results
    "DownloadResult",
    "UploadResult",
    # Batch summaries
    "PullSummary",
    "PushSummary",
]

_FAILURE_STATUSES = frozenset({
    UnitStatus.IO_ERROR,
    UnitStatus.SERVICE_ERROR,
    UnitStatus.ENCODING_ERROR,
})


@dataclass(frozen=True, slots=True)
class DownloadResult:
    """Result of downloading one locale.

    Attributes:
        locale: Locale name
        status: SUCCESS, RATE_LIMITED, IO_ERROR or SERVICE_ERROR
        path: Destination file, once resolved
        rate_limit: Quota metadata, when the download completed
        error: Exception that abandoned the unit, if any
    """

    locale: str
    status: UnitStatus
    path: str | None = None
    rate_limit: RateLimit | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the locale was downloaded with quota to spare."""
        return self.status == UnitStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the unit was abandoned."""
        return self.status in _FAILURE_STATUSES


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Result of uploading one file.

    Attributes:
        path: File as selected
        status: SUCCESS, UNSUPPORTED, IO_ERROR, ENCODING_ERROR or SERVICE_ERROR
        locale: Locale the file was uploaded as, once resolved
        error: Exception that abandoned the unit, if any
    """

    path: str
    status: UnitStatus
    locale: str = ""
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file was uploaded."""
        return self.status == UnitStatus.SUCCESS

    @property
    def is_unsupported(self) -> bool:
        """Check if the file was skipped for its extension."""
        return self.status == UnitStatus.UNSUPPORTED

    @property
    def is_error(self) -> bool:
        """Check if the unit was abandoned."""
        return self.status in _FAILURE_STATUSES


@dataclass(frozen=True, slots=True)
class PullSummary:
    """Immutable aggregate of a pull batch.

    Attributes:
        results: One result per resolved locale, in scheduling order
        unknown_locales: Requested names the service does not know

    Example:
        >>> summary = orchestrator.pull(DownloadRequest(), ["en", "xx"])
        >>> summary.unknown_locales
        ('xx',)
        >>> summary.rate_limited
        0
    """

    results: tuple[DownloadResult, ...]
    unknown_locales: tuple[str, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"PullSummary(total={self.total}, "
            f"ok={self.successful}, "
            f"rate_limited={self.rate_limited}, "
            f"errors={self.errors}, "
            f"unknown={len(self.unknown_locales)})"
        )

    @property
    def total(self) -> int:
        """Number of scheduled downloads."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of downloads that completed with quota to spare."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def rate_limited(self) -> int:
        """Number of downloads that exhausted the quota."""
        return sum(1 for r in self.results if r.status == UnitStatus.RATE_LIMITED)

    @property
    def errors(self) -> int:
        """Number of abandoned downloads."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[DownloadResult, ...]:
        """Get all abandoned downloads."""
        return tuple(r for r in self.results if r.is_error)

    def get_by_locale(self, locale: str) -> DownloadResult | None:
        """Get the result for locale, if it was scheduled."""
        return next((r for r in self.results if r.locale == locale), None)

    @property
    def exit_code(self) -> int:
        """Process exit code for the command-line layer.

        Per-locale failures never fail the batch; pre-flight failures raise
        before a summary exists.
        """
        return 0


@dataclass(frozen=True, slots=True)
class PushSummary:
    """Immutable aggregate of a push batch.

    Attributes:
        results: One result per selected file, in selection order
    """

    results: tuple[UploadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"PushSummary(total={self.total}, "
            f"ok={self.successful}, "
            f"unsupported={self.unsupported}, "
            f"errors={self.errors})"
        )

    @property
    def total(self) -> int:
        """Number of selected files."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of uploaded files."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def unsupported(self) -> int:
        """Number of files skipped for their extension."""
        return sum(1 for r in self.results if r.is_unsupported)

    @property
    def errors(self) -> int:
        """Number of abandoned uploads."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[UploadResult, ...]:
        """Get all abandoned uploads."""
        return tuple(r for r in self.results if r.is_error)

    def get_by_path(self, path: str) -> UploadResult | None:
        """Get the result for path, if it was selected."""
        return next((r for r in self.results if r.path == path), None)

    @property
    def exit_code(self) -> int:
        """Process exit code for the command-line layer.

        Per-file failures never fail the batch; pre-flight failures raise
        before a summary exists.
        """
        return 0
