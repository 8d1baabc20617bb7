"""Pull and push orchestration.

Submodules:
    pull    - PullOrchestrator (bounded-parallel locale downloads)
    push    - PushOrchestrator (one upload per file), tag helpers
    results - Per-unit results and batch summaries

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from phrasesync.enums import UnitStatus
from phrasesync.sync.pull import PullOrchestrator
from phrasesync.sync.push import PushOrchestrator, parse_tags, validate_tags
from phrasesync.sync.results import DownloadResult, PullSummary, PushSummary, UploadResult

__all__ = [
    # Orchestrators
    "PullOrchestrator",
    "PushOrchestrator",
    # Tag helpers
    "parse_tags",
    "validate_tags",
    # Results
    "UnitStatus",
    "DownloadResult",
    "UploadResult",
    "PullSummary",
    "PushSummary",
]
