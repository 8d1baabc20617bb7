"""Download translations for many locales with bounded parallelism.

Architecture:
    - Pre-flight (single-threaded): resolve the format, validate it, and
      resolve requested locale names against the service's locale list
    - Fan-out: one unit per locale on a fixed-size worker pool; at most
      ``concurrency`` downloads are in flight, the rest wait in the queue
    - Join: pull() returns only after every unit completed or failed

Each unit resolves its LocaleConfig, creates the directory, truncates the
destination file and streams the download into it. A unit that fails is
logged and recorded; it never cancels its siblings. A download that reports
zero remaining quota is recorded as RATE_LIMITED and, likewise, does not stop
units that are already queued.
Exceptions outside the PhraseSyncError and OSError families are programming
errors in the service client; they are re-raised by pull() once every unit
has been joined.

Python 3.13+. Uses Babel (via locale_utils) for display names in log lines.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import replace
from typing import TYPE_CHECKING

from phrasesync.constants import DEFAULT_DOWNLOAD_FORMAT, PULL_CONCURRENCY
from phrasesync.enums import UnitStatus
from phrasesync.errors import PhraseSyncError
from phrasesync.formats.paths import PathResolver
from phrasesync.formats.registry import DEFAULT_REGISTRY
from phrasesync.locale_utils import locale_display_name
from phrasesync.sync.results import DownloadResult, PullSummary

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from phrasesync.config import Config
    from phrasesync.formats.registry import FormatRegistry
    from phrasesync.models import DownloadRequest, Locale, RateLimit
    from phrasesync.service import TranslationService

__all__ = ["PullOrchestrator"]

logger = logging.getLogger(__name__)


def _describe_reset(rate_limit: RateLimit) -> str:
    return rate_limit.reset.isoformat() if rate_limit.reset else "an unknown time"


class PullOrchestrator:
    """Download one file per locale into the configured layout.

    Example:
        >>> orchestrator = PullOrchestrator(service, load_config())
        >>> summary = orchestrator.pull(DownloadRequest(tag="release"), ["en", "de"])
        >>> summary.successful
        2
    """

    __slots__ = ("_concurrency", "_config", "_resolver", "_service")

    def __init__(
        self,
        service: TranslationService,
        config: Config,
        *,
        registry: FormatRegistry = DEFAULT_REGISTRY,
        concurrency: int = PULL_CONCURRENCY,
    ) -> None:
        """Initialize pull orchestrator.

        Args:
            service: Translation service client
            config: Project config (read-only during the pull)
            registry: Format table
            concurrency: Maximum simultaneous downloads

        Raises:
            ValueError: If concurrency is less than 1
        """
        if concurrency < 1:
            msg = f"concurrency must be at least 1, got {concurrency}"
            raise ValueError(msg)
        self._service = service
        self._config = config
        self._resolver = PathResolver(registry)
        self._concurrency = concurrency

    def pull(
        self,
        request: DownloadRequest,
        locale_names: Iterable[str] = (),
    ) -> PullSummary:
        """Download request's translations for the named locales.

        request.format and request.encoding override the config's values when
        set; the format falls back to "yml" when neither names one.

        Args:
            request: Options shared by every download
            locale_names: Locale names to download; empty means every locale

        Returns:
            PullSummary with one result per resolved locale

        Raises:
            ConfigurationError: If the format is not registered
            ServiceError: If the locale list cannot be fetched
            Exception: Whatever a unit raised outside the PhraseSyncError and
                OSError families, after all units finished
        """
        config = self._config.with_overrides(format=request.format, encoding=request.encoding)
        if not config.format:
            config = config.with_overrides(format=DEFAULT_DOWNLOAD_FORMAT)
        config.validate(self._resolver.registry)
        shared = replace(request, format=config.format, encoding=config.encoding)

        selected, unknown = self.select_locales(locale_names)
        logger.debug(
            "Pulling %d locale(s) as %s with concurrency %d",
            len(selected),
            config.format,
            self._concurrency,
        )

        results: tuple[DownloadResult, ...] = ()
        if selected:
            with ThreadPoolExecutor(
                max_workers=self._concurrency, thread_name_prefix="pull"
            ) as executor:
                futures = [
                    executor.submit(self._fetch_locale, config, shared, locale)
                    for locale in selected
                ]
                wait(futures)
            results = tuple(future.result() for future in futures)

        return PullSummary(results=results, unknown_locales=unknown)

    def select_locales(
        self, locale_names: Iterable[str]
    ) -> tuple[tuple[Locale, ...], tuple[str, ...]]:
        """Resolve locale names against the service's locale list.

        Duplicate names are collapsed. Unknown names are logged and returned
        separately; they are not an error.

        Returns:
            (selected locales in request order, unknown names)

        Raises:
            ServiceError: If the locale list cannot be fetched
        """
        available: Sequence[Locale] = self._service.list_locales()
        requested = tuple(dict.fromkeys(locale_names))
        if not requested:
            return tuple(available), ()

        by_name = {locale.name: locale for locale in available}
        selected: list[Locale] = []
        unknown: list[str] = []
        for name in requested:
            locale = by_name.get(name)
            if locale is None:
                logger.warning("Skipping unknown locale %s", name)
                unknown.append(name)
            else:
                selected.append(locale)
        return tuple(selected), tuple(unknown)

    def _fetch_locale(
        self, config: Config, shared: DownloadRequest, locale: Locale
    ) -> DownloadResult:
        layout = self._resolver.for_locale(config, locale)
        folder = layout.directory
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Error creating folder %s: %s", folder, e)
            return DownloadResult(locale=locale.name, status=UnitStatus.IO_ERROR, error=e)

        path = layout.path
        try:
            stream = path.open("wb")
        except OSError as e:
            logger.error("Error creating file %s: %s", path, e)
            return DownloadResult(
                locale=locale.name, status=UnitStatus.IO_ERROR, path=str(path), error=e
            )

        request = replace(shared, locale=locale.name)
        try:
            with stream:
                rate_limit = self._service.download_translations(request, stream)
        except PhraseSyncError as e:
            logger.error("Error downloading locale %s: %s", locale.name, e)
            return DownloadResult(
                locale=locale.name, status=UnitStatus.SERVICE_ERROR, path=str(path), error=e
            )
        except OSError as e:
            logger.error("Error writing file %s: %s", path, e)
            return DownloadResult(
                locale=locale.name, status=UnitStatus.IO_ERROR, path=str(path), error=e
            )

        # TODO: decide whether an exhausted quota should stop queued locales;
        # today only the unit that observed it reports the limit.
        if rate_limit.exhausted:
            logger.warning(
                "Rate limit reached. Please try again at %s", _describe_reset(rate_limit)
            )
            return DownloadResult(
                locale=locale.name,
                status=UnitStatus.RATE_LIMITED,
                path=str(path),
                rate_limit=rate_limit,
            )

        logger.info("Downloaded %s (%s)", path, locale_display_name(locale.identifier))
        return DownloadResult(
            locale=locale.name, status=UnitStatus.SUCCESS, path=str(path), rate_limit=rate_limit
        )
