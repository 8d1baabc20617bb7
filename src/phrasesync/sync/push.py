"""Upload localization files, one independent unit per file.

Architecture:
    - Pre-flight (single-threaded, raises): format id, tag syntax, file
      selection, and the single-file rule for an explicit locale
    - Gating: files whose extension no registered format accepts are
      reported and skipped, unless the format renders the locale as extension
    - Fan-out: one worker per eligible file, no admission control
    - Join: push() returns only after every upload completed or failed

Each unit infers its locale when the request has none (format guessed from
the extension, then the locale encoded in the path, then the project's
default locale), transcodes UTF-16 content, and uploads. Read, encoding and
service failures are logged and recorded for that file only.
Other exceptions raised by the service client are re-raised by push() after
the join.

Python 3.13+.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import replace
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from phrasesync.constants import DEFAULT_LOCALE_FOLDER, TAG_PATTERN
from phrasesync.encoding import normalize_content
from phrasesync.enums import UnitStatus
from phrasesync.errors import EncodingError, PhraseSyncError, SelectionError
from phrasesync.formats.registry import DEFAULT_REGISTRY, file_extension
from phrasesync.service import find_default_locale_name
from phrasesync.sync.results import PushSummary, UploadResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from phrasesync.config import Config
    from phrasesync.formats.registry import FormatRegistry
    from phrasesync.models import UploadRequest
    from phrasesync.service import TranslationService

__all__ = ["PushOrchestrator", "parse_tags", "validate_tags"]

logger = logging.getLogger(__name__)


def parse_tags(value: str) -> tuple[str, ...]:
    """Split a comma-separated tag list, dropping empty entries.

    Example:
        >>> parse_tags("release, ios,,beta")
        ('release', 'ios', 'beta')
    """
    return tuple(tag.strip() for tag in value.split(",") if tag.strip())


def validate_tags(tags: Iterable[str]) -> None:
    """Check every tag against the allowed alphabet.

    Raises:
        SelectionError: On the first tag with characters outside [A-Za-z0-9_.-]
    """
    for tag in tags:
        if not TAG_PATTERN.match(tag):
            msg = (
                f"Tag {tag} is invalid: only letters, numbers, underscores, "
                "dashes and dots are allowed"
            )
            raise SelectionError(msg)


def _list_files(directory: Path, recursive: bool) -> list[str]:
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        logger.warning("Could not list %s: %s", directory, e)
        return []
    files: list[str] = []
    for child in children:
        if child.is_dir():
            # Symlinked directories are not followed.
            if recursive and not child.is_symlink():
                files.extend(_list_files(child, recursive))
        else:
            files.append(str(child))
    return files


class PushOrchestrator:
    """Upload selected files to the translation service.

    Example:
        >>> orchestrator = PushOrchestrator(service, load_config())
        >>> summary = orchestrator.push(UploadRequest(tags=("release",)), ["config/locales"])
        >>> summary.exit_code
        0
    """

    __slots__ = ("_config", "_registry", "_service")

    def __init__(
        self,
        service: TranslationService,
        config: Config,
        *,
        registry: FormatRegistry = DEFAULT_REGISTRY,
    ) -> None:
        """Initialize push orchestrator.

        Args:
            service: Translation service client
            config: Project config; its format is used when the request has none
            registry: Format table
        """
        self._service = service
        self._config = config
        self._registry = registry

    def push(
        self,
        request: UploadRequest,
        paths: Sequence[str] = (),
        *,
        recursive: bool = False,
    ) -> PushSummary:
        """Upload the files named by paths.

        Args:
            request: Options shared by every upload; request.locale, when set,
                requires exactly one selected file
            paths: Files and directories; empty means ``config/locales``
            recursive: Descend into subdirectories of directory arguments

        Returns:
            PushSummary with one result per selected file

        Raises:
            ConfigurationError: If the request format is not registered
            SelectionError: On invalid tags, an empty selection, or an
                explicit locale with more than one file
            Exception: Whatever an upload raised outside the PhraseSyncError
                and OSError families, after all uploads finished
        """
        request = replace(request, format=request.format or self._config.format)
        if request.format:
            self._registry.lookup(request.format)
        validate_tags(request.tags)

        files = self.select_files(paths, recursive=recursive)
        if not files:
            msg = "Could not find any files to upload"
            raise SelectionError(msg)
        if len(files) > 1 and request.locale:
            msg = "An explicit locale can only be given when a single file is uploaded"
            raise SelectionError(msg)

        supported = self._registry.supported_extensions
        any_extension = self._registry.renders_locale_as_extension(request.format)
        results: list[UploadResult | None] = [None] * len(files)
        eligible: list[int] = []
        for index, file in enumerate(files):
            if any_extension or file_extension(file) in supported:
                eligible.append(index)
            else:
                logger.warning("Could not upload %s (type not supported)", file)
                results[index] = UploadResult(path=file, status=UnitStatus.UNSUPPORTED)

        if eligible:
            with ThreadPoolExecutor(
                max_workers=len(eligible), thread_name_prefix="push"
            ) as executor:
                futures = {
                    index: executor.submit(self._upload_file, request, files[index])
                    for index in eligible
                }
                wait(futures.values())
            for index, future in futures.items():
                results[index] = future.result()

        return PushSummary(results=tuple(r for r in results if r is not None))

    def select_files(self, paths: Sequence[str], *, recursive: bool = False) -> list[str]:
        """Expand file and directory arguments into a file list.

        Missing paths are skipped. Without arguments the conventional
        ``config/locales`` folder is used if it exists.

        Raises:
            SelectionError: If no arguments were given and the default folder
                does not exist
        """
        if not paths:
            default_folder = Path(DEFAULT_LOCALE_FOLDER)
            if not default_folder.is_dir():
                msg = "Need either a file or a directory: push FILE or push DIRECTORY"
                raise SelectionError(msg)
            logger.warning("No file or directory specified, using %s", default_folder)
            paths = [str(default_folder)]

        files: list[str] = []
        for arg in paths:
            if not arg:
                continue
            path = Path(arg)
            if path.is_dir():
                files.extend(_list_files(path, recursive))
            elif path.exists():
                files.append(arg)
            else:
                logger.debug("Skipping missing path %s", arg)
        return files

    def guess_locale(self, path: str, format_id: str = "") -> str:
        """Infer the locale of the file at path.

        Order: the format (given, or guessed from the extension) extracts the
        locale from the path if it is locale aware; otherwise, or when the
        path carries none, the project's default locale is used.

        Raises:
            ServiceError: If the default locale lookup fails
        """
        format_id = format_id or self._registry.guess_format(path)
        spec = self._registry.get(format_id) if format_id else None
        default_lookup = partial(find_default_locale_name, self._service)
        if spec is not None and spec.locale_aware:
            locale = spec.extract_locale_from_path(path, default_lookup)
            if locale:
                return locale
        return default_lookup()

    def _upload_file(self, shared: UploadRequest, path: str) -> UploadResult:
        tagged = f" (tagged: {', '.join(shared.tags)})" if shared.tags else ""
        logger.info("Uploading %s%s...", path, tagged)

        locale = shared.locale
        try:
            if not locale:
                locale = self.guess_locale(path, shared.format)
            content = normalize_content(Path(path).read_bytes())
            self._service.upload_file(
                replace(shared, locale=locale, filename=path, file_content=content)
            )
        except EncodingError as e:
            return self._failed(path, locale, UnitStatus.ENCODING_ERROR, e)
        except PhraseSyncError as e:
            return self._failed(path, locale, UnitStatus.SERVICE_ERROR, e)
        except OSError as e:
            return self._failed(path, locale, UnitStatus.IO_ERROR, e)

        logger.debug("Uploaded %s as %s", path, locale)
        return UploadResult(path=path, status=UnitStatus.SUCCESS, locale=locale)

    @staticmethod
    def _failed(path: str, locale: str, status: UnitStatus, error: Exception) -> UploadResult:
        logger.error("Error uploading %s: %s", path, error)
        return UploadResult(path=path, status=status, locale=locale, error=error)
