"""phrasesync exception hierarchy.

Fatal errors (ConfigurationError, SelectionError) abort a command before any
unit of work is scheduled. Per-unit errors (ServiceError, EncodingError and the
builtin OSError family) are caught at the unit boundary by the orchestrators
and recorded in the batch summary instead of propagating.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "EncodingError",
    "PhraseSyncError",
    "SelectionError",
    "ServiceError",
]


class PhraseSyncError(Exception):
    """Base exception for all phrasesync errors."""


class ConfigurationError(PhraseSyncError):
    """Invalid project configuration or format table.

    Raised for unrecognized format ids, malformed project files and format
    specs that break the registry invariants.
    """


class SelectionError(PhraseSyncError):
    """Push selection rejected during pre-flight.

    Examples:
    - No file or directory could be found to upload
    - An explicit locale was given for more than one file
    - A tag contains characters outside [A-Za-z0-9_.-]
    """


class ServiceError(PhraseSyncError):
    """Translation service request failed.

    Raised by TranslationService implementations, typically for non-2xx
    responses.

    Attributes:
        status_code: HTTP status reported by the service, if any
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialize ServiceError.

        Args:
            message: Human-readable failure description
            status_code: HTTP status reported by the service, if any
        """
        super().__init__(message)
        self.status_code = status_code


class EncodingError(PhraseSyncError):
    """Content presented as UTF-16 has an odd number of bytes."""
