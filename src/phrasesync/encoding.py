"""UTF-16 detection and transcoding for uploads.

The service expects UTF-8 text. Files saved by some editors (notably Apple
.strings files) are UTF-16 with a byte-order mark; those are transcoded
before upload so their content is not corrupted in transit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from phrasesync.errors import EncodingError

__all__ = [
    "decode_utf16",
    "is_utf16",
    "normalize_content",
]

_BOM_BIG_ENDIAN = b"\xfe\xff"
_BOM_LITTLE_ENDIAN = b"\xff\xfe"


def is_utf16(data: bytes) -> bool:
    """True if data starts with a big- or little-endian UTF-16 byte-order mark."""
    return data[:2] in (_BOM_BIG_ENDIAN, _BOM_LITTLE_ENDIAN)


def decode_utf16(data: bytes) -> str:
    """Decode BOM-prefixed UTF-16 into text.

    Code units are read in the byte order announced by the BOM. The BOM pair
    is decoded too and yields U+FEFF (zero width no-break space), which the
    service ignores. Unpaired surrogates decode to U+FFFD.

    Args:
        data: Raw file content starting with a UTF-16 BOM

    Returns:
        Decoded text

    Raises:
        EncodingError: If data has an odd number of bytes

    Example:
        >>> decode_utf16(b"\\xff\\xfeh\\x00i\\x00")
        '\\ufeffhi'
    """
    if len(data) % 2 != 0:
        msg = f"UTF-16 content must have an even number of bytes, got {len(data)}"
        raise EncodingError(msg)
    codec = "utf-16-be" if data.startswith(_BOM_BIG_ENDIAN) else "utf-16-le"
    return data.decode(codec, errors="replace")


def normalize_content(data: bytes) -> str:
    """Return file content as text ready for upload.

    UTF-16 input (detected by its BOM) is transcoded; anything else is read
    as UTF-8 with undecodable bytes replaced.

    Raises:
        EncodingError: If BOM-prefixed content has an odd number of bytes
    """
    if is_utf16(data):
        return decode_utf16(data)
    return data.decode("utf-8", errors="replace")
