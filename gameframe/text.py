"""String helpers used for case-insensitive engine names."""

from __future__ import annotations

import locale
import string

_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of text, leaving every other character alone."""
    return text.translate(_UPPER_TABLE)


def ascii_to_unicode(data: bytes) -> str:
    """Decode bytes in the system's preferred narrow encoding."""
    encoding = locale.getpreferredencoding(False) or "ascii"
    return bytes(data).decode(encoding, errors="replace")