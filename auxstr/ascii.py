"""Measuring, counting and verifying ASCII byte ranges.

NUL (and any byte whose low seven bits are all zero) is not accepted as a
character.
"""

from __future__ import annotations

from .errors import UnknownByteError


def measure(data: bytes, pos: int = 0) -> int:
    """Return the byte width of the character at ``pos``: 1, or 0 if invalid."""
    return 1 if data[pos] & 0x7F else 0


def count(data: bytes, limit: int | None = None) -> tuple[int, int]:
    """Count ASCII characters in ``data``.

    At most ``limit`` characters are counted; ``None``, a non-positive limit
    or one not below ``len(data)`` means the whole range. Returns a pair
    ``(bytes, chars)``, which are always equal for ASCII.

    Raises :class:`UnknownByteError` at the first invalid byte.
    """
    size = len(data)
    stop = limit if limit is not None and 0 < limit < size else size
    for offset, byte in enumerate(bytes(data[:stop])):
        if not byte & 0x7F:
            raise UnknownByteError(offset, offset)
    return stop, stop


def verify(data: bytes) -> bool:
    """Tell whether ``data`` consists entirely of valid ASCII characters."""
    try:
        consumed, _ = count(data)
    except UnknownByteError:
        return False
    return consumed == len(data)