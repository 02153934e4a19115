"""Measuring, counting and verifying UTF-8 byte ranges.

Code point to UTF-8 layout:

    U+0000   .. U+007F    0yyyzzzz
    U+0080   .. U+07FF    110xxxyy 10yyzzzz
    U+0800   .. U+FFFF    1110wwww 10xxxxyy 10yyzzzz
    U+010000 .. U+10FFFF  11110uvv 10vvwwww 10xxxxyy 10yyzzzz
"""

from __future__ import annotations

from .errors import UnknownByteError


def measure(data: bytes, pos: int = 0) -> int:
    """Return the byte width of the character whose lead byte is at ``pos``.

    Returns 1 to 4 for a valid lead byte, 0 for a continuation byte
    (``10xxxxxx``) and -1 for a byte of the form ``11111xxx``.
    """
    lead = data[pos]
    if lead < 0x80:
        return 1
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    if lead < 0xF8:
        return 4
    return -1


def measure_by_lookup(data: bytes, pos: int = 0) -> int:
    """Like :func:`measure`, but any invalid lead byte yields 0."""
    width = measure(data, pos)
    return width if width > 0 else 0


def _continuations_valid(data: bytes, pos: int, width: int) -> bool:
    tail = data[pos + 1 : pos + width]
    return len(tail) == width - 1 and all(0x80 <= b < 0xC0 for b in tail)


def count(data: bytes, limit: int | None = None) -> tuple[int, int]:
    """Count UTF-8 characters in ``data``.

    At most ``limit`` characters are counted (``None`` means no limit).
    Returns a pair ``(bytes, chars)``: the bytes those characters occupy
    and how many there are.

    Raises :class:`UnknownByteError` at the first malformed character,
    including one cut short by the end of ``data``.
    """
    view = bytes(data)
    size = len(view)
    pos = 0
    chars = 0
    while pos < size and (limit is None or chars < limit):
        width = measure(view, pos)
        if width < 1 or not _continuations_valid(view, pos, width):
            raise UnknownByteError(pos, chars)
        pos += width
        chars += 1
    return pos, chars


def verify(data: bytes) -> bool:
    """Tell whether ``data`` consists entirely of well-formed UTF-8 characters."""
    try:
        consumed, _ = count(data, len(data))
    except UnknownByteError:
        return False
    return consumed == len(data)