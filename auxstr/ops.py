"""Building new strings from existing ones.

Repeating, concatenating, joining, replacing, inserting, removing and
trimming. Operations that produce new content return a fresh string.
Operations that only narrow a string (trimming, chomping) return a slice
of it.
"""

from __future__ import annotations

from typing import Iterable

from . import nstr as _nstr
from .nstr import ByteChar, Encoding, NStr

_WHITESPACE = b" \t\r\n\v\f"


def _merged_encoding(encodings: Iterable[Encoding]) -> Encoding:
    """Pick UTF-8 if any part is UTF-8; ASCII is a subset of it."""
    return Encoding.UTF8 if Encoding.UTF8 in set(encodings) else Encoding.ASCII


def _byte_of(ch: ByteChar) -> bytes:
    return bytes([_nstr._single_byte(ch)])


def _byte_offset(s: NStr, index: int) -> int:
    """Return the byte offset of character ``index`` within ``s``."""
    return s.slice(0, index).size() if index > 0 else 0


def _splice(s: NStr, index: int, chars: int, raw: bytes,
            encoding: Encoding) -> NStr:
    if index < 0 or chars < 0:
        raise ValueError("negative index or length is not supported")
    index = min(index, len(s))
    removed = min(chars, len(s) - index)
    if not raw and removed == 0:
        return s
    head = _byte_offset(s, index)
    middle = s.slice(index, removed).size() if removed else 0
    data = bytes(s)
    result = data[:head] + raw + data[head + middle:]
    encodings = [s.encoding(), encoding] if raw else [s.encoding()]
    return _nstr.new(result, _merged_encoding(encodings))


def _join_raw(deli: bytes, strings: Iterable[NStr],
              extra: Iterable[Encoding] = ()) -> NStr:
    parts = list(strings)
    if not parts:
        return _nstr.blank()
    data = deli.join(bytes(part) for part in parts)
    encodings = [part.encoding() for part in parts]
    encodings.extend(extra)
    return _nstr.new(data, _merged_encoding(encodings))


def repeat(s: NStr, n: int) -> NStr:
    """Return ``s`` repeated ``n`` times.

    A blank ``s`` yields the blank string; ``n`` of 1 or less returns ``s``
    itself.
    """
    if s.size() == 0:
        return _nstr.blank()
    if n <= 1:
        return s
    return _nstr.new(bytes(s) * n, s.encoding())


def concat(*args: NStr) -> NStr:
    """Return the concatenation of all arguments."""
    return _join_raw(b"", args)


def join(deli: NStr | None, strings: Iterable[NStr]) -> NStr:
    """Join ``strings`` with ``deli`` between them.

    A ``None`` or blank delimiter joins without separation; no strings
    yields the blank string.
    """
    if deli is None or deli.size() == 0:
        return _join_raw(b"", strings)
    return _join_raw(bytes(deli), strings, [deli.encoding()])


def join_by_char(deli: ByteChar, strings: Iterable[NStr]) -> NStr:
    """Join ``strings`` with the single byte ``deli`` between them."""
    return _join_raw(_byte_of(deli), strings)


def replace(s: NStr, index: int, chars: int, to: NStr) -> NStr:
    """Replace at most ``chars`` characters of ``s`` from ``index`` with ``to``.

    An ``index`` past the end appends ``to``.
    """
    return _splice(s, index, chars, bytes(to), to.encoding())


def replace_with_char(s: NStr, index: int, chars: int, ch: ByteChar) -> NStr:
    """Replace at most ``chars`` characters from ``index`` with one byte."""
    return _splice(s, index, chars, _byte_of(ch), Encoding.ASCII)


def insert(s: NStr, index: int, sub: NStr) -> NStr:
    """Insert ``sub`` before character ``index``."""
    return replace(s, index, 0, sub)


def insert_char(s: NStr, index: int, ch: ByteChar) -> NStr:
    """Insert the single byte ``ch`` before character ``index``."""
    return replace_with_char(s, index, 0, ch)


def prepend(s: NStr, sub: NStr) -> NStr:
    """Insert ``sub`` at the head of ``s``."""
    return replace(s, 0, 0, sub)


def prepend_char(s: NStr, ch: ByteChar) -> NStr:
    """Insert the single byte ``ch`` at the head of ``s``."""
    return replace_with_char(s, 0, 0, ch)


def append(s: NStr, sub: NStr) -> NStr:
    """Add ``sub`` after the tail of ``s``."""
    return replace(s, len(s), 0, sub)


def append_char(s: NStr, ch: ByteChar) -> NStr:
    """Add the single byte ``ch`` after the tail of ``s``."""
    return replace_with_char(s, len(s), 0, ch)


def remove(s: NStr, index: int, chars: int) -> NStr:
    """Remove at most ``chars`` characters starting at ``index``."""
    return _splice(s, index, chars, b"", s.encoding())


def cut_head(s: NStr, chars: int) -> NStr:
    """Remove the first ``chars`` characters; too many yields blank."""
    if len(s) < chars:
        return _nstr.blank()
    return remove(s, 0, chars)


def cut_tail(s: NStr, chars: int) -> NStr:
    """Remove the last ``chars`` characters; too many yields blank."""
    if len(s) < chars:
        return _nstr.blank()
    return remove(s, len(s) - chars, chars)


def chomp(s: NStr) -> NStr:
    """Drop a trailing newline, together with a carriage return before it."""
    data = bytes(s)
    if not data.endswith(b"\n"):
        return s
    drop = 2 if data.endswith(b"\r\n") else 1
    return s.slice(0, len(s) - drop)


def ltrim(s: NStr) -> NStr:
    """Drop leading whitespace (space, tab, CR, LF, VT, FF)."""
    data = bytes(s)
    lead = len(data) - len(data.lstrip(_WHITESPACE))
    return s.slice(lead, len(s) - lead)


def rtrim(s: NStr) -> NStr:
    """Drop trailing whitespace (space, tab, CR, LF, VT, FF)."""
    data = bytes(s)
    trail = len(data) - len(data.rstrip(_WHITESPACE))
    return s.slice(0, len(s) - trail)


def trim(s: NStr) -> NStr:
    """Drop leading and trailing whitespace."""
    data = bytes(s)
    lead = len(data) - len(data.lstrip(_WHITESPACE))
    trail = len(data) - len(data.rstrip(_WHITESPACE))
    return s.slice(lead, max(len(s) - lead - trail, 0))


def substitute(s: NStr, old: NStr, new: NStr, replace_all: bool = True) -> NStr:
    """Replace occurrences of ``old`` with ``new``.

    With ``replace_all`` every non-overlapping occurrence is replaced,
    otherwise only the first. If ``old`` does not occur, ``s`` is returned.
    """
    if replace_all:
        return join(new, s.split(old))
    for index in s.find_all(old):
        return replace(s, index, len(old), new)
    return s