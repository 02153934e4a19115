"""Encoded byte strings with character-aware slicing, searching and splitting.

An :class:`NStr` is either a *string*, which owns its bytes, or a *slice*,
which refers to a byte range of another string. Both know their encoding,
byte size and character count.
"""

from __future__ import annotations

import enum
import functools
import itertools
from typing import Iterator, Union

from . import ascii as _ascii
from . import utf8 as _utf8
from .errors import SubstringNotFound, UnknownByteError

ByteChar = Union[int, bytes, str]


class Encoding(enum.IntEnum):
    """Supported encodings."""

    ASCII = 0
    UTF8 = 1


class Locale(enum.IntEnum):
    """Collation locales; only plain byte order is supported."""

    C = 0


_CODECS = {
    Encoding.ASCII: _ascii,
    Encoding.UTF8: _utf8,
}


def _single_byte(ch: ByteChar) -> int:
    if isinstance(ch, int):
        if not 0 <= ch <= 0xFF:
            raise ValueError(f"byte value out of range: {ch}")
        return ch
    raw = ch.encode("utf-8") if isinstance(ch, str) else bytes(ch)
    if len(raw) != 1:
        raise ValueError(f"expected a single byte, got {raw!r}")
    return raw[0]


@functools.total_ordering
class NStr:
    """An encoded string, or a slice of one."""

    __slots__ = ("_buf", "_start", "_size", "_chars", "_encoding", "_is_slice")

    def __init__(self, data: bytes | bytearray | memoryview | str = b"",
                 encoding: Encoding = Encoding.ASCII) -> None:
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        encoding = Encoding(encoding)
        chars = 0
        if raw:
            consumed, chars = _CODECS[encoding].count(raw, len(raw))
            if consumed != len(raw):
                raise UnknownByteError(consumed, chars)
        else:
            encoding = Encoding.ASCII
        self._buf = raw
        self._start = 0
        self._size = len(raw)
        self._chars = chars
        self._encoding = encoding
        self._is_slice = False

    @classmethod
    def _view(cls, buf: bytes, start: int, size: int, chars: int,
              encoding: Encoding) -> "NStr":
        obj = cls.__new__(cls)
        obj._buf = buf
        obj._start = start
        obj._size = size
        obj._chars = chars
        obj._encoding = encoding
        obj._is_slice = True
        return obj

    # ---- construction ---- #

    def clone(self) -> "NStr":
        """Return a new string holding a copy of this one's bytes."""
        return new(self._region(), self._encoding)

    def duplicate(self) -> "NStr":
        """Return a new slice for a slice, or a new string for a string."""
        if self._is_slice:
            return NStr._view(self._buf, self._start, self._size, self._chars, self._encoding)
        return self.clone()

    def reset(self) -> None:
        """Turn a slice into a blank slice; strings are left untouched."""
        if self._is_slice:
            self._buf = b""
            self._start = 0
            self._size = 0
            self._chars = 0
            self._encoding = Encoding.ASCII

    # ---- properties ---- #

    def encoding(self) -> Encoding:
        """Return the encoding of the string."""
        return self._encoding

    def size(self) -> int:
        """Return the number of bytes."""
        return self._size

    def __len__(self) -> int:
        return self._chars

    def __bytes__(self) -> bytes:
        return self._region()

    def __str__(self) -> str:
        codec = "utf-8" if self._encoding is Encoding.UTF8 else "ascii"
        return self._region().decode(codec, errors="backslashreplace")

    def __repr__(self) -> str:
        kind = "slice" if self._is_slice else "string"
        return f"<NStr {kind} {self._region()!r} {self._encoding.name}>"

    def is_string(self) -> bool:
        """Tell whether this owns its bytes."""
        return not self._is_slice

    def is_slice(self) -> bool:
        """Tell whether this refers to another string's bytes."""
        return self._is_slice

    def is_blank(self) -> bool:
        """Tell whether this holds no characters."""
        return self._chars == 0

    # ---- tests and comparison ---- #

    def contains(self, sub: "NStr") -> bool:
        """Tell whether ``sub`` occurs in this string."""
        return self._buf.find(sub._region(), self._start, self._end()) >= 0

    def contains_char(self, ch: ByteChar) -> bool:
        """Tell whether the single byte ``ch`` occurs in this string."""
        return self._buf.find(bytes([_single_byte(ch)]), self._start, self._end()) >= 0

    def startswith(self, sub: "NStr") -> bool:
        """Tell whether this string begins with ``sub``."""
        return self._buf.startswith(sub._region(), self._start, self._end())

    def startswith_char(self, ch: ByteChar) -> bool:
        """Tell whether this string begins with the single byte ``ch``."""
        return self._size > 0 and self._buf[self._start] == _single_byte(ch)

    def endswith(self, sub: "NStr") -> bool:
        """Tell whether this string ends with ``sub``."""
        return self._buf.endswith(sub._region(), self._start, self._end())

    def endswith_char(self, ch: ByteChar) -> bool:
        """Tell whether this string ends with the single byte ``ch``."""
        return self._size > 0 and self._buf[self._end() - 1] == _single_byte(ch)

    def compare(self, other: "NStr", locale: Locale = Locale.C) -> int:
        """Return -1, 0 or 1 as this string sorts before, with or after ``other``."""
        Locale(locale)
        left, right = self._region(), other._region()
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NStr):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NStr):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._region())

    def verify(self) -> bool:
        """Tell whether the bytes are correctly encoded."""
        return _CODECS[self._encoding].verify(self._region())

    def byte_range(self) -> memoryview:
        """Return a read-only view of the bytes this string covers."""
        return memoryview(self._buf)[self._start:self._end()]

    # ---- traversal ---- #

    def iter_chars(self) -> Iterator["NStr"]:
        """Yield each character as a one-character slice.

        Raises :class:`UnknownByteError` on a byte that starts no character.
        """
        measure = _CODECS[self._encoding].measure
        end = self._end()
        pos = self._start
        for index in itertools.count():
            if pos >= end:
                return
            width = measure(self._buf, pos)
            if width < 1 or pos + width > end:
                raise UnknownByteError(pos - self._start, index)
            yield NStr._view(self._buf, pos, width, 1, self._encoding)
            pos += width

    def _scan(self, sub: "NStr") -> Iterator[tuple[int, int]]:
        """Yield (absolute byte position, character index) of each match."""
        if sub.is_blank():
            raise ValueError("cannot search for a blank substring")
        needle = sub._region()
        end = self._end()
        pos = self._start
        chars = 0
        while True:
            loc = self._buf.find(needle, pos, end)
            if loc < 0:
                return
            chars += self._count_between(pos, loc, chars)
            yield loc, chars
            pos = loc + len(needle)
            chars += len(sub)

    def find_all(self, sub: "NStr") -> Iterator[int]:
        """Yield the character index of each non-overlapping occurrence of ``sub``."""
        for _, index in self._scan(sub):
            yield index

    def find(self, sub: "NStr") -> int:
        """Return the character index of the first occurrence of ``sub``.

        Raises :class:`SubstringNotFound` if there is none.
        """
        for index in self.find_all(sub):
            return index
        raise SubstringNotFound(f"{sub!r} not found in {self!r}")

    # ---- slicing and splitting ---- #

    def slice(self, index: int, chars: int) -> "NStr":
        """Return a slice of at most ``chars`` characters starting at ``index``."""
        if index < 0 or chars < 0:
            raise ValueError("negative index or length is not supported")
        if index >= self._chars or chars == 0:
            return NStr._view(self._buf, self._start, 0, 0, self._encoding)
        codec = _CODECS[self._encoding]
        skipped = 0
        if index > 0:
            skipped, _ = codec.count(self._region(), index)
        start = self._start + skipped
        size = self._size - skipped
        count = self._chars - index
        if chars < count:
            size, count = codec.count(self._buf[start:start + size], chars)
        return NStr._view(self._buf, start, size, count, self._encoding)

    def split(self, deli: "NStr", max_splits: int | None = None) -> list["NStr"]:
        """Split at each occurrence of ``deli`` into a list of slices.

        At most ``max_splits`` splits are made; ``None`` or a non-positive
        value means no limit. A blank string splits into ``[blank()]``.
        """
        if self.is_blank():
            return [blank()]
        if deli is None or deli.is_blank():
            raise ValueError("delimiter must be a non-blank string")
        limit = max_splits if max_splits is not None and max_splits > 0 else None
        pieces: list[NStr] = []
        pos = self._start
        prev_chars = 0
        for loc, index in itertools.islice(self._scan(deli), limit):
            pieces.append(NStr._view(self._buf, pos, loc - pos, index - prev_chars,
                                     self._encoding))
            pos = loc + deli.size()
            prev_chars = index + len(deli)
        pieces.append(NStr._view(self._buf, pos, self._end() - pos,
                                 self._chars - prev_chars, self._encoding))
        return pieces

    # ---- helpers ---- #

    def _end(self) -> int:
        return self._start + self._size

    def _region(self) -> bytes:
        return self._buf[self._start:self._end()]

    def _count_between(self, begin: int, stop: int, chars_before: int) -> int:
        if begin == stop:
            return 0
        try:
            _, chars = _CODECS[self._encoding].count(self._buf[begin:stop])
        except UnknownByteError as exc:
            raise UnknownByteError(begin - self._start + exc.offset,
                                   chars_before + exc.chars) from exc
        return chars


_BLANK = NStr(b"", Encoding.ASCII)


def blank() -> NStr:
    """Return the shared blank string."""
    return _BLANK


def new(src: bytes | bytearray | memoryview | str,
        encoding: Encoding = Encoding.ASCII) -> NStr:
    """Create a string from ``src``; empty input yields :func:`blank`.

    Raises :class:`UnknownByteError` if ``src`` is not correctly encoded.
    """
    raw = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    if not raw:
        return blank()
    return NStr(raw, encoding)