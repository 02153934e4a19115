"""Exceptions raised by the string routines."""

from __future__ import annotations


class StrError(Exception):
    """Base class of every error raised by this package."""


class UnknownByteError(StrError, ValueError):
    """A byte range holds a byte that is not valid in its encoding.

    ``offset`` is the position of the first byte of the offending character
    and ``chars`` is the number of valid characters that preceded it.
    """

    def __init__(self, offset: int, chars: int) -> None:
        super().__init__(
            f"unknown byte at offset {offset} after {chars} valid character(s)"
        )
        self.offset = offset
        self.chars = chars

    def __reduce__(self):
        return (type(self), (self.offset, self.chars))


class SubstringNotFound(StrError, LookupError):
    """A searched substring does not occur in the source string."""