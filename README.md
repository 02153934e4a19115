# auxstr

`auxstr` handles byte strings that know their own encoding: ASCII or UTF-8.
Every string keeps its byte size and its character count. A slice shares
the bytes of the string it comes from. It does not copy them.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Checking raw bytes

The `auxstr.ascii` and `auxstr.utf8` modules work on plain `bytes`. Each
offers `measure(data, pos)`, `count(data, limit)` and `verify(data)`:

```python
from auxstr import ascii, utf8

utf8.measure(b"\xea\xbf\x80", 0)   # 3: the lead byte starts a 3-byte character
utf8.measure(b"\x80", 0)           # 0: a continuation byte starts no character
utf8.measure(b"\xf8", 0)           # -1: a byte of the form 11111xxx
utf8.measure_by_lookup(b"\xf8", 0) # 0: every invalid lead byte gives 0
utf8.verify(b"A\xda\xbf")          # True
ascii.verify(b"A\x00")             # False
```

In ASCII, a byte whose low seven bits are all zero is not a character. NUL
and 0x80 are two such bytes.

`count(data, limit)` returns a pair `(bytes, chars)`. For UTF-8 it counts at
most `limit` characters, and `None` means no limit. For ASCII, `None`, a
non-positive limit, or a limit not below `len(data)` counts the whole range.

Malformed input raises `auxstr.errors.UnknownByteError`. That includes a
UTF-8 character cut short by the end of the data. The exception carries
`offset`, the byte position of the bad character, and `chars`, the number
of valid characters before it.

## Encoded strings

`auxstr.nstr` provides `NStr`, the `Encoding` enum (`ASCII`, `UTF8`) and the
`Locale` enum (`C`). The functions `new(src, encoding)` and `blank()` create
strings. `new` also accepts a `str`, which it encodes as UTF-8 bytes first.
Empty input gives the shared blank string.

```python
from auxstr.nstr import Encoding, new

s = new(b"hello, world", Encoding.ASCII)
len(s)                 # 12 characters
s.size()               # 12 bytes
s.contains(new(b"world", Encoding.ASCII))   # True
part = s.slice(7, 5)   # a slice sharing the bytes of s
bytes(part)            # b"world"
part.is_slice()        # True

words = s.split(new(b", ", Encoding.ASCII), -1)
[str(w) for w in words]   # ['hello', 'world']
```

Other methods of `NStr`:

- `clone()` copies the bytes into a new string. `duplicate()` gives a new
  slice for a slice and a new string for a string.
- `reset()` makes a slice blank. It leaves a string untouched.
- `is_string()`, `is_slice()`, `is_blank()`, `encoding()` and `verify()`
  report on the object.
- `contains`, `startswith` and `endswith` test for a substring.
  `contains_char`, `startswith_char` and `endswith_char` test for a single
  byte. The byte may be given as an `int`, a one-byte `bytes` or a
  one-character `str`.
- `compare(other, locale)` returns -1, 0 or 1 in plain byte order. Strings
  also support `==`, `<` and the other comparisons, and they are hashable.
- `byte_range()` returns a read-only `memoryview` of the bytes.
- `iter_chars()` yields each character as a one-character slice.
- `find(sub)` returns the character index of the first occurrence, or
  raises `auxstr.errors.SubstringNotFound`. `find_all(sub)` yields the
  index of every non-overlapping occurrence. A blank `sub` raises
  `ValueError`.
- `slice(index, chars)` returns at most `chars` characters from `index`.
- `split(deli, max_splits)` returns a list of slices. `None` or a
  non-positive value means no limit. A blank string splits into
  `[blank()]`.

## Building new strings

`auxstr.ops` builds strings from existing ones:

```python
from auxstr import ops
from auxstr.nstr import Encoding, new

a = new(b"ab", Encoding.ASCII)
bytes(ops.repeat(a, 3))                                   # b"ababab"
bytes(ops.join_by_char(ord(","), [a, a]))                 # b"ab,ab"
bytes(ops.replace(a, 1, 1, new(b"XY", Encoding.ASCII)))   # b"aXY"
bytes(ops.trim(new(b"  padded \n", Encoding.ASCII)))      # b"padded"
bytes(ops.substitute(a, new(b"b", Encoding.ASCII),
                     new(b"c", Encoding.ASCII), True))    # b"ac"
```

The module also provides:

- `concat(*args)` and `join(deli, strings)`. A `None` or blank delimiter
  joins the strings with nothing between them.
- `replace_with_char`, `insert`, `insert_char`, `prepend`, `prepend_char`,
  `append` and `append_char`.
- `remove`, plus `cut_head` and `cut_tail`. The last two give the blank
  string when asked to cut more characters than the string has.
- `chomp`, which drops a trailing `\n` or `\r\n`.
- `ltrim`, `rtrim` and `trim`, which drop space, tab, CR, LF, VT and FF.

Operations that make new content return a fresh string. If any input is
UTF-8, the result is UTF-8. Trimming and chomping return slices of the
input.

## What it does not do

- It has no command-line tool. It is a library only.
- It supports only the ASCII and UTF-8 encodings.
- It collates only in plain byte order (`Locale.C`).
- Negative indexes and lengths are not supported. `slice`, `replace` and
  the functions built on them raise `ValueError` for them.