"""
Reading and writing of line-oriented ``key=value`` properties text.

The format follows the conventional properties file layout:

- ``#`` or ``!`` as first non-blank character starts a comment line
- blank lines are ignored
- key and value are separated by the first unescaped ``=``, ``:`` or
  whitespace
- a trailing odd number of backslashes continues the entry on the next line
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are decoded,
  any other escaped character stands for itself
"""

import string
from datetime import datetime
from typing import IO, Iterable, Iterator, Mapping, Optional, Tuple

WHITESPACE = " \t\f"
COMMENT_CHARS = "#!"
SEPARATORS = "=:"

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {value: key for key, value in _UNESCAPES.items()}


def iter_properties(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Parse properties text into key/value pairs.

    Pairs are yielded as soon as their logical line is complete, so a
    failure further down the input leaves the earlier pairs usable.

    Args:
        lines: Text lines, e.g. an open file

    Yields:
        (key, value) tuples in file order

    Raises:
        ValueError: On a malformed ``\\u`` escape
    """
    for line in _logical_lines(lines):
        yield _split_entry(line)


def dump_properties(
    settings: Mapping[str, str],
    stream: IO[str],
    comment: Optional[str] = None,
):
    """
    Write settings as properties text.

    A timestamp comment line is written first, preceded by ``comment``
    if given. Entries are sorted by key.

    Args:
        settings: Flat mapping of strings
        stream: Text stream to write to
        comment: Optional header comment

    Raises:
        TypeError: If a key or value is not a string
    """
    if comment:
        for line in comment.splitlines():
            stream.write(f"#{line}\n")
    stream.write("#" + datetime.now().strftime("%a %b %d %H:%M:%S %Y") + "\n")

    for key in sorted(settings):
        value = settings[key]
        stream.write(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}\n")


def _logical_lines(lines: Iterable[str]) -> Iterator[str]:
    """Join continuation lines and drop comments and blank lines."""
    pending = None

    for raw in lines:
        line = raw.rstrip("\r\n").lstrip(WHITESPACE)

        # Comments are only recognised at the start of an entry
        if pending is None and (not line or line[0] in COMMENT_CHARS):
            continue

        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue

        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def _continues(line: str) -> bool:
    """Check for an odd number of trailing backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into unescaped key and value."""
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(WHITESPACE)
    if rest[:1] and rest[0] in SEPARATORS:
        rest = rest[1:].lstrip(WHITESPACE)

    return _unescape(key), _unescape(rest)


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    result = []
    index = 0
    while index < len(text):
        char = text[index]
        index += 1
        if char != "\\":
            result.append(char)
            continue

        if index >= len(text):
            break  # dangling backslash

        char = text[index]
        index += 1
        if char == "u":
            digits = text[index:index + 4]
            if len(digits) != 4 or not all(d in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            result.append(chr(int(digits, 16)))
            index += 4
        else:
            result.append(_UNESCAPES.get(char, char))

    return "".join(result)


def _escape(text: str, is_key: bool) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Properties keys and values must be str, got {type(text).__name__}")

    result = []
    for index, char in enumerate(text):
        if char == "\\":
            result.append("\\\\")
        elif char in _ESCAPES:
            result.append("\\" + _ESCAPES[char])
        elif char in SEPARATORS or char in COMMENT_CHARS:
            result.append("\\" + char)
        elif char == " " and (is_key or index == 0):
            result.append("\\ ")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)

    return "".join(result)
