"""Building new strings from existing ones: slices, joins, trims, splits and maps.

Text arguments are read like NUL-terminated strings: anything from the
first ``"\\0"`` onwards is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from minitalk.strings import NUL, strdup


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start beyond the end of ``s`` yields an empty string.
    """
    text = strdup(s)
    first = _count(start, "start")
    size = _count(length, "length")
    if first > len(text):
        return ""
    return text[first : first + size]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every character of ``charset`` removed from both ends."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: int | str) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``.

    Splitting on NUL leaves the whole text as a single piece.
    """
    text = strdup(s)
    separator = _char(sep)
    if separator == NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``.

    A NUL returned by ``f`` ends the result there.
    """
    return strdup("".join(f(index, ch) for index, ch in enumerate(strdup(s))))


def striteri(buf: MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call ``f(index, buf)`` for each position of ``buf`` before its first NUL.

    ``f`` may change ``buf[index]`` in place; the end of the text is
    re-checked after every call.
    """
    index = 0
    while index < len(buf) and buf[index] != NUL:
        f(index, buf)
        index += 1