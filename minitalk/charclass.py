"""ASCII character classes, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE_CODES = frozenset({ord(" "), *range(9, 14)})


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, a code point or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _isupper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _islower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _isupper(code) or _islower(code)


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; anything else is returned as is."""
    code = _code(c)
    if _islower(code):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; anything else is returned as is."""
    code = _code(c)
    if _isupper(code):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace (space and codes 9 to 13) is skipped, one optional
    sign is accepted, and digits are read until the first non-digit.  Text
    without digits yields 0.  The result wraps like a 32-bit signed int.
    """
    chars = iter(text)
    current = next(chars, "")
    while current and ord(current) in _SPACE_CODES:
        current = next(chars, "")
    sign = 1
    if current in ("+", "-"):
        if current == "-":
            sign = -1
        current = next(chars, "")
    result = 0
    while current and isdigit(current):
        result = result * 10 + int(current)
        current = next(chars, "")
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)