"""Integer to text conversion used by the formatter."""

from __future__ import annotations

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
UINTPTR_MAX = 2**64 - 1

_HEX_LOWER = "0123456789abcdef"


def _check_int(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def _hex_digits(n: int) -> str:
    digits = []
    while n:
        n, rem = divmod(n, 16)
        digits.append(_HEX_LOWER[rem])
    return "".join(reversed(digits)) or "0"


def ltoa(n: int) -> str:
    """Render a 64-bit signed integer in decimal."""
    value = _check_int(n)
    if not LONG_MIN <= value <= LONG_MAX:
        raise OverflowError(f"{value} does not fit in a 64-bit signed int")
    return str(value)


def ltox(n: int, upper: bool = False) -> str:
    """Render a non-negative 64-bit integer in hexadecimal, without prefix."""
    value = _check_int(n)
    if value < 0:
        raise ValueError(f"cannot render negative value {value} in hexadecimal")
    if value > LONG_MAX:
        raise OverflowError(f"{value} does not fit in a 64-bit signed int")
    text = _hex_digits(value)
    return text.upper() if upper else text


def ptox(p: int) -> str:
    """Render a non-null address in lowercase hexadecimal, without prefix."""
    value = _check_int(p)
    if value == 0:
        raise ValueError("a null address has no hexadecimal rendering")
    if not 0 < value <= UINTPTR_MAX:
        raise OverflowError(f"{value} is not a valid address")
    return _hex_digits(value)