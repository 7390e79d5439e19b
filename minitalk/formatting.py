"""printf-style formatting built on the package's own conversion rules."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from minitalk.charclass import INT_MAX, INT_MIN
from minitalk.convert import coerce_argument, render_conversion
from minitalk.printf_spec import Conversion, Flag, FormatError, FormatSpec, parse_spec


def _next_argument(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_argument(args: Iterator[object]) -> int:
    value = coerce_argument(Conversion.DEC, _next_argument(args))
    assert isinstance(value, int)
    return value


def _convert(spec: FormatSpec, args: Iterator[object]) -> str:
    """Render one specification, taking its arguments from ``args``."""
    if spec.flags & Flag.WIDTH_ARG:
        width = _int_argument(args)
        if width == INT_MIN:
            spec.width = None
        else:
            if width < 0:
                spec.flags |= Flag.LEFT_JUST
                width = -width
            spec.width = width
    if spec.flags & Flag.PREC_ARG:
        precision = _int_argument(args)
        spec.precision = precision if precision >= 0 else None
    if spec.conversion is Conversion.PERCENT:
        return render_conversion(spec, None)
    return render_conversion(spec, _next_argument(args))


def _pieces(fmt: str, args: Iterator[object]) -> Iterator[str]:
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        spec, pos = parse_spec(fmt, percent + 1)
        yield _convert(spec, args)


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supports the conversions ``c d i u x X s p %`` with the flags
    ``# + - 0`` and space, a width and a precision, either of which may be
    ``*`` to take it from the arguments.  Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    parts = []
    total = 0
    for piece in _pieces(fmt, remaining):
        if len(piece) > INT_MAX - total:
            raise FormatError("formatted output is too long")
        total += len(piece)
        parts.append(piece)
    return "".join(parts)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)