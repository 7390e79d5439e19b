"""Turning one printf argument into text according to its conversion specification."""

from __future__ import annotations

from minitalk.charclass import INT_MIN
from minitalk.layout import Field, choose_sign, layout_field, zero_flag_applies
from minitalk.numconv import ltoa, ltox, ptox
from minitalk.printf_spec import Conversion, Flag, FormatSpec
from minitalk.strings import strdup

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_UINT_MODULUS = 2**32
_PTR_MODULUS = 2**64


def _integer(value: object, conversion: Conversion) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion.name} conversion needs an int, got {type(value).__name__}"
        )
    return value


def coerce_argument(conversion: Conversion, value: object) -> object:
    """Bring ``value`` to the type the conversion reads.

    Characters become one-character strings holding a single byte, signed
    decimals wrap like a 32-bit int, unsigned and hexadecimal values like a
    32-bit unsigned int, strings are cut at their first NUL and pointers
    become addresses, with ``None`` as the null address.  ``%%`` takes no
    argument and yields ``None``.
    """
    kind = Conversion(conversion)
    if kind is Conversion.PERCENT:
        return None
    if kind is Conversion.CHAR:
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c needs a single character, got {value!r}")
            code = ord(value)
        else:
            code = _integer(value, kind)
        return chr(code & 0xFF)
    if kind is Conversion.DEC:
        return (_integer(value, kind) - INT_MIN) % _UINT_MODULUS + INT_MIN
    if kind in (Conversion.U_INT, Conversion.HEX_LOW, Conversion.HEX_UP):
        return _integer(value, kind) % _UINT_MODULUS
    if kind is Conversion.STR:
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"%s needs a str or None, got {type(value).__name__}")
        return strdup(value)
    if value is None:
        return 0
    return _integer(value, kind) % _PTR_MODULUS


def _plain_field(spec: FormatSpec, body: str) -> Field:
    """A field for text that takes no sign, prefix or zero padding."""
    space_pad = 0
    if not zero_flag_applies(spec) and spec.width is not None and spec.width > len(body):
        space_pad = spec.width - len(body)
    return Field(digits=body, space_pad=space_pad)


def _string_body(text: str | None, precision: int | None) -> str:
    if text is None:
        if precision is not None and precision < len(NULL_STRING):
            return ""
        text = NULL_STRING
    return text if precision is None else text[:precision]


def _pointer_sign(flags: Flag) -> str:
    if flags & Flag.SIGNED:
        return "+"
    if flags & Flag.BLANK_POS:
        return " "
    return ""


def render_conversion(spec: FormatSpec, value: object) -> str:
    """The text that ``spec`` produces for ``value``."""
    kind = Conversion(spec.conversion)
    if kind is Conversion.PERCENT:
        return "%"
    arg = coerce_argument(kind, value)
    flags = Flag(spec.flags)
    if kind is Conversion.CHAR:
        field = _plain_field(spec, arg)
    elif kind is Conversion.STR:
        field = _plain_field(spec, _string_body(arg, spec.precision))
    elif kind is Conversion.DEC:
        sign, magnitude = choose_sign(arg, flags)
        field = layout_field(spec, magnitude, sign, "", ltoa(magnitude))
    elif kind is Conversion.U_INT:
        field = layout_field(spec, arg, "", "", ltoa(arg))
    elif kind in (Conversion.HEX_LOW, Conversion.HEX_UP):
        upper = kind is Conversion.HEX_UP
        prefix = ("0X" if upper else "0x") if flags & Flag.ALT_FORM else ""
        field = layout_field(spec, arg, "", prefix, ltox(arg, upper))
    else:
        digits = ptox(arg) if arg else NULL_POINTER
        field = layout_field(spec, arg, _pointer_sign(flags), POINTER_PREFIX, digits)
    return field.render(bool(flags & Flag.LEFT_JUST))