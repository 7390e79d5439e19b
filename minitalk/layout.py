"""Padding and arrangement of a converted value inside its field."""

from __future__ import annotations

from dataclasses import dataclass

from minitalk.printf_spec import Flag, FormatSpec


@dataclass(frozen=True)
class Field:
    """The parts of a formatted field, ready to be written out."""

    sign: str = ""
    prefix: str = ""
    zero_pad: int = 0
    digits: str = ""
    space_pad: int = 0

    def render(self, left_justify: bool = False) -> str:
        """The field's text, padded on the right when ``left_justify`` is set."""
        body = self.sign + self.prefix + "0" * max(self.zero_pad, 0) + self.digits
        spaces = " " * max(self.space_pad, 0)
        return body + spaces if left_justify else spaces + body


def choose_sign(value: int, flags: Flag) -> tuple[str, int]:
    """Return the sign character to show for ``value`` and its magnitude."""
    if value < 0:
        return "-", -value
    if flags & Flag.SIGNED:
        return "+", value
    if flags & Flag.BLANK_POS:
        return " ", value
    return "", value


def zero_flag_applies(spec: FormatSpec) -> bool:
    """True when the ``0`` flag pads the field: no precision and no ``-`` flag."""
    if not spec.flags & Flag.ZERO_PADD:
        return False
    if spec.precision is not None:
        return False
    return not spec.flags & Flag.LEFT_JUST


def layout_field(spec: FormatSpec, value: int, sign: str, prefix: str, digits: str) -> Field:
    """Arrange a numeric conversion of ``value`` according to ``spec``.

    With the ``0`` flag in effect the field is filled with zeros, counting
    the prefix even when it is not shown.  Otherwise the precision sets the
    minimum number of digits, and a zero value with precision 0 shows
    neither digits nor sign.  The prefix is shown only for a non-zero value.
    """
    width = spec.width
    precision = spec.precision
    use_zero_flag = zero_flag_applies(spec)
    zero_pad = 0
    if use_zero_flag:
        full_length = len(digits) + bool(sign) + len(prefix)
        if width is not None and width > full_length:
            zero_pad = width - full_length
    else:
        if precision == 0 and value == 0:
            digits = ""
            sign = ""
        if precision is not None and precision > len(digits):
            zero_pad = precision - len(digits)
    shown_prefix = prefix if value != 0 else ""
    digit_length = bool(sign) + len(shown_prefix) + zero_pad + len(digits)
    space_pad = 0
    if not use_zero_flag and width is not None and width > digit_length:
        space_pad = width - digit_length
    return Field(
        sign=sign,
        prefix=shown_prefix,
        zero_pad=zero_pad,
        digits=digits,
        space_pad=space_pad,
    )