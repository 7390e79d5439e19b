import pytest

from minitalk.charclass import INT_MIN
from minitalk.convert import coerce_argument, render_conversion
from minitalk.printf_spec import Conversion, parse_spec


def render(spec_text, value):
    spec, end = parse_spec(spec_text, 0)
    assert end == len(spec_text)
    return render_conversion(spec, value)


@pytest.mark.parametrize(
    "spec_text, value",
    [
        ("d", 42),
        ("5d", 42),
        ("-5d", 42),
        ("+d", 7),
        (" d", 7),
        ("05d", -42),
        (".4d", -42),
        ("8.3d", 5),
        ("i", -123),
        ("u", 4000000000),
        ("x", 255),
        ("#x", 255),
        ("#X", 255),
        ("#010x", 255),
        ("-6x", 255),
        ("X", 48879),
        ("s", "hello"),
        ("5s", "hi"),
        ("-5s", "hi"),
        (".2s", "hello"),
        ("8.3s", "hello"),
        ("c", "a"),
        ("3c", "a"),
        ("-3c", "a"),
    ],
)
def test_matches_standard_formatting(spec_text, value):
    assert render(spec_text, value) == ("%" + spec_text) % value


def test_char_from_code():
    assert render("c", 65) == "A"


def test_zero_flag_on_char_and_string_gives_no_padding():
    assert render("05c", "a") == "a"
    assert render("05s", "hi") == "hi"


def test_zero_value_with_zero_precision_prints_nothing():
    assert render(".0d", 0) == ""
    assert render("5.0d", 0) == " " * 5
    assert render("+.0d", 0) == render(".0u", 0)


def test_alternate_form_omits_prefix_for_zero():
    assert render("#x", 0) == render("x", 0)
    assert render("#X", 0) == render("X", 0)


def test_percent_ignores_width_and_argument():
    assert render("10%", None) == "%"
    assert render("%", 99) == "%"


def test_null_string():
    assert render("s", None) == "(null)"
    assert render("10s", None) == "(null)".rjust(10)
    assert render(".3s", None) == ""
    assert render(".6s", None) == "(null)"


def test_string_cut_at_nul():
    assert render("s", "ab\0cd") == "ab"


def test_pointer_rendering():
    assert render("p", 0x1234) == "0x" + format(0x1234, "x")
    assert render("p", None) == "(nil)"
    assert render("+p", 255).startswith("+0x")
    assert len(render("12p", 255)) == 12
    assert render("-12p", 255).rstrip() == render("p", 255)


@pytest.mark.parametrize("width", [1, 3, 8, 15])
@pytest.mark.parametrize("value", [0, 9, -77, 123456])
def test_width_is_a_minimum(width, value):
    text = render(f"{width}d", value)
    assert len(text) == max(width, len(str(value)))
    assert text.strip() == str(value)


def test_left_and_right_justification_hold_same_body():
    right = render("10d", -5)
    left = render("-10d", -5)
    assert right.strip() == left.strip()
    assert right.endswith(left.strip())
    assert left.startswith(right.strip())


def test_coerce_signed_wraps():
    assert coerce_argument(Conversion.DEC, 2**31) == INT_MIN
    assert coerce_argument(Conversion.DEC, -1) == -1


def test_coerce_unsigned_wraps():
    assert coerce_argument(Conversion.U_INT, -1) == 2**32 - 1
    assert coerce_argument(Conversion.HEX_LOW, 2**32 + 5) == 5
    assert render("u", -1) == str(2**32 - 1)
    assert render("x", -1) == format(2**32 - 1, "x")


def test_coerce_char():
    assert coerce_argument(Conversion.CHAR, "A") == "A"
    assert coerce_argument(Conversion.CHAR, 65 + 256) == chr(65)


def test_coerce_string_and_pointer():
    assert coerce_argument(Conversion.STR, "ab\0cd") == "ab"
    assert coerce_argument(Conversion.STR, None) is None
    assert coerce_argument(Conversion.PTR, None) == 0
    assert coerce_argument(Conversion.PTR, -1) == 2**64 - 1


def test_coerce_percent_takes_nothing():
    assert coerce_argument(Conversion.PERCENT, 42) is None
    assert coerce_argument(Conversion.PERCENT, None) is None


@pytest.mark.parametrize(
    "conversion, value",
    [
        (Conversion.DEC, "12"),
        (Conversion.DEC, True),
        (Conversion.U_INT, 1.5),
        (Conversion.STR, 5),
        (Conversion.PTR, "0x10"),
    ],
)
def test_coerce_rejects_wrong_types(conversion, value):
    with pytest.raises(TypeError):
        coerce_argument(conversion, value)


def test_coerce_rejects_long_char_string():
    with pytest.raises(ValueError):
        coerce_argument(Conversion.CHAR, "ab")


def test_render_rejects_wrong_type():
    with pytest.raises(TypeError):
        render("d", "a")