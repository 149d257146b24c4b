import pytest

from chrono_helper.utils.errors import InvalidInteger
from chrono_helper.utils.params import IntWidth, ParameterSet, parse_integer, render_value


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("618658211", IntWidth.I64, 618658211),
        ("-42", IntWidth.I64, -42),
        ("+7", IntWidth.U32, 7),
        ("9223372036854775807", IntWidth.I64, 2**63 - 1),
        ("-9223372036854775808", IntWidth.I64, -(2**63)),
        ("4294967295", IntWidth.U32, 2**32 - 1),
        ("-2147483648", IntWidth.I32, -(2**31)),
    ],
)
def test_parse_integer_accepts(text, width, expected):
    assert parse_integer("p", text, width) == expected


@pytest.mark.parametrize(
    "text, width",
    [
        ("618658ergwerg211", IntWidth.I64),
        ("", IntWidth.I64),
        (" 1", IntWidth.I64),
        ("1_000", IntWidth.I64),
        ("0x10", IntWidth.I64),
        ("-1", IntWidth.U32),
        ("-1", IntWidth.U64),
        ("4294967296", IntWidth.U32),
        ("2147483648", IntWidth.I32),
        ("12345678901234567890", IntWidth.I64),
        ("-9223372036854775809", IntWidth.I64),
    ],
)
def test_parse_integer_rejects(text, width):
    with pytest.raises(InvalidInteger) as exc:
        parse_integer("with_day", text, width)
    assert exc.value.param == "with_day"
    assert "with_day" in str(exc.value)


def test_render_value_rules():
    assert render_value("abc") == "abc"
    assert render_value(True) == "true"
    assert render_value(False) == "false"
    assert render_value(None) == ""
    assert render_value(42) == "42"
    assert render_value(lambda: "called") == "called"


def test_parameter_set_renders_lazily_once():
    calls = {"n": 0}

    class Value:
        def render(self):
            calls["n"] += 1
            return "618658211"

    params = ParameterSet({"from_timestamp": Value()})
    assert calls["n"] == 0

    assert params.text("from_timestamp") == "618658211"
    assert params.text("from_timestamp") == "618658211"
    assert calls["n"] == 1


def test_parameter_set_presence_and_lookup():
    params = ParameterSet({"to_rfc2822": False}, to_timestamp=True)

    assert params.has("to_rfc2822")
    assert params.has("to_timestamp")
    assert not params.has("To_Timestamp")
    assert params.text("missing") is None
    assert params.first_present(["a", "to_timestamp", "to_rfc2822"]) == "to_timestamp"
    assert len(params) == 2
    assert ParameterSet.of(params) is params


@pytest.mark.parametrize(
    "text, width, message",
    [
        ("1" * 5000, IntWidth.I64, "too large"),
        ("+" + "1" * 5000, IntWidth.U32, "too large"),
        ("-" + "9" * 5000, IntWidth.I64, "too small"),
    ],
)
def test_parse_integer_very_long_digit_strings(text, width, message):
    with pytest.raises(InvalidInteger) as exc:
        parse_integer("add_hours", text, width)
    assert message in str(exc.value)


def test_parse_integer_leading_zeros_do_not_count():
    assert parse_integer("p", "0" * 5000 + "7", IntWidth.U32) == 7
    assert parse_integer("p", "-" + "0" * 5000, IntWidth.I64) == 0
