from decimal import Decimal
from fractions import Fraction

import pytest

from leftpad import leftpad, to_text
from leftpad.core.exceptions import InvalidArgumentError, LeftpadError


@pytest.mark.parametrize("value, cols, fill, expected", [
    ("test", 10, " ", "      test"),
    ("test", 10, "0", "000000test"),
    ("test", 2, " ", "test"),
    (3, 10, " ", "         3"),
    (3, 10, "0", "0000000003"),
])
def test_documented_examples(value, cols, fill, expected):
    assert leftpad(value, cols, fill) == expected


def test_default_fill_is_a_space():
    assert leftpad("test", 10) == "      test"
    assert leftpad(3, 10) == "         3"


def test_boundaries():
    assert leftpad("", 0) == ""
    assert leftpad("a", 1) == "a"
    assert leftpad("", 3) == "   "


@pytest.mark.parametrize("cols", [0, -1, -100])
def test_zero_or_negative_width_adds_no_padding(cols):
    assert leftpad("abc", cols) == "abc"


@pytest.mark.parametrize("value", ["", "a", "test", "hello world", 0, 42, -7, 3.5])
@pytest.mark.parametrize("cols", [0, 1, 4, 12])
@pytest.mark.parametrize("fill", [" ", "0", "*"])
def test_length_and_suffix_properties(value, cols, fill):
    text = to_text(value)
    result = leftpad(value, cols, fill)

    assert len(result) == max(len(text), cols)
    assert result.endswith(text)
    assert set(result[:len(result) - len(text)]) <= {fill}


@pytest.mark.parametrize("value, cols", [("test", 4), ("test", 3), ("abcdef", 6), (12345, 2)])
def test_no_padding_when_already_wide_enough(value, cols):
    assert leftpad(value, cols, "0") == to_text(value)


@pytest.mark.parametrize("value, cols, fill", [("x", 5, " "), ("test", 10, "0"), (7, 3, "0")])
def test_repeated_application_is_stable(value, cols, fill):
    once = leftpad(value, cols, fill)
    assert leftpad(once, cols, fill) == once


def test_multi_character_fill_is_prepended_whole():
    assert leftpad("a", 4, "xy") == "xyxya"
    assert leftpad("a", 5, "xy") == "xyxya"
    assert leftpad("ab", 4, "xyz") == "xyzab"


def test_multi_character_fill_never_truncates_value():
    result = leftpad("value", 6, "-=")
    assert result == "-=value"
    assert result.endswith("value")


def test_numeric_fill_is_converted():
    assert leftpad(7, 3, 0) == "007"


def test_numbers_use_their_textual_form():
    assert leftpad(3.25, 6) == "  3.25"
    assert leftpad(Decimal("1.50"), 6, "0") == "001.50"
    assert leftpad(Fraction(1, 3), 5) == "  1/3"
    assert leftpad(True, 6) == "  True"


def test_inputs_are_not_mutated():
    value = "abc"
    leftpad(value, 10, "0")
    assert value == "abc"


@pytest.mark.parametrize("value", [None, b"bytes", ["a"], ("a",), {"a": 1}, object()])
def test_non_scalar_value_raises(value):
    with pytest.raises(InvalidArgumentError) as exc_info:
        leftpad(value, 5)
    assert exc_info.value.argument == "value"


def test_invalid_argument_is_a_leftpad_error():
    with pytest.raises(LeftpadError):
        leftpad(None, 5)


@pytest.mark.parametrize("cols", ["10", 2.5, None])
def test_non_integer_width_raises(cols):
    with pytest.raises(InvalidArgumentError) as exc_info:
        leftpad("a", cols)
    assert exc_info.value.argument == "cols"


def test_non_text_fill_raises():
    with pytest.raises(InvalidArgumentError) as exc_info:
        leftpad("a", 5, None)
    assert exc_info.value.argument == "fill"


def test_empty_fill_raises_when_padding_is_needed():
    with pytest.raises(InvalidArgumentError, match="Fill must not be empty"):
        leftpad("a", 5, "")


def test_empty_fill_is_unused_when_no_padding_is_needed():
    assert leftpad("abc", 2, "") == "abc"


def test_failing_conversion_is_wrapped():
    class BrokenNumber(int):
        def __str__(self):
            raise RuntimeError("broken")

    with pytest.raises(InvalidArgumentError) as exc_info:
        leftpad(BrokenNumber(1), 5)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_to_text_returns_strings_unchanged():
    assert to_text("  spaced ") == "  spaced "
    assert to_text(10) == "10"
