"""Tests for answer value tagging and browser-style coercions."""

import math

import pytest

from intake.domain.value_objects import (
    MISSING,
    NULL,
    BoolValue,
    ListValue,
    NumberValue,
    StringValue,
    answer_for,
    js_number,
    js_string,
    same_value_zero,
    strict_equals,
    to_answer_value,
    to_condition_value,
)


def test_to_answer_value_tags_each_type() -> None:
    """Raw answers are wrapped in the matching tag; bool is not a number."""
    assert to_answer_value("a") == StringValue("a")
    assert to_answer_value(True) == BoolValue(True)
    assert to_answer_value(3) == NumberValue(3.0)
    assert to_answer_value(["x", "y"]) == ListValue((StringValue("x"), StringValue("y")))
    assert to_answer_value(None) is MISSING


def test_answer_for_missing_key_is_unanswered() -> None:
    assert answer_for({}, "Applicant Type") is MISSING
    assert answer_for({"Applicant Type": None}, "Applicant Type") is MISSING


def test_strict_equals_does_not_coerce() -> None:
    """'1' != 1 and True != 1, like ===."""
    assert strict_equals(to_answer_value(1), to_answer_value(1.0))
    assert not strict_equals(to_answer_value("1"), to_answer_value(1))
    assert not strict_equals(to_answer_value(True), to_answer_value(1))
    assert strict_equals(MISSING, MISSING)


def test_strict_equals_lists_never_equal() -> None:
    value = to_answer_value(["a"])
    assert not strict_equals(value, value)


def test_nan_equality() -> None:
    """NaN is never strictly equal, but matches itself for membership."""
    nan = NumberValue(math.nan)
    assert not strict_equals(nan, nan)
    assert same_value_zero(nan, nan)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, "undefined"),
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (2.5, "2.5"),
        (0.00001, "0.00001"),
        (-0.000015, "-0.000015"),
        (0.000001, "0.000001"),
        (1.5e-7, "1.5e-7"),
        (1e21, "1e+21"),
        (123.456, "123.456"),
        (["a", "b"], "a,b"),
        ("Medical Clinic", "Medical Clinic"),
    ],
)
def test_js_string(raw, expected) -> None:
    assert js_string(to_answer_value(raw)) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("12", 12.0),
        ("  7 ", 7.0),
        ("", 0.0),
        ("0x1A", 26.0),
        ("0b101", 5.0),
        ("1e3", 1000.0),
        ("-Infinity", -math.inf),
        (True, 1.0),
        (["5"], 5.0),
    ],
)
def test_js_number(raw, expected) -> None:
    assert js_number(to_answer_value(raw)) == expected


@pytest.mark.parametrize("raw", [None, "abc", "12abc", ["1", "2"], "0x"])
def test_js_number_nan(raw) -> None:
    assert math.isnan(js_number(to_answer_value(raw)))


def test_condition_null_is_not_unanswered() -> None:
    """A null catalog value is its own tag: equal to null, never to an unanswered field."""
    assert to_condition_value(None) is NULL
    assert to_condition_value([None]) == ListValue((NULL,))
    assert strict_equals(NULL, NULL)
    assert not strict_equals(MISSING, NULL)
    assert not strict_equals(NULL, StringValue(""))


def test_null_coercions() -> None:
    assert js_string(NULL) == "null"
    assert js_number(NULL) == 0.0
    assert js_string(to_condition_value(["a", None, "b"])) == "a,,b"
