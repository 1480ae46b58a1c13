"""Answer-set values as a tagged union.

Form answers arrive dynamically typed (string, bool, number, list of strings,
or absent). Conditions compare them with browser-style semantics: strict
equality without coercion, String() for substring checks and Number() for
ordering. Each coercion is a separate function so every operator's handling
of each tag (including the unanswered case) is explicit.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_RADIX_LITERALS = {
    "0x": (16, re.compile(r"^[0-9a-fA-F]+$")),
    "0o": (8, re.compile(r"^[0-7]+$")),
    "0b": (2, re.compile(r"^[01]+$")),
}
# Numbers print in positional form for magnitudes in [1e-6, 1e21).
_EXPONENT_THRESHOLD = 1e21
_SMALL_EXPONENT_THRESHOLD = 1e-6


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    value: float


@dataclass(frozen=True)
class ListValue:
    items: tuple["AnswerValue", ...]


@dataclass(frozen=True)
class NullValue:
    """An explicit null in the catalog (a condition value of null)."""


@dataclass(frozen=True)
class MissingValue:
    """A field that was never answered."""


NULL = NullValue()
MISSING = MissingValue()

AnswerValue = (
    StringValue | BoolValue | NumberValue | ListValue | NullValue | MissingValue
)
_TAGS = (StringValue, BoolValue, NumberValue, ListValue, NullValue, MissingValue)


def _tag(raw: Any, none: AnswerValue) -> AnswerValue:
    if raw is None:
        return none
    if isinstance(raw, _TAGS):
        return raw
    # bool before int: bool is an int subclass.
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, (int, float)):
        return NumberValue(float(raw))
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, (list, tuple)):
        return ListValue(tuple(_tag(item, none) for item in raw))
    return StringValue(str(raw))


def to_answer_value(raw: Any) -> AnswerValue:
    """Wrap a raw answer in its tag.

    None reads as unanswered (MISSING). Unsupported types are carried as
    their str() form.
    """
    return _tag(raw, MISSING)


def to_condition_value(raw: Any) -> AnswerValue:
    """Wrap a catalog condition value in its tag.

    None is an explicit null (NULL), never unanswered, so an unanswered
    field is not strictly equal to a null condition value.
    """
    return _tag(raw, NULL)


def answer_for(answers: Mapping[str, Any], field: str) -> AnswerValue:
    """Look up a field in an answer set; missing keys read as unanswered."""
    return to_answer_value(answers.get(field))


def strict_equals(left: AnswerValue, right: AnswerValue) -> bool:
    """Equality without coercion: same tag and same value.

    Lists have reference identity in the form layer, so a list answer is
    never equal to a catalog value. NaN is not equal to itself.
    """
    if isinstance(left, ListValue) or isinstance(right, ListValue):
        return False
    if type(left) is not type(right):
        return False
    if isinstance(left, (NullValue, MissingValue)):
        return True
    return left.value == right.value


def same_value_zero(left: AnswerValue, right: AnswerValue) -> bool:
    """strict_equals, except NaN matches NaN (list membership semantics)."""
    if (
        isinstance(left, NumberValue)
        and isinstance(right, NumberValue)
        and math.isnan(left.value)
        and math.isnan(right.value)
    ):
        return True
    return strict_equals(left, right)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < _EXPONENT_THRESHOLD:
        return str(int(number))
    text = repr(number)
    if "e" in text and _SMALL_EXPONENT_THRESHOLD <= abs(number) < _EXPONENT_THRESHOLD:
        # repr switches to exponent form below 1e-4; String() only below 1e-6.
        return format(Decimal(text), "f")
    if "e" in text:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return text


def js_string(value: AnswerValue) -> str:
    """String form used by substring matching (String(x) semantics)."""
    if isinstance(value, MissingValue):
        return "undefined"
    if isinstance(value, NullValue):
        return "null"
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, NumberValue):
        return _format_number(value.value)
    if isinstance(value, ListValue):
        return ",".join(
            "" if isinstance(item, (NullValue, MissingValue)) else js_string(item)
            for item in value.items
        )
    return value.value


def _parse_number(text: str) -> float:
    stripped = text.strip()
    if not stripped:
        return 0.0
    if stripped in ("Infinity", "+Infinity"):
        return math.inf
    if stripped == "-Infinity":
        return -math.inf
    radix_literal = _RADIX_LITERALS.get(stripped[:2].lower())
    if radix_literal is not None:
        base, digits_re = radix_literal
        digits = stripped[2:]
        if not digits_re.match(digits):
            return math.nan
        try:
            return float(int(digits, base))
        except OverflowError:
            return math.inf
    if _DECIMAL_RE.match(stripped):
        return float(stripped)
    return math.nan


def js_number(value: AnswerValue) -> float:
    """Numeric form used by ordering operators (Number(x) semantics).

    Unanswered is NaN, so every ordering comparison against it is False.
    Null is 0.
    """
    if isinstance(value, MissingValue):
        return math.nan
    if isinstance(value, NullValue):
        return 0.0
    if isinstance(value, BoolValue):
        return 1.0 if value.value else 0.0
    if isinstance(value, NumberValue):
        return value.value
    if isinstance(value, ListValue):
        return _parse_number(js_string(value))
    return _parse_number(value.value)
