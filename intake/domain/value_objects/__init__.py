"""Domain value objects (answer values and their coercions)."""

from intake.domain.value_objects.answers import (
    MISSING,
    NULL,
    AnswerValue,
    BoolValue,
    ListValue,
    MissingValue,
    NullValue,
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

__all__ = [
    "MISSING",
    "NULL",
    "AnswerValue",
    "BoolValue",
    "ListValue",
    "MissingValue",
    "NullValue",
    "NumberValue",
    "StringValue",
    "answer_for",
    "js_number",
    "js_string",
    "same_value_zero",
    "strict_equals",
    "to_answer_value",
    "to_condition_value",
]
