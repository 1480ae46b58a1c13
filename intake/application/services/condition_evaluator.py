"""Evaluates document conditions against a live answer set.

Single evaluator shared by requirement resolution and anything else that
needs to know whether a condition currently holds. One comparison function
per operator; unknown operators evaluate to False.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from intake.domain.entities import Condition
from intake.domain.enums import ConditionOperator
from intake.domain.value_objects import (
    AnswerValue,
    ListValue,
    answer_for,
    js_number,
    js_string,
    same_value_zero,
    strict_equals,
    to_condition_value,
)

logger = logging.getLogger(__name__)

Comparison = Callable[[AnswerValue, AnswerValue], bool]


def _equals(answer: AnswerValue, expected: AnswerValue) -> bool:
    return strict_equals(answer, expected)


def _not_equals(answer: AnswerValue, expected: AnswerValue) -> bool:
    # An unanswered field is "not equal" to anything, so it passes.
    return not strict_equals(answer, expected)


def _includes(answer: AnswerValue, expected: AnswerValue) -> bool:
    if isinstance(answer, ListValue):
        return any(same_value_zero(item, expected) for item in answer.items)
    return js_string(expected).lower() in js_string(answer).lower()


def _greater_than(answer: AnswerValue, expected: AnswerValue) -> bool:
    return js_number(answer) > js_number(expected)


def _less_than(answer: AnswerValue, expected: AnswerValue) -> bool:
    return js_number(answer) < js_number(expected)


_OPERATORS_BY_NAME = {op.value.lower(): op for op in ConditionOperator}

_COMPARISONS: dict[ConditionOperator, Comparison] = {
    ConditionOperator.EQUALS: _equals,
    ConditionOperator.NOT_EQUALS: _not_equals,
    ConditionOperator.INCLUDES: _includes,
    ConditionOperator.GREATER_THAN: _greater_than,
    ConditionOperator.LESS_THAN: _less_than,
}


def evaluate_condition(condition: Condition, answers: Mapping[str, Any]) -> bool:
    """Return whether the condition holds for the current answers.

    Operator names match case-insensitively ("equals", "Equals"). Never
    raises: an operator outside ConditionOperator yields False.

    Args:
        condition: Field, operator and expected value from the catalog.
        answers: Live answer set; missing keys read as unanswered.
    """
    operator = (
        _OPERATORS_BY_NAME.get(condition.operator.lower())
        if isinstance(condition.operator, str)
        else None
    )
    if operator is None:
        logger.debug(
            "Unknown condition operator %r on field %r; treating as false",
            condition.operator,
            condition.field,
        )
        return False
    compare = _COMPARISONS[operator]
    return compare(
        answer_for(answers, condition.field), to_condition_value(condition.value)
    )
