"""Tests for condition evaluation (one comparison per operator)."""

import pytest

from intake.application.services.condition_evaluator import evaluate_condition
from intake.domain.entities import Condition


@pytest.mark.parametrize(
    "operator,expected_value,answer,expected",
    [
        ("equals", "Individual", "Individual", True),
        ("equals", "Individual", "individual", False),
        ("equals", 10, "10", False),
        ("notEquals", "owned", "rented", True),
        ("notEquals", "owned", "owned", False),
        ("includes", "medical", "Medical Clinic", True),
        ("includes", "medical", "Dental", False),
        ("includes", "salary", ["salary", "business"], True),
        ("includes", "sal", ["salary"], False),
        ("greaterThan", 10, "25", True),
        ("greaterThan", 10, 10, False),
        ("greaterThan", 10, "abc", False),
        ("lessThan", 10, "9", True),
        ("lessThan", 10, "", True),
    ],
)
def test_operator_truth_table(operator, expected_value, answer, expected) -> None:
    condition = Condition("Field", operator, expected_value)
    assert evaluate_condition(condition, {"Field": answer}) is expected


@pytest.mark.parametrize("answers", [{}, {"F": None}])
@pytest.mark.parametrize("value", [None, True, False, 0, "", "x", ["a"]])
def test_unanswered_field_for_any_value(answers, value) -> None:
    """Unanswered: equals and ordering are false, notEquals is true, whatever the value."""
    assert evaluate_condition(Condition("F", "equals", value), answers) is False
    assert evaluate_condition(Condition("F", "notEquals", value), answers) is True
    assert evaluate_condition(Condition("F", "greaterThan", value), answers) is False
    assert evaluate_condition(Condition("F", "lessThan", value), answers) is False


def test_unanswered_field_includes_matches_undefined() -> None:
    answers: dict = {}
    assert not evaluate_condition(Condition("F", "includes", "medical"), answers)
    assert evaluate_condition(Condition("F", "includes", "fine"), answers)


def test_null_condition_value_on_answered_field() -> None:
    """A null value is never equal to an answer and orders as 0."""
    assert evaluate_condition(Condition("F", "equals", None), {"F": ""}) is False
    assert evaluate_condition(Condition("F", "notEquals", None), {"F": "x"}) is True
    assert evaluate_condition(Condition("F", "greaterThan", None), {"F": "1"}) is True
    assert evaluate_condition(Condition("F", "includes", None), {"F": "nullable"}) is True


def test_unknown_operator_is_false() -> None:
    condition = Condition("F", "startsWith", "a")
    assert evaluate_condition(condition, {"F": "abc"}) is False


def test_answers_not_mutated() -> None:
    answers = {"F": ["a", "b"]}
    evaluate_condition(Condition("F", "includes", "a"), answers)
    assert answers == {"F": ["a", "b"]}
