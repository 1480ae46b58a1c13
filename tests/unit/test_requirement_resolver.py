"""Tests for requirement resolution, grouping and submission validation."""

import pytest

from intake.application.services.requirement_resolver import (
    categorize_service_documents,
    group_by_category,
    resolve_required,
    resolve_service_documents,
    validate_documents,
)
from intake.domain.entities import (
    Condition,
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)


def _income_catalog() -> tuple[list[DocumentRequirement], list[DocumentCategory]]:
    catalog = [
        DocumentRequirement(id="A", name="A", category_id="cat1", required=True),
        DocumentRequirement(
            id="B",
            name="B",
            category_id="cat1",
            required=False,
            condition=Condition("hasForeignIncome", "Equals", True),
        ),
    ]
    categories = [DocumentCategory(id="cat1", name="Income", order=0)]
    return catalog, categories


def _ids(documents) -> list[str]:
    return [d.id for d in documents]


def test_condition_gates_inclusion() -> None:
    """Unanswered field leaves B out; answering true brings it in after A."""
    catalog, _ = _income_catalog()
    assert _ids(resolve_required(catalog, {})) == ["A"]
    assert _ids(resolve_required(catalog, {"hasForeignIncome": True})) == ["A", "B"]
    assert _ids(resolve_required(catalog, {"hasForeignIncome": "true"})) == ["A"]


def test_validate_expects_conditional_documents_regardless_of_answers() -> None:
    """B is reported missing even though resolve_required would not ask for it."""
    catalog, _ = _income_catalog()
    assert _ids(resolve_required(catalog, {})) == ["A"]
    result = validate_documents(catalog, ["A"])
    assert result.ok is False
    assert _ids(result.missing) == ["B"]


def test_validate_ok_when_everything_supplied() -> None:
    catalog, _ = _income_catalog()
    result = validate_documents(catalog, ["B", "A", "extra"])
    assert result.ok is True
    assert result.missing == ()


def test_validate_ignores_optional_unconditional() -> None:
    catalog = [DocumentRequirement(id="opt", name="Opt", category_id="c", required=False)]
    assert validate_documents(catalog, []).ok is True


def test_required_flag_is_advisory_for_conditional_documents() -> None:
    """A conditional document marked required is still excluded when its condition fails."""
    catalog = [
        DocumentRequirement(
            id="pmc",
            name="PMC",
            category_id="c",
            required=True,
            condition=Condition("Facility Type", "includes", "medical"),
        )
    ]
    assert resolve_required(catalog, {"Facility Type": "Dental"}) == []
    assert _ids(resolve_required(catalog, {"Facility Type": "Medical Centre"})) == ["pmc"]


def test_inclusion_is_total(service: FacilitationService) -> None:
    """Every resolved document is required-unconditional or has a holding condition."""
    resolved = resolve_service_documents(service)
    assert _ids(resolved) == ["cnic", "noc", "orphan"]
    owned = resolve_service_documents(service, {"Registered Office Address": "owned"})
    assert _ids(owned) == ["cnic", "orphan"]


_ANSWERS = {"Applicant Type": "Company"}
_CONDITIONS = {
    "none": None,
    "holds": Condition("Applicant Type", "equals", "Company"),
    "fails": Condition("Applicant Type", "equals", "Individual"),
    "unknown-operator": Condition("Applicant Type", "matches", "Company"),
}
_EXPECTED_INCLUSION = {"holds": True, "fails": False, "unknown-operator": False}


@pytest.mark.parametrize("required", [True, False])
@pytest.mark.parametrize("kind", list(_CONDITIONS))
def test_inclusion_rule_for_each_requirement_shape(required: bool, kind: str) -> None:
    requirement = DocumentRequirement(
        id="doc",
        name="Doc",
        category_id="c",
        required=required,
        condition=_CONDITIONS[kind],
    )
    expected = required if kind == "none" else _EXPECTED_INCLUSION[kind]
    assert (_ids(resolve_required([requirement], _ANSWERS)) == ["doc"]) is expected


def test_inclusion_is_total_across_requirement_shapes() -> None:
    """Every combination at once, listed twice: each included id appears exactly once."""
    catalog = [
        DocumentRequirement(
            id=f"{kind}-{required}",
            name=kind,
            category_id="c",
            required=required,
            condition=condition,
        )
        for kind, condition in _CONDITIONS.items()
        for required in (True, False)
    ]
    resolved = resolve_required(catalog + catalog, _ANSWERS)
    ids = _ids(resolved)
    assert len(ids) == len(set(ids))
    assert ids == ["none-True", "holds-True", "holds-False"]
    for document in resolved:
        if document.condition is None:
            assert document.required
        else:
            assert document.condition.operator == "equals"
            assert document.condition.value == "Company"


def test_duplicate_ids_keep_first_position_last_entry() -> None:
    first = DocumentRequirement(id="x", name="First", category_id="c", required=True)
    other = DocumentRequirement(id="y", name="Other", category_id="c", required=True)
    last = DocumentRequirement(id="x", name="Last", category_id="c", required=True)
    resolved = resolve_required([first, other, last], {})
    assert [d.name for d in resolved] == ["Last", "Other"]


def test_answers_not_mutated(service: FacilitationService) -> None:
    answers = {"Registered Office Address": "rented"}
    resolve_service_documents(service, answers)
    assert answers == {"Registered Office Address": "rented"}


def test_group_by_category_orders_and_omits(service: FacilitationService) -> None:
    """Groups ascend by order; empty categories are omitted; unknown categories dropped."""
    groups = categorize_service_documents(service)
    assert [g.category.id for g in groups] == ["personal", "business"]
    assert [_ids(g.documents) for g in groups] == [["cnic"], ["noc"]]
    assert all(g.documents for g in groups)


def test_group_by_category_single_category() -> None:
    catalog, categories = _income_catalog()
    groups = group_by_category(resolve_required(catalog, {"hasForeignIncome": True}), categories)
    assert len(groups) == 1
    assert groups[0].category.name == "Income"
    assert _ids(groups[0].documents) == ["A", "B"]


def test_group_by_category_empty_input() -> None:
    _, categories = _income_catalog()
    assert group_by_category([], categories) == []
