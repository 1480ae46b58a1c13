"""Tests for the JSON service catalog repository."""

import json
from pathlib import Path

import pytest

from intake.application.services.requirement_resolver import resolve_service_documents
from intake.domain.exceptions import SchemaValidationException
from intake.infrastructure.catalog import JsonServiceCatalogRepository


def _document(**overrides) -> dict:
    service = {
        "slug": "demo",
        "title": "Demo",
        "documentCategories": [{"id": "c", "name": "C", "order": 1}],
        "requiredDocuments": [
            {
                "id": "d1",
                "name": "Doc",
                "required": False,
                "category": "c",
                "condition": {"field": "F", "operator": "matches", "value": "x"},
            }
        ],
    }
    service.update(overrides)
    return {"services": [service]}


async def test_bundled_catalog_loads(catalog_repo: JsonServiceCatalogRepository) -> None:
    slugs = [s.slug for s in await catalog_repo.list_services()]
    assert slugs == [
        "secp-registration",
        "ihra-registration",
        "ntn-registration",
        "tax-filing",
    ]
    secp = await catalog_repo.get_by_slug("secp-registration")
    noc = next(d for d in secp.required_documents if d.id == "noc-building-owner")
    assert noc.category_id == "property"
    assert noc.condition.operator == "notEquals"
    assert noc.formats == ("PDF",)


async def test_bundled_catalog_conditions(catalog_repo: JsonServiceCatalogRepository) -> None:
    ihra = await catalog_repo.get_by_slug("ihra-registration")
    ids = [d.id for d in resolve_service_documents(ihra, {"Number of Beds": "25"})]
    assert "environmental-clearance" in ids
    assert "pmc-pnc-registration" not in ids

    tax = await catalog_repo.get_by_slug("tax-filing")
    ids = [d.id for d in resolve_service_documents(tax, {"Source of Income": ["salary"]})]
    assert ids == ["cnic-ntn", "salary-slips", "bank-statements"]


async def test_unknown_slug_returns_none(catalog_repo: JsonServiceCatalogRepository) -> None:
    assert await catalog_repo.get_by_slug("nope") is None


async def test_unknown_operator_survives_loading() -> None:
    repo = JsonServiceCatalogRepository.from_dict(_document())
    service = await repo.get_by_slug("demo")
    assert service.required_documents[0].condition.operator == "matches"
    assert resolve_service_documents(service, {"F": "x"}) == []


def test_schema_violation_raises() -> None:
    document = _document()
    del document["services"][0]["requiredDocuments"][0]["category"]
    with pytest.raises(SchemaValidationException) as exc_info:
        JsonServiceCatalogRepository.from_dict(document)
    assert exc_info.value.error_code == "SCHEMA_VALIDATION_ERROR"
    assert exc_info.value.details["schema_type"] == "service_catalog"


def test_copies_must_be_positive() -> None:
    document = _document()
    document["services"][0]["requiredDocuments"][0]["copies"] = 0
    with pytest.raises(SchemaValidationException):
        JsonServiceCatalogRepository.from_dict(document)


def test_invalid_json_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaValidationException):
        JsonServiceCatalogRepository.from_file(path)


async def test_from_file_custom_path(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(_document(title="From File")), encoding="utf-8")
    repo = JsonServiceCatalogRepository.from_file(str(path))
    service = await repo.get_by_slug("demo")
    assert service.title == "From File"


async def test_duplicate_slug_last_wins() -> None:
    document = _document()
    document["services"].append(dict(document["services"][0], title="Second"))
    repo = JsonServiceCatalogRepository.from_dict(document)
    assert len(await repo.list_services()) == 1
    assert (await repo.get_by_slug("demo")).title == "Second"
