"""Tests for registration document use cases (mocked catalog repo)."""

import pytest

from intake.application.use_cases.registrations import (
    RenderDocumentChecklistUseCase,
    ResolveRegistrationDocumentsUseCase,
    ValidateRegistrationDocumentsUseCase,
)
from intake.domain.entities import FacilitationService
from intake.domain.exceptions import ResourceNotFoundException


class MockCatalogRepo:
    def __init__(self, service: FacilitationService | None = None):
        self.service = service
        self.requested: list[str] = []

    async def list_services(self) -> list[FacilitationService]:
        return [self.service] if self.service else []

    async def get_by_slug(self, slug: str) -> FacilitationService | None:
        self.requested.append(slug)
        if self.service and self.service.slug == slug:
            return self.service
        return None


async def test_resolve_use_case(service: FacilitationService) -> None:
    repo = MockCatalogRepo(service)
    result = await ResolveRegistrationDocumentsUseCase(catalog_repo=repo).execute(
        "test-service", {"Registered Office Address": "rented"}
    )
    assert result.slug == "test-service"
    assert [d.id for d in result.documents] == ["cnic", "noc", "orphan"]
    # The orphan has no known category, so it is not counted in the grouped total.
    assert result.total == 2
    assert repo.requested == ["test-service"]


async def test_validate_use_case(service: FacilitationService) -> None:
    use_case = ValidateRegistrationDocumentsUseCase(catalog_repo=MockCatalogRepo(service))
    result = await use_case.execute("test-service", ["cnic"])
    assert result.ok is False
    assert [d.id for d in result.missing] == ["noc", "orphan"]


async def test_checklist_use_case(service: FacilitationService) -> None:
    use_case = RenderDocumentChecklistUseCase(catalog_repo=MockCatalogRepo(service))
    text = await use_case.execute("test-service", {})
    assert text.startswith("Document Checklist for Test Service\n")


@pytest.mark.parametrize(
    "use_case_cls,arg",
    [
        (ResolveRegistrationDocumentsUseCase, {}),
        (ValidateRegistrationDocumentsUseCase, []),
        (RenderDocumentChecklistUseCase, {}),
    ],
)
async def test_unknown_slug_raises(use_case_cls, arg) -> None:
    use_case = use_case_cls(catalog_repo=MockCatalogRepo())
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await use_case.execute("missing", arg)
    assert exc_info.value.details["resource_id"] == "missing"
