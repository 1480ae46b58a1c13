"""Registration document use cases: resolve, validate and render a service's document requirements."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any

from intake.application.dtos.document_requirement import (
    DocumentValidationResult,
    ResolvedDocumentsResult,
)
from intake.application.interfaces.repositories import IServiceCatalogRepository
from intake.application.services.checklist_renderer import render_service_checklist
from intake.application.services.requirement_resolver import (
    group_by_category,
    resolve_service_documents,
    validate_documents,
)
from intake.domain.entities import FacilitationService
from intake.domain.exceptions import ResourceNotFoundException
from intake.shared.telemetry import add_span_attributes, add_span_event, traced

logger = logging.getLogger(__name__)


async def _get_service(
    catalog_repo: IServiceCatalogRepository, slug: str
) -> FacilitationService:
    service = await catalog_repo.get_by_slug(slug)
    if service is None:
        raise ResourceNotFoundException("service", slug)
    return service


class ResolveRegistrationDocumentsUseCase:
    """Documents an applicant must supply for a service, given current answers."""

    def __init__(self, catalog_repo: IServiceCatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    @traced("registration_documents.resolve")
    async def execute(
        self, slug: str, answers: Mapping[str, Any]
    ) -> ResolvedDocumentsResult:
        """Resolve and categorize the service's documents for the answers.

        Raises:
            ResourceNotFoundException: If no service has this slug.
        """
        service = await _get_service(self._catalog_repo, slug)
        documents = resolve_service_documents(service, answers)
        categories = group_by_category(documents, service.document_categories)
        result = ResolvedDocumentsResult(
            slug=slug,
            documents=tuple(documents),
            categories=tuple(categories),
        )
        add_span_attributes(resolved_count=len(documents), total=result.total)
        return result


class ValidateRegistrationDocumentsUseCase:
    """Checks claimed uploads against the service's full catalog at submission time."""

    def __init__(self, catalog_repo: IServiceCatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    @traced("registration_documents.validate")
    async def execute(
        self, slug: str, uploaded_ids: Collection[str]
    ) -> DocumentValidationResult:
        """Return ok/missing for the supplied ids.

        Conditional documents count as must-be-present whatever the answers
        are (see validate_documents).

        Raises:
            ResourceNotFoundException: If no service has this slug.
        """
        service = await _get_service(self._catalog_repo, slug)
        result = validate_documents(service.required_documents, uploaded_ids)
        if not result.ok:
            logger.info(
                "Document submission for %s incomplete: %d missing",
                slug,
                len(result.missing),
            )
            add_span_event(
                "documents.incomplete", {"missing_count": len(result.missing)}
            )
        add_span_attributes(missing_count=len(result.missing))
        return result


class RenderDocumentChecklistUseCase:
    """Plain-text checklist of a service's resolved documents."""

    def __init__(self, catalog_repo: IServiceCatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    @traced("registration_documents.checklist")
    async def execute(self, slug: str, answers: Mapping[str, Any]) -> str:
        service = await _get_service(self._catalog_repo, slug)
        return render_service_checklist(service, answers)
