"""Service catalog API: thin routes delegating to the catalog repository and document use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from intake.api.v1.dependencies import (
    CatalogRepo,
    get_checklist_use_case,
    get_resolve_documents_use_case,
    get_validate_documents_use_case,
)
from intake.application.use_cases.registrations import (
    RenderDocumentChecklistUseCase,
    ResolveRegistrationDocumentsUseCase,
    ValidateRegistrationDocumentsUseCase,
)
from intake.core.limiter import limit_resolve, limit_submit
from intake.domain.exceptions import ResourceNotFoundException
from intake.schemas.service import (
    DocumentValidationResponse,
    ResolvedDocumentsResponse,
    ResolveDocumentsRequest,
    ServiceListItem,
    ServiceResponse,
    ValidateDocumentsRequest,
)

router = APIRouter()


@router.get("", response_model=list[ServiceListItem])
async def list_services(repo: CatalogRepo):
    """List registrable services."""
    services = await repo.list_services()
    return [ServiceListItem.model_validate(s) for s in services]


@router.get("/{slug}", response_model=ServiceResponse)
async def get_service(slug: str, repo: CatalogRepo):
    """Get a service with its full document catalog."""
    service = await repo.get_by_slug(slug)
    if service is None:
        raise ResourceNotFoundException("service", slug)
    return ServiceResponse.model_validate(service)


@router.post("/{slug}/documents/resolve", response_model=ResolvedDocumentsResponse)
@limit_resolve
async def resolve_documents(
    request: Request,
    slug: str,
    body: ResolveDocumentsRequest,
    use_case: Annotated[
        ResolveRegistrationDocumentsUseCase, Depends(get_resolve_documents_use_case)
    ],
):
    """Documents required for the given answers, grouped by category."""
    result = await use_case.execute(slug, body.answers)
    return ResolvedDocumentsResponse.from_result(result)


@router.post("/{slug}/documents/validate", response_model=DocumentValidationResponse)
@limit_submit
async def validate_documents(
    request: Request,
    slug: str,
    body: ValidateDocumentsRequest,
    use_case: Annotated[
        ValidateRegistrationDocumentsUseCase, Depends(get_validate_documents_use_case)
    ],
):
    """Check the supplied document ids before submission.

    Every conditional document is expected regardless of answers.
    """
    result = await use_case.execute(slug, body.uploaded_document_ids)
    return DocumentValidationResponse.from_result(result)


@router.post("/{slug}/documents/checklist", response_class=PlainTextResponse)
@limit_resolve
async def document_checklist(
    request: Request,
    slug: str,
    body: ResolveDocumentsRequest,
    use_case: Annotated[
        RenderDocumentChecklistUseCase, Depends(get_checklist_use_case)
    ],
) -> PlainTextResponse:
    """Plain-text checklist of the resolved documents."""
    return PlainTextResponse(await use_case.execute(slug, body.answers))
