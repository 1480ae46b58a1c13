"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the service catalog and the registration
document use cases. The catalog repository is loaded once in the app
lifespan (app.state.catalog_repo); routes depend only on these functions.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from intake.application.interfaces.repositories import IServiceCatalogRepository
from intake.application.use_cases.registrations import (
    RenderDocumentChecklistUseCase,
    ResolveRegistrationDocumentsUseCase,
    ValidateRegistrationDocumentsUseCase,
)


def get_catalog_repo(request: Request) -> IServiceCatalogRepository:
    """Catalog repository set by the lifespan; 503 if startup did not load it."""
    repo = getattr(request.app.state, "catalog_repo", None)
    if repo is None:
        raise HTTPException(status_code=503, detail="Service catalog not loaded")
    return repo


CatalogRepo = Annotated[IServiceCatalogRepository, Depends(get_catalog_repo)]


def get_resolve_documents_use_case(
    catalog_repo: CatalogRepo,
) -> ResolveRegistrationDocumentsUseCase:
    return ResolveRegistrationDocumentsUseCase(catalog_repo=catalog_repo)


def get_validate_documents_use_case(
    catalog_repo: CatalogRepo,
) -> ValidateRegistrationDocumentsUseCase:
    return ValidateRegistrationDocumentsUseCase(catalog_repo=catalog_repo)


def get_checklist_use_case(
    catalog_repo: CatalogRepo,
) -> RenderDocumentChecklistUseCase:
    return RenderDocumentChecklistUseCase(catalog_repo=catalog_repo)
