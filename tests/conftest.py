"""Pytest configuration and fixtures for intake.

Uses intake.main:app for HTTP tests and the headless checkout environment
for handshake tests. Telemetry is disabled before the app is imported.
"""

import os

os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from intake.domain.entities import (
    Condition,
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)
from intake.infrastructure.catalog import JsonServiceCatalogRepository
from intake.infrastructure.checkout import HeadlessHostWindow
from intake.main import app

HOST_ORIGIN = "https://intake.example"


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), with lifespan run."""
    transport = ASGITransport(app=app)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


@pytest.fixture
def catalog_repo() -> JsonServiceCatalogRepository:
    """Repository over the bundled catalog."""
    return JsonServiceCatalogRepository.from_file()


@pytest.fixture
def host() -> HeadlessHostWindow:
    """Host window at HOST_ORIGIN with a centred 1280x800 outer frame."""
    return HeadlessHostWindow(HOST_ORIGIN)


@pytest.fixture
def service() -> FacilitationService:
    """Small service exercising every operator and an unknown category."""
    categories = (
        DocumentCategory(id="business", name="Business Documents", order=2),
        DocumentCategory(
            id="personal",
            name="Personal Documents",
            order=1,
            description="For all directors",
        ),
        DocumentCategory(id="empty", name="Never Used", order=3),
    )
    documents = (
        DocumentRequirement(
            id="cnic",
            name="CNIC Copies",
            category_id="personal",
            required=True,
            copies=2,
            formats=("PDF", "JPG"),
        ),
        DocumentRequirement(
            id="noc",
            name="NOC from Building Owner",
            category_id="business",
            required=False,
            condition=Condition("Registered Office Address", "notEquals", "owned"),
        ),
        DocumentRequirement(
            id="optional-photo",
            name="Optional Photo",
            category_id="personal",
            required=False,
        ),
        DocumentRequirement(
            id="orphan",
            name="Orphan",
            category_id="missing-category",
            required=True,
        ),
    )
    return FacilitationService(
        slug="test-service",
        title="Test Service",
        required_documents=documents,
        document_categories=categories,
    )
