"""Service catalog repository backed by a JSON file.

The catalog is read-only configuration: loaded and validated once (at
startup), then served from memory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from intake.domain.entities import (
    Condition,
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)
from intake.domain.exceptions import SchemaValidationException
from intake.infrastructure.catalog.catalog_schema import SERVICE_CATALOG_SCHEMA

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent / "data" / "services.json"


def _condition_from_dict(data: dict[str, Any] | None) -> Condition | None:
    if data is None:
        return None
    return Condition(
        field=data["field"],
        operator=data["operator"],
        value=data.get("value"),
    )


def _requirement_from_dict(data: dict[str, Any]) -> DocumentRequirement:
    return DocumentRequirement(
        id=data["id"],
        name=data["name"],
        category_id=data["category"],
        required=data["required"],
        condition=_condition_from_dict(data.get("condition")),
        description=data.get("description"),
        copies=data.get("copies"),
        formats=tuple(data.get("formats") or ()),
        alternatives=tuple(data.get("alternatives") or ()),
        notes=data.get("notes"),
    )


def _category_from_dict(data: dict[str, Any]) -> DocumentCategory:
    return DocumentCategory(
        id=data["id"],
        name=data["name"],
        order=data["order"],
        description=data.get("description"),
    )


def service_from_dict(data: dict[str, Any]) -> FacilitationService:
    """Build a FacilitationService from one catalog entry (camelCase keys)."""
    return FacilitationService(
        slug=data["slug"],
        title=data["title"],
        tagline=data.get("tagline"),
        required_documents=tuple(
            _requirement_from_dict(d) for d in data.get("requiredDocuments", [])
        ),
        document_categories=tuple(
            _category_from_dict(c) for c in data.get("documentCategories") or []
        ),
    )


class JsonServiceCatalogRepository:
    """In-memory service catalog built from a validated JSON document."""

    def __init__(self, services: list[FacilitationService]) -> None:
        self._services: dict[str, FacilitationService] = {}
        for service in services:
            if service.slug in self._services:
                logger.warning(
                    "Duplicate service slug %r in catalog; last entry wins",
                    service.slug,
                )
            self._services[service.slug] = service

    @classmethod
    def from_dict(cls, document: dict[str, Any]) -> "JsonServiceCatalogRepository":
        """Validate a catalog document and build the repository.

        Raises:
            SchemaValidationException: If the document is structurally invalid.
        """
        try:
            jsonschema.validate(instance=document, schema=SERVICE_CATALOG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise SchemaValidationException(
                schema_type="service_catalog",
                validation_errors=[e.message],
            ) from e
        return cls([service_from_dict(s) for s in document["services"]])

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "JsonServiceCatalogRepository":
        """Load a catalog file (the bundled catalog when path is empty).

        Raises:
            SchemaValidationException: If the file is not valid JSON or fails the schema.
        """
        catalog_path = Path(path) if path else BUNDLED_CATALOG_PATH
        try:
            document = json.loads(catalog_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SchemaValidationException(
                schema_type="service_catalog",
                validation_errors=[f"{catalog_path}: {e}"],
            ) from e
        repo = cls.from_dict(document)
        logger.info(
            "Loaded service catalog from %s (%d services)",
            catalog_path,
            len(repo._services),
        )
        return repo

    async def list_services(self) -> list[FacilitationService]:
        return list(self._services.values())

    async def get_by_slug(self, slug: str) -> FacilitationService | None:
        return self._services.get(slug)
