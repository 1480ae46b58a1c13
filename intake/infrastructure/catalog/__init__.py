"""Service catalog (read-only JSON-backed repository)."""

from intake.infrastructure.catalog.catalog_repo import (
    BUNDLED_CATALOG_PATH,
    JsonServiceCatalogRepository,
    service_from_dict,
)

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "JsonServiceCatalogRepository",
    "service_from_dict",
]
