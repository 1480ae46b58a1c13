"""Domain entities (catalog definitions)."""

from intake.domain.entities.service import (
    Condition,
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)

__all__ = [
    "Condition",
    "DocumentCategory",
    "DocumentRequirement",
    "FacilitationService",
]
