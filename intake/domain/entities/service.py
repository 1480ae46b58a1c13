"""Service catalog domain entities.

A facilitation service publishes a static catalog of document requirements
and the categories used to present them. Entities are defined at catalog
authoring time and never mutated at runtime.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Condition:
    """Predicate over one answer-set field that gates a conditional requirement.

    operator is the raw catalog string (see ConditionOperator); unknown
    operators are kept so they can evaluate to False instead of failing load.
    """

    field: str
    operator: str
    value: Any


@dataclass(frozen=True)
class DocumentRequirement:
    """One entry in a service's required-document catalog.

    Unconditional when condition is None (inclusion governed by required);
    conditional otherwise (required is then advisory only).
    """

    id: str
    name: str
    category_id: str
    required: bool
    condition: Condition | None = None
    description: str | None = None
    copies: int | None = None
    formats: tuple[str, ...] = ()
    alternatives: tuple[str, ...] = ()
    notes: str | None = None

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None


@dataclass(frozen=True)
class DocumentCategory:
    """Presentation group for requirements, displayed in ascending order."""

    id: str
    name: str
    order: int
    description: str | None = None


@dataclass(frozen=True)
class FacilitationService:
    """A registrable service and its document catalog."""

    slug: str
    title: str
    tagline: str | None = None
    required_documents: tuple[DocumentRequirement, ...] = ()
    document_categories: tuple[DocumentCategory, ...] = ()
