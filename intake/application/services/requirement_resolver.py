"""Document requirement resolution: which documents an applicant must supply.

All functions are pure and total over well-typed input. Malformed catalog
references (unknown category, unknown operator) degrade to "excluded"
rather than raising, so one miskeyed entry cannot block an intake.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from intake.application.dtos.document_requirement import (
    CategorizedDocuments,
    DocumentValidationResult,
)
from intake.application.services.condition_evaluator import evaluate_condition
from intake.domain.entities import (
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)

logger = logging.getLogger(__name__)


def resolve_required(
    catalog: Iterable[DocumentRequirement],
    answers: Mapping[str, Any],
) -> list[DocumentRequirement]:
    """Return the requirements that apply to the current answers.

    A requirement without a condition is included iff required is True.
    A requirement with a condition is included iff the condition holds,
    whatever its required flag says. The result is de-duplicated by id
    and keeps catalog order (first position wins, last entry is kept).
    """
    resolved: dict[str, DocumentRequirement] = {}
    for requirement in catalog:
        if not requirement.is_conditional:
            included = requirement.required
        else:
            included = evaluate_condition(requirement.condition, answers)
        if included:
            resolved[requirement.id] = requirement
    return list(resolved.values())


def group_by_category(
    resolved: Iterable[DocumentRequirement],
    categories: Iterable[DocumentCategory],
) -> list[CategorizedDocuments]:
    """Group resolved documents by category, ascending by category order.

    Categories with no resolved documents are omitted. Documents whose
    category_id matches no known category are dropped silently.
    """
    buckets: dict[str, tuple[DocumentCategory, list[DocumentRequirement]]] = {}
    for category in categories:
        buckets[category.id] = (category, [])
    for requirement in resolved:
        bucket = buckets.get(requirement.category_id)
        if bucket is None:
            logger.debug(
                "Document %r references unknown category %r; dropped from grouping",
                requirement.id,
                requirement.category_id,
            )
            continue
        bucket[1].append(requirement)
    groups = [
        CategorizedDocuments(category=category, documents=tuple(documents))
        for category, documents in buckets.values()
        if documents
    ]
    groups.sort(key=lambda group: group.category.order)
    return groups


def validate_documents(
    catalog: Iterable[DocumentRequirement],
    uploaded_ids: Collection[str],
) -> DocumentValidationResult:
    """Check claimed uploads against the catalog.

    A requirement must be present when it is required OR carries any
    condition. The condition is not re-evaluated here, so a conditional
    document whose condition is currently false is still reported missing.
    This is stricter than resolve_required; the two are kept apart until
    the intended behaviour is settled.
    """
    supplied = set(uploaded_ids)
    missing = tuple(
        requirement
        for requirement in catalog
        if (requirement.required or requirement.is_conditional)
        and requirement.id not in supplied
    )
    return DocumentValidationResult(ok=not missing, missing=missing)


def resolve_service_documents(
    service: FacilitationService,
    answers: Mapping[str, Any] | None = None,
) -> list[DocumentRequirement]:
    """resolve_required over a service's catalog (answers default to empty)."""
    return resolve_required(service.required_documents, answers or {})


def categorize_service_documents(
    service: FacilitationService,
    answers: Mapping[str, Any] | None = None,
) -> list[CategorizedDocuments]:
    """Resolve a service's documents and group them by its categories."""
    return group_by_category(
        resolve_service_documents(service, answers),
        service.document_categories,
    )
