"""Plain-text document checklist for applicants.

Output is deterministic: the same groups always render to the same text.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from intake.application.dtos.document_requirement import CategorizedDocuments
from intake.application.services.requirement_resolver import (
    categorize_service_documents,
)
from intake.domain.entities import DocumentRequirement, FacilitationService

TITLE_RULE_WIDTH = 50
LEGEND = "* Required document"
TOTAL_LABEL = "Total documents to prepare"


def _document_lines(index: int, document: DocumentRequirement) -> list[str]:
    lines = [f"{index}. {document.name}{' *' if document.required else ''}"]
    if document.description:
        lines.append(f"   {document.description}")
    if document.copies and document.copies > 1:
        lines.append(f"   Copies needed: {document.copies}")
    if document.formats:
        lines.append(f"   Formats: {', '.join(document.formats)}")
    if document.alternatives:
        lines.append(f"   Alternatives: {' OR '.join(document.alternatives)}")
    if document.notes:
        lines.append(f"   Note: {document.notes}")
    return lines


def render_checklist(
    groups: Sequence[CategorizedDocuments],
    title: str | None = None,
) -> str:
    """Render categorized documents as a numbered checklist.

    Each category prints its name, an underline and optional description,
    then its documents numbered from 1 (required ones suffixed with ' *').
    Copies are listed only when more than one is needed. The text ends with
    the legend and the total number of documents across all groups.

    Args:
        groups: Output of group_by_category (already ordered).
        title: Optional service title for the heading.
    """
    out: list[str] = []
    if title is not None:
        out.append(f"Document Checklist for {title}\n")
        out.append(f"{'=' * TITLE_RULE_WIDTH}\n\n")

    for group in groups:
        name = group.category.name
        out.append(f"{name}\n")
        out.append(f"{'-' * len(name)}\n")
        if group.category.description:
            out.append(f"{group.category.description}\n")
        out.append("\n")
        for index, document in enumerate(group.documents, start=1):
            for line in _document_lines(index, document):
                out.append(f"{line}\n")
            out.append("\n")
        out.append("\n")

    total = sum(len(group.documents) for group in groups)
    out.append(f"\n{LEGEND}\n")
    out.append(f"\n{TOTAL_LABEL}: {total}\n")
    return "".join(out)


def render_service_checklist(
    service: FacilitationService,
    answers: Mapping[str, Any] | None = None,
) -> str:
    """Checklist for one service and answer set, headed by the service title."""
    return render_checklist(
        categorize_service_documents(service, answers), title=service.title
    )
