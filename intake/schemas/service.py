"""Service catalog and document requirement API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intake.application.dtos.document_requirement import (
    DocumentValidationResult,
    ResolvedDocumentsResult,
)

AnswerInput = str | bool | int | float | list[str] | None


class ConditionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    field: str
    operator: str
    value: Any


class DocumentRequirementResponse(BaseModel):
    """One document requirement as stored in the catalog."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category_id: str
    required: bool
    condition: ConditionResponse | None = None
    description: str | None = None
    copies: int | None = None
    formats: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)
    notes: str | None = None


class DocumentCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    order: int
    description: str | None = None


class ServiceListItem(BaseModel):
    """Service list item (no document catalog)."""

    model_config = ConfigDict(from_attributes=True)

    slug: str
    title: str
    tagline: str | None = None


class ServiceResponse(BaseModel):
    """Service with its full document catalog."""

    model_config = ConfigDict(from_attributes=True)

    slug: str
    title: str
    tagline: str | None = None
    required_documents: list[DocumentRequirementResponse]
    document_categories: list[DocumentCategoryResponse]


class ResolveDocumentsRequest(BaseModel):
    """Request body for resolve and checklist: the applicant's current answers."""

    answers: dict[str, AnswerInput] = Field(
        default_factory=dict,
        description="Form field name to answer; missing or null reads as unanswered",
    )


class ValidateDocumentsRequest(BaseModel):
    """Request body for validate: ids of documents the applicant claims to have supplied."""

    uploaded_document_ids: list[str] = Field(default_factory=list)


class CategorizedDocumentsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: DocumentCategoryResponse
    documents: list[DocumentRequirementResponse]


class ResolvedDocumentsResponse(BaseModel):
    """Resolved documents for a service: flat ids, non-empty ordered groups, total."""

    slug: str
    document_ids: list[str]
    categories: list[CategorizedDocumentsResponse]
    total: int

    @classmethod
    def from_result(cls, result: ResolvedDocumentsResult) -> "ResolvedDocumentsResponse":
        return cls(
            slug=result.slug,
            document_ids=[doc.id for doc in result.documents],
            categories=[
                CategorizedDocumentsResponse.model_validate(group)
                for group in result.categories
            ],
            total=result.total,
        )


class MissingDocument(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class DocumentValidationResponse(BaseModel):
    """Response for validate: ok is True exactly when missing is empty."""

    ok: bool
    missing: list[MissingDocument]

    @classmethod
    def from_result(cls, result: DocumentValidationResult) -> "DocumentValidationResponse":
        return cls(
            ok=result.ok,
            missing=[MissingDocument.model_validate(doc) for doc in result.missing],
        )
