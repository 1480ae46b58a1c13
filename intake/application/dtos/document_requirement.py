"""DTOs for document requirement resolution (grouping and required-vs-supplied check)."""

from dataclasses import dataclass

from intake.domain.entities import DocumentCategory, DocumentRequirement


@dataclass(frozen=True)
class CategorizedDocuments:
    """Resolved documents that belong to one category (never empty)."""

    category: DocumentCategory
    documents: tuple[DocumentRequirement, ...]


@dataclass(frozen=True)
class DocumentValidationResult:
    """Result of checking supplied document ids against a catalog."""

    ok: bool
    missing: tuple[DocumentRequirement, ...]


@dataclass(frozen=True)
class ResolvedDocumentsResult:
    """Resolved requirement set for one service and answer set."""

    slug: str
    documents: tuple[DocumentRequirement, ...]
    categories: tuple[CategorizedDocuments, ...]

    @property
    def total(self) -> int:
        return sum(len(group.documents) for group in self.categories)
