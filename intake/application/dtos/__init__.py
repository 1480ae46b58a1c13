"""Application DTOs (no dependency on the HTTP layer)."""

from intake.application.dtos.checkout import (
    CheckoutCancelled,
    CheckoutResult,
    CheckoutSilentClose,
    CheckoutSuccess,
    MessageEvent,
)
from intake.application.dtos.document_requirement import (
    CategorizedDocuments,
    DocumentValidationResult,
    ResolvedDocumentsResult,
)

__all__ = [
    "CategorizedDocuments",
    "CheckoutCancelled",
    "CheckoutResult",
    "CheckoutSilentClose",
    "CheckoutSuccess",
    "DocumentValidationResult",
    "MessageEvent",
    "ResolvedDocumentsResult",
]
