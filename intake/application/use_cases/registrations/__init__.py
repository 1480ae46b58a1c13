"""Registration use cases: resolve, validate and render document requirements."""

from intake.application.use_cases.registrations.registration_documents import (
    RenderDocumentChecklistUseCase,
    ResolveRegistrationDocumentsUseCase,
    ValidateRegistrationDocumentsUseCase,
)

__all__ = [
    "RenderDocumentChecklistUseCase",
    "ResolveRegistrationDocumentsUseCase",
    "ValidateRegistrationDocumentsUseCase",
]
