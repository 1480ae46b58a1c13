"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from intake.domain.entities import (
    Condition,
    DocumentCategory,
    DocumentRequirement,
    FacilitationService,
)
from intake.domain.enums import (
    CallbackStatus,
    ConditionOperator,
    PaymentSource,
    SessionState,
)
from intake.domain.exceptions import (
    IntakeException,
    InvalidSessionStateException,
    PopupBlockedException,
    ResourceNotFoundException,
    SchemaValidationException,
    ValidationException,
)

__all__ = [
    # Entities
    "Condition",
    "DocumentCategory",
    "DocumentRequirement",
    "FacilitationService",
    # Enums
    "CallbackStatus",
    "ConditionOperator",
    "PaymentSource",
    "SessionState",
    # Exceptions
    "IntakeException",
    "InvalidSessionStateException",
    "PopupBlockedException",
    "ResourceNotFoundException",
    "SchemaValidationException",
    "ValidationException",
]
