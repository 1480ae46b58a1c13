"""Domain exceptions for the intake pipeline.

Defines domain-level exceptions that represent rule violations. These are
independent of infrastructure concerns; the presentation layer maps them to
HTTP responses in exception handlers.

The document requirement resolver never raises: malformed catalog
references degrade to "excluded"/"false" instead.
"""

from typing import Any


class IntakeException(Exception):
    """Base exception for all intake errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(IntakeException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(IntakeException):
    """Raised when a requested resource (e.g. a service by slug) is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'service').
            resource_id: The identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SchemaValidationException(IntakeException):
    """Raised when a service catalog document fails schema validation."""

    def __init__(self, schema_type: str, validation_errors: list[Any]) -> None:
        """Initialize with schema identifier and validation errors.

        Args:
            schema_type: Schema identifier (e.g. 'service_catalog').
            validation_errors: Validation error details (e.g. from jsonschema).
        """
        super().__init__(
            f"Schema validation failed for {schema_type}",
            "SCHEMA_VALIDATION_ERROR",
            {"schema_type": schema_type, "errors": validation_errors},
        )


class PopupBlockedException(IntakeException):
    """Raised by CheckoutHandshake.checkout when the popup window could not be created."""

    MESSAGE = "Payment popup was blocked. Please allow popups for this site."

    def __init__(self, source: str) -> None:
        super().__init__(self.MESSAGE, "POPUP_BLOCKED", {"source": source})


class InvalidSessionStateException(IntakeException):
    """Raised when a popup session operation is attempted from the wrong state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(
            f"Cannot {operation} a checkout session in state '{state}'",
            "INVALID_SESSION_STATE",
            {"operation": operation, "state": state},
        )
