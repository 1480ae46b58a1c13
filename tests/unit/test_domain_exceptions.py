"""Tests for domain exceptions (error_code, message, details)."""

from intake.domain.exceptions import (
    IntakeException,
    InvalidSessionStateException,
    PopupBlockedException,
    ResourceNotFoundException,
    SchemaValidationException,
    ValidationException,
)


def test_intake_exception_default_error_code() -> None:
    """Base IntakeException uses class name as error_code when not provided."""
    exc = IntakeException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "IntakeException"
    assert exc.details == {}


def test_intake_exception_to_dict() -> None:
    exc = IntakeException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="source")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "source"}
    assert ValidationException("Invalid").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("service", "secp-registration")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert "secp-registration" in exc.message
    assert exc.details == {"resource_type": "service", "resource_id": "secp-registration"}


def test_schema_validation_exception() -> None:
    exc = SchemaValidationException("service_catalog", ["'slug' is a required property"])
    assert exc.error_code == "SCHEMA_VALIDATION_ERROR"
    assert exc.details["errors"] == ["'slug' is a required property"]


def test_popup_blocked_exception() -> None:
    exc = PopupBlockedException("service")
    assert exc.error_code == "POPUP_BLOCKED"
    assert exc.message == "Payment popup was blocked. Please allow popups for this site."


def test_invalid_session_state_exception() -> None:
    exc = InvalidSessionStateException("open", "resolved")
    assert exc.error_code == "INVALID_SESSION_STATE"
    assert exc.details == {"operation": "open", "state": "resolved"}
