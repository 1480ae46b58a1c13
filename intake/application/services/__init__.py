"""Application services: requirement resolution, checklist rendering, checkout handshake."""

from intake.application.services.checklist_renderer import (
    render_checklist,
    render_service_checklist,
)
from intake.application.services.checkout_callback import (
    build_callback_message,
    callback_status,
    message_type,
)
from intake.application.services.checkout_handshake import (
    CheckoutHandshake,
    PopupSession,
)
from intake.application.services.condition_evaluator import evaluate_condition
from intake.application.services.requirement_resolver import (
    categorize_service_documents,
    group_by_category,
    resolve_required,
    resolve_service_documents,
    validate_documents,
)

__all__ = [
    "CheckoutHandshake",
    "PopupSession",
    "build_callback_message",
    "callback_status",
    "categorize_service_documents",
    "evaluate_condition",
    "group_by_category",
    "message_type",
    "render_checklist",
    "render_service_checklist",
    "resolve_required",
    "resolve_service_documents",
    "validate_documents",
]
