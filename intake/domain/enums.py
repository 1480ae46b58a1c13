"""Domain enumerations for the intake pipeline.

Enums represent fixed sets of domain values (operators, payment sources,
checkout session states).
"""

from enum import Enum


class ConditionOperator(str, Enum):
    """Comparison operators a document condition may use.

    Values match the catalog wire format. Conditions keep the raw operator
    string; an operator outside this set evaluates to False.
    """

    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    INCLUDES = "includes"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"


class PaymentSource(str, Enum):
    """Workflow a checkout popup belongs to. Fixed for a session's lifetime."""

    CONSULTATION = "consultation"
    SUBSCRIPTION = "subscription"
    SERVICE = "service"


class SessionState(str, Enum):
    """Checkout popup session lifecycle: idle -> open -> resolved (terminal)."""

    IDLE = "idle"
    OPEN = "open"
    RESOLVED = "resolved"


class CallbackStatus(str, Enum):
    """Outcome shown by the checkout callback page."""

    SUCCESS = "success"
    CANCELLED = "cancelled"
