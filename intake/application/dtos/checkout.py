"""DTOs for the checkout handshake (message events and terminal outcomes)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MessageEvent:
    """A cross-document message as seen by the host: sender origin and payload."""

    origin: str
    data: Any


@dataclass(frozen=True)
class CheckoutSuccess:
    """Provider reported a completed payment. Fields are passed through unvalidated."""

    tracker: str | None = None
    reference: str | None = None
    signature: str | None = None


@dataclass(frozen=True)
class CheckoutCancelled:
    """Provider reported that the applicant cancelled on the remote side."""


@dataclass(frozen=True)
class CheckoutSilentClose:
    """Popup closed without posting any message; reason unknown."""


CheckoutResult = CheckoutSuccess | CheckoutCancelled | CheckoutSilentClose
