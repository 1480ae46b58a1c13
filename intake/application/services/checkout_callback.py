"""Checkout callback message: what the provider's return page posts to its opener.

The payment provider redirects the popup to our callback page with query
parameters (source, cancelled, tracker, reference, sig). The page turns
them into one message for the host and then closes itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from intake.domain.enums import CallbackStatus, PaymentSource

DEFAULT_SOURCE = "payment"


def message_type(
    namespace: str, source: PaymentSource | str, status: CallbackStatus
) -> str:
    """Wire message type, e.g. 'safepay-service-success'."""
    source_value = source.value if isinstance(source, PaymentSource) else source
    return f"{namespace}-{source_value}-{status.value}"


def popup_window_name(namespace: str) -> str:
    """Window name shared by every checkout popup (re-opening reuses the window)."""
    return f"{namespace}-checkout"


def callback_status(params: Mapping[str, str | None]) -> CallbackStatus:
    """Cancelled when the 'cancelled' parameter is present and non-empty."""
    if params.get("cancelled"):
        return CallbackStatus.CANCELLED
    return CallbackStatus.SUCCESS


def build_callback_message(
    namespace: str, params: Mapping[str, str | None]
) -> dict[str, Any]:
    """Build the message the callback page posts to window.opener.

    Args:
        namespace: Checkout namespace (settings.checkout_namespace).
        params: Callback query parameters. 'source' defaults to 'payment' and
            is not checked against PaymentSource, so an unknown source produces
            a message no handshake accepts.

    Returns:
        {"type": "<ns>-<source>-cancelled"} or
        {"type": "<ns>-<source>-success", "tracker", "reference", "signature"}.
    """
    source = params.get("source") or DEFAULT_SOURCE
    status = callback_status(params)
    if status is CallbackStatus.CANCELLED:
        return {"type": message_type(namespace, source, status)}
    return {
        "type": message_type(namespace, source, status),
        "tracker": params.get("tracker"),
        "reference": params.get("reference"),
        "signature": params.get("sig"),
    }
