"""Headless checkout environment (host window, popups, message channel)."""

from intake.infrastructure.checkout.headless import (
    HeadlessHostWindow,
    HeadlessPopupWindow,
    LocalMessageChannel,
    origin_of,
)

__all__ = [
    "HeadlessHostWindow",
    "HeadlessPopupWindow",
    "LocalMessageChannel",
    "origin_of",
]
