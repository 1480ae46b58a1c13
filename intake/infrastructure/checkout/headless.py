"""Headless checkout environment: host window, popups and message channel on asyncio.

Mirrors the browser pieces the checkout handshake relies on, for tests and
for embeddings without a real browser:

- messages are delivered asynchronously (next loop iteration), never inline;
- a popup posting to its opener is dropped unless the target origin matches;
- window.open with a name that is already open reuses that window.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from intake.application.dtos.checkout import MessageEvent
from intake.application.interfaces.checkout import MessageListener
from intake.application.services.checkout_callback import build_callback_message
from intake.core.config import get_settings

logger = logging.getLogger(__name__)


def origin_of(url: str) -> str:
    """scheme://host[:port] of a URL."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


class LocalMessageChannel:
    """Message events for one host window, dispatched on the running loop."""

    def __init__(self) -> None:
        self._listeners: list[MessageListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: MessageListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MessageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def post_message(self, data: Any, origin: str) -> None:
        """Queue a message for delivery on the next loop iteration."""
        asyncio.get_running_loop().call_soon(self._deliver, MessageEvent(origin, data))

    def _deliver(self, event: MessageEvent) -> None:
        for listener in list(self._listeners):
            # Listeners removed by an earlier listener in this dispatch are skipped.
            if listener in self._listeners:
                listener(event)


class HeadlessPopupWindow:
    """A popup opened by a HeadlessHostWindow."""

    def __init__(self, opener: HeadlessHostWindow, url: str, name: str, features: str) -> None:
        self.opener = opener
        self.name = name
        self.features = features
        self.url = url
        self.origin = origin_of(url)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def navigate(self, url: str) -> None:
        self.url = url
        self.origin = origin_of(url)

    def post_to_opener(self, data: Any, target_origin: str) -> None:
        """postMessage to the opener; dropped when target_origin does not match it."""
        if self._closed:
            return
        if target_origin not in ("*", self.opener.origin):
            logger.debug(
                "Popup message for %s not delivered to opener %s",
                target_origin,
                self.opener.origin,
            )
            return
        self.opener.channel.post_message(data, origin=self.origin)

    def complete(
        self,
        params: Mapping[str, str | None],
        *,
        namespace: str | None = None,
        close_delay: float | None = None,
    ) -> dict[str, Any]:
        """Act as the provider redirecting to the host's callback page.

        Navigates to the opener's callback URL, posts the callback message to
        the opener with its own origin, then closes after close_delay seconds.

        Returns:
            The posted message.
        """
        settings = get_settings()
        message = build_callback_message(
            namespace or settings.checkout_namespace, params
        )
        self.navigate(f"{self.opener.origin}/payment-callback")
        self.post_to_opener(message, self.origin)
        delay = (
            settings.checkout_callback_close_delay_seconds
            if close_delay is None
            else close_delay
        )
        asyncio.get_running_loop().call_later(delay, self.close)
        return message


class HeadlessHostWindow:
    """Host page: origin, screen geometry, message channel and window.open."""

    def __init__(
        self,
        origin: str,
        *,
        channel: LocalMessageChannel | None = None,
        screen_x: float = 0,
        screen_y: float = 0,
        outer_width: float = 1280,
        outer_height: float = 800,
        block_popups: bool = False,
    ) -> None:
        self.origin = origin
        self.channel = channel or LocalMessageChannel()
        self.screen_x = screen_x
        self.screen_y = screen_y
        self.outer_width = outer_width
        self.outer_height = outer_height
        self.block_popups = block_popups
        self.popups: list[HeadlessPopupWindow] = []

    def open_window(self, url: str, name: str, features: str) -> HeadlessPopupWindow | None:
        if self.block_popups:
            return None
        for popup in self.popups:
            if popup.name == name and not popup.closed:
                popup.navigate(url)
                popup.features = features
                return popup
        popup = HeadlessPopupWindow(self, url, name, features)
        self.popups.append(popup)
        return popup
