"""Ports for the environment a checkout handshake runs in.

The host window, the popup it opens, and the cross-document message channel
are external collaborators. A browser bridge or the headless implementation
in intake.infrastructure.checkout fulfills them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from intake.application.dtos.checkout import MessageEvent

MessageListener = Callable[["MessageEvent"], None]


class IPopupWindow(Protocol):
    """Handle to a window opened by the host."""

    @property
    def closed(self) -> bool:
        """True once the window has been closed (by the user or itself)."""


class IHostWindow(Protocol):
    """The page that starts checkout: its origin, geometry and window.open."""

    @property
    def origin(self) -> str:
        """Origin of the host page (scheme://host[:port])."""

    @property
    def screen_x(self) -> float: ...

    @property
    def screen_y(self) -> float: ...

    @property
    def outer_width(self) -> float: ...

    @property
    def outer_height(self) -> float: ...

    def open_window(self, url: str, name: str, features: str) -> IPopupWindow | None:
        """Open a top-level window; None when creation failed (e.g. popup blocker)."""


class IMessageChannel(Protocol):
    """Global message events delivered to the host page."""

    def add_listener(self, listener: MessageListener) -> None: ...

    def remove_listener(self, listener: MessageListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
