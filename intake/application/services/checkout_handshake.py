"""Checkout handshake: drive an external payment popup to exactly one outcome.

A PopupSession is one checkout attempt and owns its window handle, poll
timer and message listener. It moves idle -> open -> resolved; resolved is
terminal and every later event for that session is a no-op. Three triggers
can resolve an open session, whichever is observed first on the event loop:

- a success message from the host's own origin (outcome CheckoutSuccess),
- a cancelled message from the host's own origin (CheckoutCancelled),
- a poll tick that finds the window closed (CheckoutSilentClose).

A bare closure is reported only as "no longer open": no success or cancel
callback fires for it, because the only way to learn why the window closed
is the message it posts first.

CheckoutHandshake is the long-lived owner (one per host component). It
creates a fresh session per open(), releases the previous one first, and
maps outcomes to the on_success / on_cancel / on_error callbacks. Each
session also exposes `result`, a future that settles exactly once.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from intake.application.dtos.checkout import (
    CheckoutCancelled,
    CheckoutResult,
    CheckoutSilentClose,
    CheckoutSuccess,
    MessageEvent,
)
from intake.application.interfaces.checkout import (
    IHostWindow,
    IMessageChannel,
    IPopupWindow,
)
from intake.application.services.checkout_callback import (
    message_type,
    popup_window_name,
)
from intake.core.config import get_settings
from intake.domain.enums import CallbackStatus, PaymentSource, SessionState
from intake.domain.exceptions import (
    InvalidSessionStateException,
    PopupBlockedException,
    ValidationException,
)

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[CheckoutSuccess], None]
CancelCallback = Callable[[], None]
ErrorCallback = Callable[[str], None]
ResolvedCallback = Callable[["PopupSession", CheckoutResult], None]


def _payment_source(source: PaymentSource | str) -> PaymentSource:
    try:
        return PaymentSource(source)
    except ValueError as e:
        raise ValidationException(
            f"Unknown payment source: {source!r}", field="source"
        ) from e


def _px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def popup_features(host: IHostWindow, width: int, height: int) -> str:
    """Window features for a popup of the given size centred on the host window."""
    left = host.screen_x + (host.outer_width - width) / 2
    top = host.screen_y + (host.outer_height - height) / 2
    return (
        f"width={width},height={height},left={_px(left)},top={_px(top)},"
        "toolbar=no,menubar=no"
    )


class PopupSession:
    """State machine for one checkout popup.

    Must be created while an event loop is running; the poll timer and the
    result future belong to that loop.
    """

    def __init__(
        self,
        source: PaymentSource | str,
        host: IHostWindow,
        channel: IMessageChannel,
        *,
        namespace: str,
        poll_interval: float,
        on_resolved: ResolvedCallback | None = None,
    ) -> None:
        self.source = _payment_source(source)
        self.state = SessionState.IDLE
        self.window: IPopupWindow | None = None
        self._host = host
        self._channel = channel
        self._namespace = namespace
        self._poll_interval = poll_interval
        self._on_resolved = on_resolved
        self._loop = asyncio.get_running_loop()
        self._poll_handle: asyncio.TimerHandle | None = None
        self._listening = False
        self._success_type = message_type(namespace, self.source, CallbackStatus.SUCCESS)
        self._cancelled_type = message_type(
            namespace, self.source, CallbackStatus.CANCELLED
        )
        self.result: asyncio.Future[CheckoutResult] = self._loop.create_future()

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN

    def open(self, checkout_url: str, *, width: int, height: int) -> bool:
        """Open the popup. Returns False (state stays idle) when it was blocked.

        Raises:
            InvalidSessionStateException: If the session is not idle.
        """
        if self.state is not SessionState.IDLE:
            raise InvalidSessionStateException("open", self.state.value)
        window = self._host.open_window(
            checkout_url,
            popup_window_name(self._namespace),
            popup_features(self._host, width, height),
        )
        if window is None:
            return False
        self.window = window
        self.state = SessionState.OPEN
        self._channel.add_listener(self._handle_message)
        self._listening = True
        self._schedule_poll()
        return True

    def teardown(self) -> None:
        """Stop the poll timer and remove the listener. Safe to call repeatedly.

        An open session becomes resolved with CheckoutSilentClose, the same
        "no result known" outcome as a bare closure. No callback fires.
        """
        self._release()
        if self.state is SessionState.OPEN:
            self.state = SessionState.RESOLVED
            if not self.result.done():
                self.result.set_result(CheckoutSilentClose())

    def _handle_message(self, event: MessageEvent) -> None:
        if self.state is not SessionState.OPEN:
            return
        if event.origin != self._host.origin:
            logger.debug("Dropped checkout message from origin %s", event.origin)
            return
        data: Mapping[str, Any] = event.data if isinstance(event.data, Mapping) else {}
        kind = data.get("type")
        if kind == self._success_type:
            self._resolve(
                CheckoutSuccess(
                    tracker=data.get("tracker"),
                    reference=data.get("reference"),
                    signature=data.get("signature"),
                )
            )
        elif kind == self._cancelled_type:
            self._resolve(CheckoutCancelled())

    def _schedule_poll(self) -> None:
        self._poll_handle = self._loop.call_later(self._poll_interval, self._poll)

    def _poll(self) -> None:
        self._poll_handle = None
        if self.state is not SessionState.OPEN:
            return
        if self.window is not None and self.window.closed:
            self._resolve(CheckoutSilentClose())
            return
        self._schedule_poll()

    def _resolve(self, outcome: CheckoutResult) -> None:
        self.state = SessionState.RESOLVED
        self._release()
        if not self.result.done():
            self.result.set_result(outcome)
        if self._on_resolved is not None:
            self._on_resolved(self, outcome)

    def _release(self) -> None:
        if self._poll_handle is not None:
            self._poll_handle.cancel()
            self._poll_handle = None
        if self._listening:
            self._channel.remove_listener(self._handle_message)
            self._listening = False


class CheckoutHandshake:
    """Owns checkout popup sessions for one payment source.

    Example:
        handshake = CheckoutHandshake(
            PaymentSource.SERVICE, host, channel,
            on_success=lambda result: confirm(result.tracker),
            on_cancel=lambda: notify("Payment cancelled"),
        )
        outcome = await handshake.checkout(checkout_url)
    """

    def __init__(
        self,
        source: PaymentSource | str,
        host: IHostWindow,
        channel: IMessageChannel,
        *,
        on_success: SuccessCallback | None = None,
        on_cancel: CancelCallback | None = None,
        on_error: ErrorCallback | None = None,
        namespace: str | None = None,
        popup_width: int | None = None,
        popup_height: int | None = None,
        poll_interval: float | None = None,
    ) -> None:
        settings = get_settings()
        self.source = _payment_source(source)
        self._host = host
        self._channel = channel
        self._on_success = on_success
        self._on_cancel = on_cancel
        self._on_error = on_error
        self._namespace = namespace or settings.checkout_namespace
        self._width = popup_width or settings.checkout_popup_width
        self._height = popup_height or settings.checkout_popup_height
        self._poll_interval = poll_interval or settings.checkout_poll_interval_seconds
        self._session: PopupSession | None = None

    @property
    def session(self) -> PopupSession | None:
        """Most recent session (None before the first open)."""
        return self._session

    @property
    def is_open(self) -> bool:
        return self._session is not None and self._session.is_open

    def open(self, checkout_url: str) -> PopupSession | None:
        """Open a checkout popup for checkout_url in a fresh session.

        Any previous session is torn down first. When the popup is blocked,
        on_error fires synchronously and None is returned; calling open
        again retries.
        """
        self.teardown()
        session = PopupSession(
            self.source,
            self._host,
            self._channel,
            namespace=self._namespace,
            poll_interval=self._poll_interval,
            on_resolved=self._dispatch,
        )
        self._session = session
        if not session.open(checkout_url, width=self._width, height=self._height):
            logger.warning("Checkout popup blocked (source=%s)", self.source.value)
            if self._on_error is not None:
                self._on_error(PopupBlockedException.MESSAGE)
            return None
        logger.info("Checkout popup opened (source=%s)", self.source.value)
        return session

    async def checkout(self, checkout_url: str) -> CheckoutResult:
        """Open a popup and wait for its single outcome.

        Returns CheckoutSilentClose when the popup closes without a message
        or the handshake is torn down while waiting.

        Raises:
            PopupBlockedException: If the popup could not be opened.
        """
        session = self.open(checkout_url)
        if session is None:
            raise PopupBlockedException(self.source.value)
        return await session.result

    def teardown(self) -> None:
        """Release the current session's timer and listener. Idempotent."""
        if self._session is not None:
            self._session.teardown()

    def __enter__(self) -> "CheckoutHandshake":
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object) -> None:
        self.teardown()

    def _dispatch(self, session: PopupSession, outcome: CheckoutResult) -> None:
        if isinstance(outcome, CheckoutSuccess):
            logger.info("Checkout succeeded (source=%s)", session.source.value)
            if self._on_success is not None:
                self._on_success(outcome)
        elif isinstance(outcome, CheckoutCancelled):
            logger.info("Checkout cancelled (source=%s)", session.source.value)
            if self._on_cancel is not None:
                self._on_cancel()
        else:
            logger.info(
                "Checkout popup closed without a result (source=%s)",
                session.source.value,
            )
