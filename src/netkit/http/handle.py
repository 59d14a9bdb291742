"""Cancellable handles for in-flight requests."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Optional

from .protocols import CancelToken
from .result import Result

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Result], None]

_PENDING = "pending"
_DELIVERED = "delivered"
_CANCELLED = "cancelled"


class RequestHandle:
    """
    Caller-owned handle for one in-flight request.

    The handle decides the race between delivery and cancellation: the
    first of complete() and cancel() wins, so the completion callback runs
    at most once and never after a successful cancel.

    Example:
        handle = client.get("https://api.example.com/items", on_complete=print)
        if handle is not None:
            handle.cancel()
    """

    def __init__(self, on_complete: CompletionCallback):
        self._id = uuid.uuid4().hex
        self._on_complete = on_complete
        self._token: Optional[CancelToken] = None
        self._state = _PENDING
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        """Identifier of this request, fixed at creation."""
        return self._id

    @property
    def cancelled(self) -> bool:
        return self._state == _CANCELLED

    @property
    def done(self) -> bool:
        """True once the request was either delivered or cancelled."""
        return self._state != _PENDING

    def attach(self, token: CancelToken) -> None:
        """Bind the transport token that aborts the underlying exchange."""
        with self._lock:
            self._token = token
            cancel_now = self._state == _CANCELLED
        if cancel_now:
            token.cancel()

    def complete(self, result: Result) -> None:
        """Deliver the result unless the handle was cancelled or already delivered."""
        with self._lock:
            if self._state != _PENDING:
                return
            self._state = _DELIVERED
        self._on_complete(result)

    def cancel(self) -> None:
        """
        Abort the request.

        The completion callback will not be invoked afterwards. If the
        result was already delivered this does nothing.
        """
        with self._lock:
            if self._state != _PENDING:
                return
            self._state = _CANCELLED
            token = self._token
        logger.debug(f"Cancelled request {self._id}")
        if token is not None:
            token.cancel()

    def __repr__(self) -> str:
        return f"RequestHandle(id={self._id!r}, state={self._state!r})"
