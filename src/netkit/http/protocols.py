"""Protocol definitions for the transport collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .request import WireRequest


@dataclass(frozen=True)
class TransportOutcome:
    """
    Raw result of one exchange as reported by a transport.

    Attributes:
        body: Response bytes, if any were received
        status_code: HTTP status code, or None when no HTTP exchange happened
        error: Transport-level failure (DNS, connection refused, timeout)
    """

    body: Optional[bytes] = None
    status_code: Optional[int] = None
    error: Optional[BaseException] = None


OutcomeCallback = Callable[[TransportOutcome], None]


class CancelToken(Protocol):
    """Aborts an exchange previously submitted to a transport."""

    def cancel(self) -> None:
        """
        Abort the exchange.

        After cancel() the transport must not report an outcome for it.
        Cancelling a finished exchange does nothing.
        """
        ...


class Transport(Protocol):
    """
    Protocol for network transports.

    This abstraction allows for:
    - Stub implementations in tests
    - Different backends (aiohttp, httpx, etc.)
    - Keeping request building and classification independent of the network stack
    """

    def submit(self, request: WireRequest, on_outcome: OutcomeCallback) -> CancelToken:
        """
        Start an exchange and report its outcome later.

        Args:
            request: The request to execute
            on_outcome: Called exactly once with the outcome unless cancelled

        Returns:
            Token that aborts the exchange
        """
        ...

    async def send(self, request: WireRequest) -> TransportOutcome:
        """
        Execute an exchange and wait for its outcome.

        Args:
            request: The request to execute

        Returns:
            TransportOutcome; transport failures are reported in its error field
        """
        ...
