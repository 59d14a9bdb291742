"""Shared fixtures for netkit tests."""

from __future__ import annotations

import pytest
from netkit.http.protocols import TransportOutcome
from netkit.http.request import WireRequest


class StubToken:
    """Cancel token recording whether it was cancelled."""

    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class StubTransport:
    """
    Transport that records requests and defers delivery.

    Outcomes queued with respond() are returned by send(); submitted
    exchanges wait until the test calls deliver().
    """

    def __init__(self) -> None:
        self.requests: list[WireRequest] = []
        self.pending: list[tuple[WireRequest, object, StubToken]] = []
        self.outcomes: list[TransportOutcome] = []

    def respond(self, body=None, status_code=None, error=None) -> None:
        self.outcomes.append(TransportOutcome(body=body, status_code=status_code, error=error))

    def submit(self, request, on_outcome):
        self.requests.append(request)
        token = StubToken()
        self.pending.append((request, on_outcome, token))
        return token

    async def send(self, request):
        self.requests.append(request)
        return self.outcomes.pop(0)

    def deliver(self, body=None, status_code=None, error=None) -> None:
        """Report an outcome for the oldest pending exchange, even if cancelled."""
        _, on_outcome, _ = self.pending.pop(0)
        on_outcome(TransportOutcome(body=body, status_code=status_code, error=error))


@pytest.fixture
def transport():
    """Deferring stub transport."""
    return StubTransport()
