"""
Error taxonomy for HTTP client operations.

Every failure the client can report is one of the classes below. The
taxonomy is flat: each kind derives directly from HTTPError, so callers
can catch HTTPError for anything or a specific kind when they care.
"""

from __future__ import annotations

from typing import Any


class HTTPError(Exception):
    """
    Base exception for all classified HTTP failures.

    Errors compare equal when they are the same kind and carry the same
    fields, which keeps classification results comparable.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def _key(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        assert isinstance(other, HTTPError)
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __reduce__(self) -> tuple[Any, ...]:
        # Subclass constructors differ from Exception.args, rebuild from state
        return (_restore, (type(self), dict(self.__dict__)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(part) for part in self._key())})"


def _restore(cls: type[HTTPError], state: dict[str, Any]) -> HTTPError:
    error = cls.__new__(cls)
    Exception.__init__(error, state.get("message", ""))
    error.__dict__.update(state)
    return error


class InvalidURLError(HTTPError):
    """The URL-like input could not be resolved to an absolute URL."""

    def __init__(self) -> None:
        super().__init__("Invalid URL")


class InvalidResponseError(HTTPError):
    """The transport outcome did not carry a usable HTTP status."""

    def __init__(self) -> None:
        super().__init__("Invalid response")


class InvalidDataError(HTTPError):
    """A successful response had no body while an empty body is rejected."""

    def __init__(self) -> None:
        super().__init__("Invalid data")


class ClientStatusError(HTTPError):
    """
    The server answered with a 4xx status.

    Attributes:
        status_code: HTTP status code (400-499)
        body: Response body, or None when the server sent nothing
    """

    def __init__(self, status_code: int, body: bytes | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code} client error")

    def _key(self) -> tuple[Any, ...]:
        return (self.status_code, self.body)


class ServerStatusError(HTTPError):
    """
    The server answered with a 5xx status.

    Attributes:
        status_code: HTTP status code (500-599)
        body: Response body, or None when the server sent nothing
    """

    def __init__(self, status_code: int, body: bytes | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code} server error")

    def _key(self) -> tuple[Any, ...]:
        return (self.status_code, self.body)


class UnknownError(HTTPError):
    """The transport failed before an HTTP exchange completed (DNS, refused, timeout)."""

    def _key(self) -> tuple[Any, ...]:
        return (self.message,)
