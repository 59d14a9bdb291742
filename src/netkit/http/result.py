"""Classified results produced from transport outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import HTTPError, InvalidDataError


@dataclass(frozen=True)
class Success:
    """
    The exchange completed with a 1xx/2xx/3xx status.

    Attributes:
        payload: Response body; None means the response had no content
    """

    payload: bytes | None

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> bytes | None:
        """Return the payload."""
        return self.payload


@dataclass(frozen=True)
class Failure:
    """
    The exchange failed.

    Attributes:
        error: The classified error kind
    """

    error: HTTPError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> bytes | None:
        """Raise the carried error."""
        raise self.error


Result = Union[Success, Failure]


def reject_empty_body(result: Result) -> Result:
    """
    Treat a success without content as an invalid-data failure.

    Applied after classification by clients configured to reject empty
    bodies. Failures and non-empty successes pass through unchanged.
    """
    if isinstance(result, Success) and not result.payload:
        return Failure(InvalidDataError())
    return result
