"""Mapping of raw transport outcomes onto classified results."""

from __future__ import annotations

from .errors import ClientStatusError, InvalidResponseError, ServerStatusError, UnknownError
from .result import Failure, Result, Success


def _is_valid_status(status_code: object) -> bool:
    # bool is an int subclass but never a status line
    return (
        isinstance(status_code, int)
        and not isinstance(status_code, bool)
        and 100 <= status_code <= 599
    )


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


def classify(
    body: bytes | None,
    status_code: int | None,
    error: BaseException | None,
) -> Result:
    """
    Classify one transport outcome.

    The first matching rule wins:
    1. A transport error yields UnknownError, whatever the status.
    2. A missing or out-of-range status yields InvalidResponseError.
    3. 4xx yields ClientStatusError, 5xx yields ServerStatusError.
       An empty body is reported as None in both.
    4. Anything else is a Success carrying the body unchanged.

    Args:
        body: Response bytes, if any
        status_code: HTTP status code, or None when no HTTP exchange happened
        error: Transport-level failure, if any

    Returns:
        Success or Failure
    """
    if error is not None:
        return Failure(UnknownError(_error_message(error)))

    if not _is_valid_status(status_code):
        return Failure(InvalidResponseError())
    assert status_code is not None

    if 400 <= status_code <= 499:
        return Failure(ClientStatusError(status_code, body or None))
    if 500 <= status_code <= 599:
        return Failure(ServerStatusError(status_code, body or None))

    return Success(body)
