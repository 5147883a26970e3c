"""Convenience constructors for responses answering a request."""

from __future__ import annotations

from packages.msreqresp.errors import ApplicationError
from packages.msreqresp.status import Status

from .request import RequestEnvelope
from .response import GuaranteedErrorResponse, ResponseEnvelope


def respond(
    request: RequestEnvelope,
    status: Status,
    *,
    message: str | None = None,
    error: ApplicationError | None = None,
) -> ResponseEnvelope:
    """Build a response carrying the correlation ids of ``request``."""
    return ResponseEnvelope(
        request.client_id,
        request.transaction_id,
        status,
        message=message,
        error=error,
    )


def success(request: RequestEnvelope, *, message: str | None = None) -> ResponseEnvelope:
    """Build a successful response with no error."""
    return respond(request, Status.SUCCESS, message=message)


def pending(request: RequestEnvelope, *, message: str | None = None) -> ResponseEnvelope:
    """Build a response acknowledging a queued operation."""
    return respond(request, Status.PENDING, message=message)


def failure(
    request: RequestEnvelope,
    error: ApplicationError,
    *,
    status: Status = Status.FAILURE,
    message: str | None = None,
) -> GuaranteedErrorResponse:
    """Build a failed response that always carries a message and an error.

    The message defaults to the error description.
    """
    return GuaranteedErrorResponse(
        request.client_id,
        request.transaction_id,
        status,
        message if message is not None else error.description,
        error,
    )
