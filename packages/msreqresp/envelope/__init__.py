"""Public request/response envelope API."""

from .builders import failure, pending, respond, success
from .request import RequestEnvelope, new_request
from .response import GuaranteedErrorResponse, ResponseCore, ResponseEnvelope

__all__ = [
    "GuaranteedErrorResponse",
    "RequestEnvelope",
    "ResponseCore",
    "ResponseEnvelope",
    "failure",
    "new_request",
    "pending",
    "respond",
    "success",
]
