"""Shared request/response envelope and error-reporting contract.

Services build a ``RequestEnvelope``, answer it with a ``ResponseEnvelope``
(optionally carrying an ``ApplicationError`` built from a catalog code), and
run ``validate`` before the envelope crosses a service boundary.
"""

from .envelope import (
    GuaranteedErrorResponse,
    RequestEnvelope,
    ResponseEnvelope,
    failure,
    new_request,
    pending,
    respond,
    success,
)
from .errors import (
    ApplicationError,
    ErrorCategory,
    ErrorCode,
    ErrorScope,
    ServiceErrorCode,
    StandardErrorCode,
    exception_to_error,
    service_error_code,
)
from .status import Status
from .validation import (
    ContractValidator,
    ContractViolationError,
    Violation,
    require_valid,
    validate,
)

__all__ = [
    "ApplicationError",
    "ContractValidator",
    "ContractViolationError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorScope",
    "GuaranteedErrorResponse",
    "RequestEnvelope",
    "ResponseEnvelope",
    "ServiceErrorCode",
    "StandardErrorCode",
    "Status",
    "Violation",
    "exception_to_error",
    "failure",
    "new_request",
    "pending",
    "require_valid",
    "respond",
    "service_error_code",
    "success",
    "validate",
]
