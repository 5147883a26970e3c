"""Exception normalization utilities for shared error contracts."""

from __future__ import annotations

from packages.msreqresp.status import Status

from .codes import StandardErrorCode, category_of
from .error import ApplicationError
from .factories import resource_error, security_error, system_error, validation_error
from .types import ErrorCategory


def exception_to_error(exc: Exception) -> ApplicationError:
    """Normalize a Python exception into a catalog-backed ``ApplicationError``.

    The exception type and message become the native text. This mapping is
    intentionally conservative; services can layer domain-specific
    normalization before falling back to it.
    """
    native_text = _native_text(exc)

    if isinstance(exc, PermissionError):
        return security_error(
            code=StandardErrorCode.SECURITY_FORBIDDEN_OPERATION, native_text=native_text
        )

    if isinstance(exc, TimeoutError):
        return resource_error(
            code=StandardErrorCode.RESOURCE_UNAVAILABLE, native_text=native_text
        )

    if isinstance(exc, ConnectionError):
        return system_error(
            code=StandardErrorCode.SYSTEM_SERVICE_UNAVAILABLE, native_text=native_text
        )

    if isinstance(exc, (ValueError, TypeError)):
        return validation_error(
            code=StandardErrorCode.VALIDATION_INVALID_FORMAT, native_text=native_text
        )

    if isinstance(exc, LookupError):
        return resource_error(
            code=StandardErrorCode.RESOURCE_NOT_FOUND, native_text=native_text
        )

    return system_error(native_text=native_text)


def status_for_error(error: ApplicationError) -> Status:
    """Suggest the failure ``Status`` a response carrying ``error`` should use.

    System faults map to ``ERROR``; everything else (bad input, business
    rules, missing resources, denied access) maps to ``FAILURE``.
    """
    if category_of(getattr(error.code, "code", "") or "") is ErrorCategory.SYSTEM:
        return Status.ERROR
    return Status.FAILURE


def _native_text(exc: Exception) -> str:
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"
