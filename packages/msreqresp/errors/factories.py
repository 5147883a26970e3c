"""Factory helpers for creating consistent catalog-backed errors."""

from __future__ import annotations

from .codes import StandardErrorCode, category_of
from .error import ApplicationError
from .types import ErrorCategory, ErrorCode


def business_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.BUSINESS_RULE_VIOLATION,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a business-category error."""
    return _build(code, description, native_text, ErrorCategory.BUSINESS)


def payment_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.PAYMENT_INSUFFICIENT_FUNDS,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a payment-category error."""
    return _build(code, description, native_text, ErrorCategory.PAYMENT)


def resource_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.RESOURCE_NOT_FOUND,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a resource-category error."""
    return _build(code, description, native_text, ErrorCategory.RESOURCE)


def security_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.SECURITY_UNAUTHORIZED_ACCESS,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a security-category error."""
    return _build(code, description, native_text, ErrorCategory.SECURITY)


def system_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.SYSTEM_INTERNAL_SERVER_ERROR,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a system-category error."""
    return _build(code, description, native_text, ErrorCategory.SYSTEM)


def validation_error(
    description: str | None = None,
    *,
    code: StandardErrorCode = StandardErrorCode.VALIDATION_REQUIRED_FIELD,
    native_text: str | None = None,
) -> ApplicationError:
    """Create a validation-category error."""
    return _build(code, description, native_text, ErrorCategory.VALIDATION)


def service_error(
    code: ErrorCode,
    description: str | None = None,
    *,
    native_text: str | None = None,
) -> ApplicationError:
    """Create an error from a service-specific code."""
    return ApplicationError(description or code.description, code, native_text)


def _build(
    code: StandardErrorCode,
    description: str | None,
    native_text: str | None,
    expected: ErrorCategory,
) -> ApplicationError:
    """Build an error, rejecting codes from another category."""
    if category_of(code.code) is not expected:
        raise ValueError(f"{code.code} is not a {expected.name.lower()} error code")
    return ApplicationError(description or code.description, code, native_text)
