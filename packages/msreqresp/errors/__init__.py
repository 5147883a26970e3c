"""Public shared error API: error codes, the catalog and error payloads."""

from .codes import (
    CODE_PATTERN,
    StandardErrorCode,
    category_of,
    category_prefix,
    follows_convention,
    is_generic,
    is_service_specific,
    scope_of,
    service_error_code,
)
from .error import ApplicationError, ErrorIdentity
from .factories import (
    business_error,
    payment_error,
    resource_error,
    security_error,
    service_error,
    system_error,
    validation_error,
)
from .normalize import exception_to_error, status_for_error
from .types import ErrorCategory, ErrorCode, ErrorScope, ServiceErrorCode

__all__ = [
    "CODE_PATTERN",
    "ApplicationError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorIdentity",
    "ErrorScope",
    "ServiceErrorCode",
    "StandardErrorCode",
    "business_error",
    "category_of",
    "category_prefix",
    "exception_to_error",
    "follows_convention",
    "is_generic",
    "is_service_specific",
    "payment_error",
    "resource_error",
    "scope_of",
    "security_error",
    "service_error",
    "service_error_code",
    "status_for_error",
    "system_error",
    "validation_error",
]
