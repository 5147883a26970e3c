"""Shared error code catalog and prefix-based classification.

These codes are domain-agnostic and intended for stable machine-readable
handling across services. The catalog is additive only: a published code is
never reassigned. Service-specific codes are defined locally in each service
with ``service_error_code`` instead of being added here for one domain.

Classification is derived from the fixed code prefix alone and never raises,
even for malformed or non-string codes. Routing logic should call
``category_of``/``scope_of`` rather than slicing strings itself::

    if category_of(error.code.code) is ErrorCategory.SECURITY:
        ...
"""

from __future__ import annotations

import re
from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping

from .types import ErrorCategory, ErrorScope, ServiceErrorCode

CODE_PATTERN = re.compile(r"^(?P<category>[A-Z]{3})(?P<scope>GN|MS)(?P<number>\d{3})$")
_SERVICE_PATTERN = re.compile(r"^[A-Z]{3}$")


@unique
class StandardErrorCode(Enum):
    """Pre-defined error codes shared by all services."""

    # Business logic (BUSGN###)
    BUSINESS_RULE_VIOLATION = ("BUSGN001", "The operation violates a business rule constraint")
    BUSINESS_INVALID_OPERATION_STATE = (
        "BUSGN002",
        "The operation cannot be performed in the current state",
    )

    # Payment (PAYGN###)
    PAYMENT_INSUFFICIENT_FUNDS = ("PAYGN001", "Insufficient funds to complete the operation")

    # Resource management (RESGN###)
    RESOURCE_NOT_FOUND = ("RESGN001", "The requested resource could not be found")
    RESOURCE_UNAVAILABLE = ("RESGN002", "The requested resource is temporarily unavailable")
    RESOURCE_CONFLICT = ("RESGN003", "The operation conflicts with the current resource state")
    RESOURCE_QUOTA_EXCEEDED = ("RESGN004", "Usage quota has been exceeded")
    RESOURCE_RATE_LIMIT_EXCEEDED = ("RESGN005", "Too many requests - please try again later")

    # Security (SECGN###)
    SECURITY_UNAUTHORIZED_ACCESS = ("SECGN001", "Access denied - authentication required")
    SECURITY_FORBIDDEN_OPERATION = ("SECGN002", "Access denied - insufficient permissions")
    SECURITY_INVALID_CREDENTIALS = ("SECGN003", "The provided credentials are not valid")
    SECURITY_SESSION_EXPIRED = ("SECGN004", "Your session has expired - please login again")

    # System (SYSGN###)
    SYSTEM_INTERNAL_SERVER_ERROR = ("SYSGN001", "An unexpected error occurred")
    SYSTEM_SERVICE_UNAVAILABLE = ("SYSGN002", "The service is temporarily unavailable")
    SYSTEM_DATABASE_ERROR = ("SYSGN003", "A database operation failed")
    SYSTEM_EXTERNAL_SERVICE_ERROR = ("SYSGN004", "An external service returned an error")
    SYSTEM_CONFIGURATION_ERROR = ("SYSGN005", "A system configuration error was detected")

    # Validation (VALGN###)
    VALIDATION_REQUIRED_FIELD = ("VALGN001", "A required field is missing or empty")
    VALIDATION_INVALID_FORMAT = ("VALGN002", "The provided value format is not valid")
    VALIDATION_OUT_OF_RANGE = ("VALGN003", "The provided value is outside the acceptable range")
    VALIDATION_DUPLICATE_VALUE = (
        "VALGN004",
        "The provided value already exists and must be unique",
    )
    VALIDATION_INVALID_FILE_FORMAT = ("VALGN005", "The uploaded file format is not supported")
    VALIDATION_FILE_TOO_LARGE = ("VALGN006", "The uploaded file exceeds the maximum size limit")
    VALIDATION_DATA_CORRUPTION = ("VALGN007", "Data corruption was detected")

    # User management service (USRMS###)
    USER_MANAGEMENT_ACCOUNT_EXISTS = (
        "USRMS001",
        "Cannot create user account because one already exists",
    )

    def __init__(self, code: str, description: str) -> None:
        self.code = code
        self.description = description

    @property
    def category(self) -> ErrorCategory | None:
        return category_of(self.code)

    @property
    def scope(self) -> ErrorScope | None:
        return scope_of(self.code)

    @classmethod
    def from_code(cls, code: str) -> StandardErrorCode:
        """Return the catalog member for ``code``.

        Raises ``KeyError`` when the code is not part of the catalog.
        """
        return _BY_CODE[code]

    @classmethod
    def by_category(cls, category: ErrorCategory) -> list[StandardErrorCode]:
        """Return catalog members of one generic category in code order."""
        return sorted(
            (member for member in cls if member.category is category),
            key=lambda member: member.code,
        )

    def __str__(self) -> str:
        return self.code


_BY_CODE: Mapping[str, StandardErrorCode] = MappingProxyType(
    {member.code: member for member in StandardErrorCode}
)


def category_prefix(code: str) -> str | None:
    """Return the three-letter category prefix of ``code``.

    Non-string codes have no prefix and return ``None``.
    """
    if not isinstance(code, str):
        return None
    return code[:3]


def category_of(code: str) -> ErrorCategory | None:
    """Return the generic category of ``code``.

    Service-specific codes (``USRMS001``) and malformed codes return ``None``.
    """
    if scope_of(code) is not ErrorScope.GENERIC:
        return None
    try:
        return ErrorCategory(category_prefix(code))
    except ValueError:
        return None


def scope_of(code: str) -> ErrorScope | None:
    """Return the scope encoded in characters four and five of ``code``."""
    if not isinstance(code, str):
        return None
    try:
        return ErrorScope(code[3:5])
    except ValueError:
        return None


def is_generic(code: str) -> bool:
    return scope_of(code) is ErrorScope.GENERIC


def is_service_specific(code: str) -> bool:
    return scope_of(code) is ErrorScope.SERVICE_SPECIFIC


def follows_convention(code: str) -> bool:
    """Return ``True`` when ``code`` matches ``<CATEGORY><GN|MS><NNN>``.

    Generic codes must also name a known category.
    """
    if not isinstance(code, str):
        return False
    match = CODE_PATTERN.match(code)
    if match is None:
        return False
    if match.group("scope") == ErrorScope.GENERIC.value:
        return category_of(code) is not None
    return True


def service_error_code(service: str, number: int, description: str) -> ServiceErrorCode:
    """Build a ``<SERVICE>MS<NNN>`` code owned by one service.

    ``service`` is the three-letter service prefix (``USR``, ``ORD``...).
    """
    prefix = service.strip().upper()
    if not _SERVICE_PATTERN.match(prefix):
        raise ValueError(f"service prefix must be three letters, got {service!r}")
    if not 1 <= number <= 999:
        raise ValueError(f"service error number must be within 1..999, got {number}")
    return ServiceErrorCode(
        code=f"{prefix}{ErrorScope.SERVICE_SPECIFIC.value}{number:03d}",
        description=description,
    )
