"""Canonical error-code types shared across service boundaries.

Every code follows ``<CATEGORY><SCOPE><NNN>``: a three-letter category, a
two-letter scope (``GN`` for codes shared by all services, ``MS`` for codes
owned by one service) and a three-digit sequence number, e.g. ``RESGN001`` or
``USRMS001``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class ErrorCategory(str, Enum):
    """Generic error categories, keyed by their three-letter code prefix."""

    BUSINESS = "BUS"
    PAYMENT = "PAY"
    RESOURCE = "RES"
    SECURITY = "SEC"
    SYSTEM = "SYS"
    VALIDATION = "VAL"


class ErrorScope(str, Enum):
    """Whether a code is shared by all services or owned by one."""

    GENERIC = "GN"
    SERVICE_SPECIFIC = "MS"


@runtime_checkable
class ErrorCode(Protocol):
    """Stable machine identifier paired with a human description.

    Both members are required and non-blank; that requirement is enforced by
    the validation pass, never at construction.
    """

    @property
    def code(self) -> str: ...

    @property
    def description(self) -> str: ...


@dataclass(frozen=True)
class ServiceErrorCode:
    """Custom error code defined by one service outside the shared catalog.

    Use ``<SERVICE>MS<NNN>`` codes (see ``service_error_code``). Blank values
    are accepted here and reported by ``validate``.
    """

    code: str
    description: str
