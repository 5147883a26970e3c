"""Public validation API: the only place the contract is enforced."""

from .validate import (
    MUST_NOT_BE_BLANK,
    MUST_NOT_BE_NULL,
    ContractValidator,
    require_valid,
    validate,
)
from .violations import ContractViolationError, Violation

__all__ = [
    "MUST_NOT_BE_BLANK",
    "MUST_NOT_BE_NULL",
    "ContractValidator",
    "ContractViolationError",
    "Violation",
    "require_valid",
    "validate",
]
