"""Constraint violation records reported by the validation pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Violation:
    """One field failing its declared constraint.

    ``field_path`` uses wire field names joined by dots, e.g. ``clientId`` or
    ``error.code.description``.
    """

    field_path: str
    message: str

    def __str__(self) -> str:
        return f"{self.field_path}: {self.message}"


class ContractViolationError(ValueError):
    """Raised by ``require_valid`` when a target has violations."""

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        super().__init__("; ".join(str(item) for item in self.violations))

    @property
    def field_paths(self) -> list[str]:
        return [item.field_path for item in self.violations]
