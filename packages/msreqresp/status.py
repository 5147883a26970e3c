"""Closed lifecycle/outcome status shared by every response envelope."""

from __future__ import annotations

from enum import Enum
from typing import Any

from packages.msreqresp.logging import emit_debug, fields, get_logger

_LOGGER = get_logger(__name__)


class Status(str, Enum):
    """Outcome of the operation a response answers.

    Every value belongs to exactly one class: in-progress (``PENDING``,
    ``PROCESSING``), success (``SUCCESS``, ``COMPLETED``) or failure (the
    rest). Values serialize as their upper-case names.

    ``TIMEOUT`` and ``CANCELLED`` are labels only; the timeout or cancellation
    logic that justifies them runs in the caller.
    """

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    ERROR = "ERROR"
    TIMEOUT = "TIMEOUT"
    ABORTED = "ABORTED"

    @classmethod
    def in_progress_values(cls) -> frozenset[Status]:
        return _IN_PROGRESS

    @classmethod
    def success_values(cls) -> frozenset[Status]:
        return _SUCCESS

    @classmethod
    def failure_values(cls) -> frozenset[Status]:
        return _FAILURE

    @property
    def is_in_progress(self) -> bool:
        """Return ``True`` while the operation has not reached an outcome."""
        return self in _IN_PROGRESS

    @property
    def is_success(self) -> bool:
        return self in _SUCCESS

    @property
    def is_failure(self) -> bool:
        return self in _FAILURE

    @property
    def is_final(self) -> bool:
        """Return ``True`` once no further status change is expected."""
        return not self.is_in_progress

    def describe(self, logger: Any | None = None) -> str:
        """Log this status at DEBUG and return its name."""
        emit_debug(
            logger or _LOGGER,
            "Status",
            lambda: {
                fields.EVENT: fields.STATUS_DESCRIBED_EVENT,
                fields.STATUS: self.name,
            },
        )
        return self.name


_IN_PROGRESS = frozenset({Status.PENDING, Status.PROCESSING})
_SUCCESS = frozenset({Status.SUCCESS, Status.COMPLETED})
_FAILURE = frozenset(
    {Status.FAILURE, Status.ERROR, Status.TIMEOUT, Status.CANCELLED, Status.ABORTED}
)
