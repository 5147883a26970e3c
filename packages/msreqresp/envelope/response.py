"""Response envelopes answering a request with a status and optional error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from packages.msreqresp.errors import ApplicationError
from packages.msreqresp.guarded import GuardedValue
from packages.msreqresp.logging import emit_debug, fields, get_logger
from packages.msreqresp.status import Status

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ResponseCore:
    """Fields a response fixes at construction."""

    client_id: str | None
    transaction_id: str | None
    status: Status | None
    message: str | None = None


class ResponseEnvelope:
    """Outcome of one request, correlated by its client and transaction ids.

    ``client_id``, ``transaction_id``, ``status`` and ``message`` never change
    after construction; build a new response to report a new status. The
    ``error`` may be attached or replaced later: concurrent ``attach_error``
    calls resolve as last-writer-wins. Prefer ``with_error`` where the
    envelope may already be shared.

    Construction performs no validation; run ``validate`` for that.
    """

    __slots__ = ("_core", "_error")

    def __init__(
        self,
        client_id: str | None,
        transaction_id: str | None,
        status: Status | None,
        message: str | None = None,
        error: ApplicationError | None = None,
    ) -> None:
        self._core = ResponseCore(
            client_id=client_id,
            transaction_id=transaction_id,
            status=status,
            message=message,
        )
        self._error: GuardedValue[ApplicationError | None] = GuardedValue(error)

    @property
    def core(self) -> ResponseCore:
        return self._core

    @property
    def client_id(self) -> str | None:
        return self._core.client_id

    @property
    def transaction_id(self) -> str | None:
        return self._core.transaction_id

    @property
    def status(self) -> Status | None:
        return self._core.status

    @property
    def message(self) -> str | None:
        return self._core.message

    @property
    def error(self) -> ApplicationError | None:
        return self._error.get()

    @property
    def has_error(self) -> bool:
        """Return ``True`` when an error is attached."""
        return self.error is not None

    def attach_error(self, error: ApplicationError | None) -> None:
        """Attach or replace the error; ``None`` detaches it."""
        self._error.set(error)

    def with_error(self, error: ApplicationError | None) -> ResponseEnvelope:
        """Return a plain response carrying ``error``; this one is unchanged."""
        return ResponseEnvelope(
            self.client_id,
            self.transaction_id,
            self.status,
            message=self.message,
            error=error,
        )

    def describe(self, logger: Any | None = None) -> None:
        """Write one DEBUG line with correlation ids, status and error."""
        emit_debug(logger or _LOGGER, "Response", self._describe_fields)

    def _describe_fields(self) -> dict[str, object]:
        error = self.error
        status = self.status
        return {
            fields.EVENT: fields.RESPONSE_DESCRIBED_EVENT,
            fields.CLIENT_ID: self.client_id,
            fields.TRANSACTION_ID: self.transaction_id,
            fields.STATUS: status.name if isinstance(status, Status) else status,
            fields.RESPONSE_MESSAGE: self.message,
            fields.ERROR_CODE: getattr(getattr(error, "code", None), "code", None),
            fields.ERROR_DESCRIPTION: getattr(error, "description", None),
            fields.NATIVE_TEXT: getattr(error, "native_text", None),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseEnvelope):
            return NotImplemented
        return (self._core, self.error) == (other._core, other.error)

    # Responses carry a mutable error and are therefore unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(client_id={self.client_id!r}, "
            f"transaction_id={self.transaction_id!r}, status={self.status!r}, "
            f"message={self.message!r}, error={self.error!r})"
        )


class GuaranteedErrorResponse(ResponseEnvelope):
    """Failure response whose ``message`` and ``error`` are mandatory.

    The requirement is declared by the signature only. A ``None`` or blank
    value is accepted here and reported by ``validate``.
    """

    __slots__ = ()

    def __init__(
        self,
        client_id: str | None,
        transaction_id: str | None,
        status: Status | None,
        message: str,
        error: ApplicationError,
    ) -> None:
        super().__init__(
            client_id,
            transaction_id,
            status,
            message=message,
            error=error,
        )
