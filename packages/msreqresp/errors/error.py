"""Structured error payload carried by response envelopes."""

from __future__ import annotations

from dataclasses import dataclass

from packages.msreqresp.guarded import GuardedValue

from .types import ErrorCode


def code_key(code: ErrorCode | None) -> tuple[object, object] | None:
    """Return the value identity of an error code.

    Catalog members and ``ServiceErrorCode`` instances carrying the same
    ``(code, description)`` pair compare equal through this key.
    """
    if code is None:
        return None
    return (getattr(code, "code", None), getattr(code, "description", None))


@dataclass(frozen=True)
class ErrorIdentity:
    """Immutable identity of one failure occurrence."""

    description: str
    code: ErrorCode

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorIdentity):
            return NotImplemented
        return (self.description, code_key(self.code)) == (
            other.description,
            code_key(other.code),
        )

    def __hash__(self) -> int:
        return hash((self.description, code_key(self.code)))


class ApplicationError:
    """Error reported by a service: description, catalog code, native text.

    ``description`` and ``code`` are fixed at construction. ``native_text``
    holds diagnostic context (a stack summary, a driver message...) and may be
    attached or replaced later while the error propagates up a call chain.

    Equality and hashing cover all three fields as they are at comparison
    time, so two errors stop being equal once their native texts diverge. Do
    not mutate an error while it sits in a set or serves as a dict key.

    Nothing is validated here; run ``validate`` to check the contract.
    """

    __slots__ = ("_identity", "_native_text")

    def __init__(
        self,
        description: str,
        code: ErrorCode,
        native_text: str | None = None,
    ) -> None:
        self._identity = ErrorIdentity(description=description, code=code)
        self._native_text: GuardedValue[str | None] = GuardedValue(native_text)

    @property
    def identity(self) -> ErrorIdentity:
        return self._identity

    @property
    def description(self) -> str:
        return self._identity.description

    @property
    def code(self) -> ErrorCode:
        return self._identity.code

    @property
    def native_text(self) -> str | None:
        return self._native_text.get()

    def attach_native_text(self, text: str | None) -> None:
        """Replace the native diagnostic text; ``None`` clears it."""
        self._native_text.set(text)

    def with_native_text(self, text: str | None) -> ApplicationError:
        """Return a copy carrying ``text`` without mutating this error."""
        return ApplicationError(self.description, self.code, text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicationError):
            return NotImplemented
        return (self._identity, self.native_text) == (other._identity, other.native_text)

    def __hash__(self) -> int:
        return hash((self._identity, self.native_text))

    def __repr__(self) -> str:
        return (
            f"ApplicationError(description={self.description!r}, "
            f"code={getattr(self.code, 'code', self.code)!r}, "
            f"native_text={self.native_text!r})"
        )
