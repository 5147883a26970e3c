"""Correlation context propagation for structured logging.

A ``contextvars`` mapping carries the correlation identifiers of the request
currently being handled, so every log line emitted while handling it carries
``client_id`` and ``transaction_id`` without the caller repeating them.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

from . import fields

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "msreqresp_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a shallow copy of current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current logging context.

    Values are stringified; ``None`` values are skipped.
    """
    current = _LOG_CONTEXT.get().copy()
    for key, value in values.items():
        if value is None:
            continue
        current[str(key)] = str(value)
    _LOG_CONTEXT.set(current)


def clear_context(*keys: str) -> None:
    """Clear selected keys or the entire logging context."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    current = _LOG_CONTEXT.get().copy()
    for key in keys:
        current.pop(key, None)
    _LOG_CONTEXT.set(current)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Temporarily bind logging context for the duration of a block."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


@contextmanager
def correlation_context(envelope: object) -> Iterator[None]:
    """Bind the correlation identifiers of ``envelope`` for a block.

    Any object exposing ``client_id`` and ``transaction_id`` works, so both
    requests and responses can scope the logs of the code handling them.
    """
    values = {
        fields.CLIENT_ID: getattr(envelope, "client_id", None),
        fields.TRANSACTION_ID: getattr(envelope, "transaction_id", None),
    }
    with log_context(values):
        yield
