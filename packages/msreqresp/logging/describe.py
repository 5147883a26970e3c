"""Best-effort DEBUG emission used by every ``describe()`` call."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from . import fields
from .context import log_context


def emit_debug(
    logger: Any,
    message: str,
    build_fields: Callable[[], Mapping[str, object]],
) -> None:
    """Emit one structured DEBUG line and never raise.

    ``build_fields`` is evaluated inside the guard so that rendering a broken
    field value cannot escape either. Values are rendered to text up front; a
    value whose ``__str__`` fails falls back to its ``repr`` and then to a
    placeholder, so the line is still written. ``logger`` only needs a
    ``debug`` method.
    """
    try:
        is_enabled = getattr(logger, "isEnabledFor", None)
        if is_enabled is not None and not is_enabled(logging.DEBUG):
            return
        values = {key: _render(value) for key, value in build_fields().items()}
        with log_context(values):
            logger.debug(message, extra={fields.STRUCTURED: values})
    except Exception:  # noqa: BLE001
        # Logging must never break a request/response path.
        return


def _render(value: object) -> str | None:
    if value is None or isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        pass
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"
