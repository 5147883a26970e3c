"""Public logging API for services sharing the envelope contract.

This package wraps Python's ``logging`` module with stdout emission and
correlation context propagation.
"""

from .config import ContextFilter, JsonFormatter, PlainFormatter, configure_logging, get_logger
from .context import (
    bind_context,
    clear_context,
    correlation_context,
    get_context,
    log_context,
)
from .describe import emit_debug

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_logging",
    "correlation_context",
    "emit_debug",
    "get_context",
    "get_logger",
    "log_context",
]
