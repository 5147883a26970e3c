"""Public API for shared configuration utilities."""

from .loader import configure_from_settings, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    LoggingSettings,
    MsReqRespSettings,
    ValidationSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "MsReqRespSettings",
    "ValidationSettings",
    "configure_from_settings",
    "load_settings",
]
