"""Settings resolution and application.

The cascade is always:
1) explicit overrides
2) environment variables (``MSREQRESP_`` prefix, ``__`` nesting, e.g.
   ``MSREQRESP_LOGGING__LEVEL=DEBUG``)
3) the YAML config file (``~/.config/msreqresp/msreqresp.yaml`` by default)
4) model defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from packages.msreqresp.logging import configure_logging

from .models import MsReqRespSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> MsReqRespSettings:
    """Resolve settings, optionally reading YAML from ``config_path``."""
    overrides = dict(cli_params or {})
    if config_path is None:
        return MsReqRespSettings(**overrides)
    return _bound_to(Path(config_path))(**overrides)


def configure_from_settings(settings: MsReqRespSettings) -> None:
    """Apply the logging section of ``settings`` to the root logger."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )


def _bound_to(path: Path) -> type[MsReqRespSettings]:
    """Return a settings class reading YAML from ``path``."""

    class _PathBoundSettings(MsReqRespSettings):
        _config_path: ClassVar[Path] = path

    return _PathBoundSettings
