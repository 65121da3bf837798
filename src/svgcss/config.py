from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from svgcss.errors import ConfigError

DEFAULT_DPI = 96

ENV_DPI = "SVGCSS_DPI"
ENV_LOG_LEVEL = "SVGCSS_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CssConfig:
    dpi: int = DEFAULT_DPI
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.dpi, bool) or not isinstance(self.dpi, int) or self.dpi <= 0:
            raise ConfigError(f"DPI must be a positive integer, got {self.dpi!r}", key="dpi")
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}", key="log_level")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CssConfig:
        """Build a config from ``SVGCSS_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        raw_dpi = env.get(ENV_DPI, "").strip()
        if raw_dpi:
            try:
                kwargs["dpi"] = int(raw_dpi)
            except ValueError:
                raise ConfigError(
                    f"{ENV_DPI} must be an integer, got {raw_dpi!r}", key="dpi"
                ) from None
        raw_level = env.get(ENV_LOG_LEVEL, "").strip()
        if raw_level:
            kwargs["log_level"] = raw_level
        return cls(**kwargs)  # type: ignore[arg-type]

    def configure_logging(self) -> None:
        """Install a basic stderr handler at the configured level."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(levelname)s %(name)s: %(message)s",
        )
