"""Error types raised around the (total) matching and resolution core."""

from __future__ import annotations


class SvgCssError(Exception):
    """Base error for all svgcss errors."""


class ConfigError(SvgCssError):
    """Raised when configuration values are missing or invalid."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
