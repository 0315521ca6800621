from __future__ import annotations

from typing import Optional


class MemStatsError(Exception):
    """Base exception for memstats-specific errors."""

    def __init__(self, message: str, *, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail


class ConfigError(MemStatsError):
    """Raised when configuration is invalid or incomplete."""


class MetricNameError(MemStatsError):
    """Raised when a metric name contains a segment that is not a non-empty string."""
