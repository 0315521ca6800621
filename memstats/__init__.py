from __future__ import annotations

from loguru import logger

from .exceptions import ConfigError, MemStatsError, MetricNameError
from .handles import Gauge, ReadableCounter, ReadableStat
from .histogram import BucketAndCount, HistogramDetail
from .logging_config import configure_logging
from .registry import InMemoryStatsRegistry, new_registry
from .schema import MetricSchema, Name, Verbosity

__all__ = [
    "__version__",
    "BucketAndCount",
    "ConfigError",
    "Gauge",
    "HistogramDetail",
    "InMemoryStatsRegistry",
    "MemStatsError",
    "MetricNameError",
    "MetricSchema",
    "Name",
    "ReadableCounter",
    "ReadableStat",
    "Verbosity",
    "configure_logging",
    "new_registry",
]

__version__ = "0.1.0"

logger.disable("memstats")
