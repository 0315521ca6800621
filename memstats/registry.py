"""In-memory stats registry, mostly used for testing instrumentation.

Names are tuples of segments and are never conflated by how they print:
``("a", "b", "foo")`` and ``("a/b", "foo")`` are separate entries even though
both render as ``a/b/foo``.

    registry = InMemoryStatsRegistry()
    registry.counter("a", "b", "foo").incr()
    registry.counter("a/b", "bar")
    registry.print()  # "a/b/bar 0" and "a/b/foo 1"
    assert registry.counters[("a", "b", "foo")] == 1
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO

from loguru import logger

from memstats import formatting, histogram
from memstats.config import MemStatsSettings, get_settings
from memstats.handles import Gauge, ReadableCounter, ReadableStat
from memstats.histogram import HistogramDetail
from memstats.schema import MetricSchema, NameLike, Verbosity, as_name, display_key
from memstats.store import ConcurrentStore, SampleWindowStore

GaugeFn = Callable[[], float]

# Read value of a gauge whose mapping has been removed.
REMOVED_GAUGE_VALUE = -0.0


class InMemoryStatsRegistry:
    """Counters, gauges and stats held in four independently locked stores.

    ``max_stats <= 0`` retains every sample of a stat; otherwise only the
    ``max_stats`` most recent ones are kept.
    """

    def __init__(self, max_stats: int = 0, *, include_headers: bool = False) -> None:
        self.max_stats = max_stats
        self.include_headers = include_headers
        self.counters: ConcurrentStore[int] = ConcurrentStore()
        self.gauges: ConcurrentStore[GaugeFn] = ConcurrentStore()
        self.stats = SampleWindowStore(max_stats)
        self.verbosity: ConcurrentStore[Verbosity] = ConcurrentStore()

    @classmethod
    def from_settings(cls, settings: Optional[MemStatsSettings] = None) -> "InMemoryStatsRegistry":
        if settings is None:
            settings = get_settings()
        return cls(settings.max_stats, include_headers=settings.include_headers)

    def counter(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> ReadableCounter:
        return self.counter_from_schema(MetricSchema.of(*name, verbosity=verbosity))

    def counter_from_schema(self, schema: MetricSchema) -> ReadableCounter:
        self.verbosity.put(schema.name, schema.verbosity)
        self.counters.put_if_absent(schema.name, 0)
        logger.debug("Registered counter {}", schema.display_key)
        return ReadableCounter(schema, self)

    def stat(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> ReadableStat:
        return self.stat_from_schema(MetricSchema.of(*name, verbosity=verbosity))

    def stat_from_schema(self, schema: MetricSchema) -> ReadableStat:
        self.verbosity.put(schema.name, schema.verbosity)
        self.stats.ensure(schema.name)
        logger.debug("Registered stat {}", schema.display_key)
        return ReadableStat(schema, self)

    def add_gauge(self, *name: str, fn: GaugeFn, verbosity: Verbosity = Verbosity.DEFAULT) -> Gauge:
        return self.add_gauge_from_schema(MetricSchema.of(*name, verbosity=verbosity), fn)

    def add_gauge_from_schema(self, schema: MetricSchema, fn: GaugeFn) -> Gauge:
        self.gauges.put(schema.name, fn)
        self.verbosity.put(schema.name, schema.verbosity)
        logger.debug("Registered gauge {}", schema.display_key)
        return Gauge(schema, self)

    def gauge_value(self, name: NameLike) -> float:
        fn = self.gauges.get(as_name(name))
        if fn is None:
            return REMOVED_GAUGE_VALUE
        return fn()

    def remove_gauge(self, name: NameLike) -> None:
        if self.gauges.remove(as_name(name)) is not None:
            logger.debug("Removed gauge {}", display_key(as_name(name)))

    def render(self, include_headers: Optional[bool] = None) -> str:
        if include_headers is None:
            include_headers = self.include_headers
        return formatting.render(
            self.counters.snapshot(),
            self.gauges.snapshot(),
            self.stats.snapshot(),
            include_headers=include_headers,
        )

    def print(self, stream: Optional[TextIO] = None, include_headers: Optional[bool] = None) -> None:
        """Dump every counter, gauge and non-empty stat to ``stream`` (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.render(include_headers))

    def histogram_details(self) -> Dict[str, HistogramDetail]:
        return histogram.histogram_details(self.stats.snapshot())

    def clear(self) -> None:
        """Clear counters, stats and gauges; verbosity is kept.

        Not atomic: metrics registered while this runs may survive.
        """
        self.counters.clear()
        self.stats.clear()
        self.gauges.clear()
        logger.debug("Cleared in-memory stats")

    def __str__(self) -> str:
        return "InMemoryStatsRegistry"


def new_registry(max_stats: int = 0) -> InMemoryStatsRegistry:
    return InMemoryStatsRegistry(max_stats)
