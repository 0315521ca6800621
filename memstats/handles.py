from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from memstats.formatting import format_samples
from memstats.schema import MetricSchema

if TYPE_CHECKING:
    from memstats.registry import InMemoryStatsRegistry


@dataclass(slots=True, eq=False, repr=False)
class ReadableCounter:
    """Counter bound to one name; the value lives in the registry."""

    schema: MetricSchema
    registry: "InMemoryStatsRegistry"

    def incr(self, delta: int = 1) -> None:
        self.registry.counters.compute(self.schema.name, lambda old: old + int(delta), 0)

    def read(self) -> int:
        return self.registry.counters.get(self.schema.name, 0)

    def __repr__(self) -> str:
        return f"Counter({self.schema.display_key}={self.read()})"


@dataclass(slots=True, eq=False, repr=False)
class ReadableStat:
    """Sampled series bound to one name."""

    schema: MetricSchema
    registry: "InMemoryStatsRegistry"

    def add(self, value: float) -> None:
        self.registry.stats.append(self.schema.name, value)

    def read(self) -> Tuple[float, ...]:
        return self.registry.stats.get(self.schema.name, ())

    def __repr__(self) -> str:
        return f"Stat({self.schema.display_key}={format_samples(self.read())})"


@dataclass(slots=True, eq=False, repr=False)
class Gauge:
    """Handle to an installed gauge callback.

    The callback itself is only held by the registry, so removing the gauge
    releases it.
    """

    schema: MetricSchema
    registry: "InMemoryStatsRegistry"

    def read(self) -> float:
        return self.registry.gauge_value(self.schema.name)

    def remove(self) -> None:
        self.registry.remove_gauge(self.schema.name)

    def __repr__(self) -> str:
        return f"Gauge({self.schema.display_key}={self.read()})"
