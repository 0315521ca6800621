from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

from memstats.schema import Name, display_key

MAX_STATS_VALUES = 3
OMITTED_VALUES_SUFFIX = "... (omitted {} value(s))]"

COUNTERS_HEADER = "Counters:"
GAUGES_HEADER = "Gauges:"
STATS_HEADER = "Stats:"


def format_samples(values: Sequence[float]) -> str:
    """Render a sample list, eliding everything past the first three values."""
    shown = ",".join(str(value) for value in values[:MAX_STATS_VALUES])
    if len(values) <= MAX_STATS_VALUES:
        return f"[{shown}]"
    return "[" + shown + OMITTED_VALUES_SUFFIX.format(len(values) - MAX_STATS_VALUES)


def _sorted_by_key(entries: Iterable[Tuple[Name, object]]) -> List[Tuple[str, object]]:
    return sorted(((display_key(name), value) for name, value in entries), key=lambda item: item[0])


def counter_lines(counters: Iterable[Tuple[Name, int]]) -> List[str]:
    return [f"{key} {value:d}\n" for key, value in _sorted_by_key(counters)]


def gauge_lines(gauges: Iterable[Tuple[Name, Callable[[], float]]]) -> List[str]:
    return [f"{key} {fn():f}\n" for key, fn in _sorted_by_key(gauges)]


def stat_lines(stats: Iterable[Tuple[Name, Sequence[float]]]) -> List[str]:
    lines = []
    for key, samples in _sorted_by_key(stats):
        if not samples:
            continue
        mean = sum(samples) / len(samples)
        lines.append(f"{key} {mean:f} {format_samples(samples)}\n")
    return lines


def render(
    counters: Iterable[Tuple[Name, int]],
    gauges: Iterable[Tuple[Name, Callable[[], float]]],
    stats: Iterable[Tuple[Name, Sequence[float]]],
    include_headers: bool = False,
) -> str:
    sections = [
        (COUNTERS_HEADER, counter_lines(counters)),
        (GAUGES_HEADER, gauge_lines(gauges)),
        (STATS_HEADER, stat_lines(stats)),
    ]
    if not include_headers:
        return "".join(line for _, lines in sections for line in lines)

    blocks = []
    for header, lines in sections:
        if not lines:
            continue
        blocks.append(f"{header}\n{'-' * len(header)}\n" + "".join(lines))
    return "\n".join(blocks)
