"""Integer-bucket histograms summarized from raw stat samples."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from memstats.schema import Name, display_key

INT_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class BucketAndCount:
    lower_limit: int
    upper_limit: int
    count: int


@dataclass(slots=True)
class HistogramDetail:
    counts: List[BucketAndCount] = field(default_factory=list)


def bucket_for(value: float) -> int:
    # NaN compares false against both bounds; it lands in bucket 0.
    if math.isnan(value) or value < 0:
        return 0
    if value >= INT_MAX:
        return INT_MAX - 1
    return math.floor(value)


def summarize(samples: Iterable[float]) -> HistogramDetail:
    tally = Counter(bucket_for(value) for value in samples)
    return HistogramDetail(
        counts=[BucketAndCount(bucket, bucket + 1, count) for bucket, count in sorted(tally.items())]
    )


def histogram_details(stats: Sequence[Tuple[Name, Sequence[float]]]) -> Dict[str, HistogramDetail]:
    """Summarize every series, keyed by display key.

    Names that flatten to the same display key share one entry; the later
    series in ``stats`` wins.
    """
    return {display_key(name): summarize(samples) for name, samples in stats}
