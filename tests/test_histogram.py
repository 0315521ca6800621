from __future__ import annotations

import math

import pytest

from memstats.histogram import INT_MAX, BucketAndCount, bucket_for, histogram_details, summarize


@pytest.mark.parametrize(
    ("value", "bucket"),
    [
        (0.2, 0),
        (1.9, 1),
        (1.0, 1),
        (-3.0, 0),
        (-0.5, 0),
        (float("nan"), 0),
        (2_147_483_650.0, INT_MAX - 1),
        (float(INT_MAX), INT_MAX - 1),
        (math.inf, INT_MAX - 1),
        (2_147_483_645.5, 2_147_483_645),
    ],
)
def test_bucket_for(value: float, bucket: int) -> None:
    assert bucket_for(value) == bucket


def test_summarize_groups_and_sorts() -> None:
    detail = summarize([0.2, 1.9, 1.1, -3.0, 2_147_483_650.0])
    assert detail.counts == [
        BucketAndCount(0, 1, 2),
        BucketAndCount(1, 2, 2),
        BucketAndCount(INT_MAX - 1, INT_MAX, 1),
    ]


def test_summarize_empty() -> None:
    assert summarize([]).counts == []


def test_histogram_details_keyed_by_display_key() -> None:
    details = histogram_details([(("a", "b"), (5.5,)), (("c",), ())])
    assert set(details) == {"a/b", "c"}
    assert details["a/b"].counts == [BucketAndCount(5, 6, 1)]
    assert details["c"].counts == []


def test_histogram_details_is_a_fresh_snapshot() -> None:
    from memstats import new_registry

    registry = new_registry()
    stat = registry.stat("s")
    stat.add(1.0)
    first = registry.histogram_details()
    stat.add(1.5)
    assert first["s"].counts == [BucketAndCount(1, 2, 1)]
    assert registry.histogram_details()["s"].counts == [BucketAndCount(1, 2, 2)]
