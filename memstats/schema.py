"""Metric names and the metadata attached to them at registration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple, Union

from memstats.exceptions import MetricNameError

Name = Tuple[str, ...]
NameLike = Union[str, Sequence[str]]


class Verbosity(Enum):
    DEFAULT = "default"
    DEBUG = "debug"


def as_name(key: NameLike) -> Name:
    """Coerce a lookup key into a ``Name``.

    A bare string is a single segment; it is never split on ``/``.
    """
    if isinstance(key, str):
        return (key,)
    return tuple(key)


def display_key(name: Iterable[str]) -> str:
    return "/".join(name)


@dataclass(frozen=True, slots=True)
class MetricSchema:
    name: Name
    verbosity: Verbosity = Verbosity.DEFAULT

    def __post_init__(self) -> None:
        segments = tuple(self.name)
        for segment in segments:
            if not isinstance(segment, str) or segment == "":
                raise MetricNameError(
                    f"Invalid metric name segment {segment!r}",
                    detail=display_key(str(s) for s in segments),
                )
        object.__setattr__(self, "name", segments)

    @classmethod
    def of(cls, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> "MetricSchema":
        return cls(name=tuple(name), verbosity=verbosity)

    @property
    def display_key(self) -> str:
        return display_key(self.name)
