"""Synchronized name-keyed stores backing the registry.

Each store owns a single lock covering every name it holds. Writers of
different names contend on the same lock; single-key reads go straight to
the underlying dict.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Mapping
from typing import Callable, Deque, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from memstats.schema import Name, NameLike, as_name

V = TypeVar("V")


class ConcurrentStore(Mapping, Generic[V]):
    """Read-only mapping view over a lock-guarded dict of ``Name -> V``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[Name, V] = {}

    def __getitem__(self, key: NameLike) -> V:
        return self._entries[as_name(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, tuple, list)):
            return False
        return as_name(key) in self._entries

    def __iter__(self) -> Iterator[Name]:
        with self._lock:
            keys = list(self._entries)
        return iter(keys)

    def __len__(self) -> int:
        return len(self._entries)

    def put(self, name: Name, value: V) -> None:
        with self._lock:
            self._entries[name] = value

    def put_if_absent(self, name: Name, value: V) -> V:
        with self._lock:
            return self._entries.setdefault(name, value)

    def compute(self, name: Name, fn: Callable[[V], V], default: V) -> V:
        with self._lock:
            updated = fn(self._entries.get(name, default))
            self._entries[name] = updated
            return updated

    def remove(self, name: Name) -> Optional[V]:
        with self._lock:
            return self._entries.pop(name, None)

    def snapshot(self) -> List[Tuple[Name, V]]:
        with self._lock:
            return list(self._entries.items())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class SampleWindowStore(ConcurrentStore):
    """Store of sampled series, each retained as a sliding window.

    ``max_stats <= 0`` keeps every sample. Windows are mutated in place, so
    reads copy them into tuples under the store lock.
    """

    def __init__(self, max_stats: int = 0) -> None:
        super().__init__()
        self.max_stats = max_stats

    def _new_window(self) -> Deque[float]:
        if self.max_stats > 0:
            return deque(maxlen=self.max_stats)
        return deque()

    def ensure(self, name: Name) -> None:
        with self._lock:
            if name not in self._entries:
                self._entries[name] = self._new_window()

    def append(self, name: Name, value: float) -> None:
        with self._lock:
            window = self._entries.get(name)
            if window is None:
                window = self._entries[name] = self._new_window()
            window.append(float(value))

    def __getitem__(self, key: NameLike) -> Tuple[float, ...]:
        with self._lock:
            return tuple(self._entries[as_name(key)])

    def snapshot(self) -> List[Tuple[Name, Tuple[float, ...]]]:  # type: ignore[override]
        with self._lock:
            return [(name, tuple(window)) for name, window in self._entries.items()]
