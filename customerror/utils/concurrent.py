"""
Lock-guarded associative container shared by the template store, catalogs and
error fields.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ConcurrentDict(Generic[K, V]):
    """
    Thread-safe dictionary.

    Every operation takes the instance lock; iteration works on a snapshot so
    writers never invalidate a running loop. There is no multi-key atomicity.
    """

    def __init__(self, initial: Optional[Mapping[K, V]] = None):
        self._lock = threading.Lock()
        self._data: Dict[K, V] = dict(initial or {})

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def setdefault(self, key: K, value: V) -> V:
        with self._lock:
            return self._data.setdefault(key, value)

    def delete(self, key: K) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def update(self, other: Mapping[K, V]) -> None:
        with self._lock:
            self._data.update(other)

    def snapshot(self) -> Dict[K, V]:
        with self._lock:
            return dict(self._data)

    def items(self) -> Iterator[Tuple[K, V]]:
        return iter(self.snapshot().items())

    def keys(self) -> Iterator[K]:
        return iter(self.snapshot().keys())

    def copy(self) -> "ConcurrentDict[K, V]":
        return ConcurrentDict(self.snapshot())

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"ConcurrentDict({self.snapshot()!r})"
