"""A bucketed, lock-per-bucket accumulator keyed by integers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

_UINT64 = 1 << 64


@dataclass
class _Bucket:
    lock: threading.Lock = field(default_factory=threading.Lock)
    values: dict[int, float] = field(default_factory=dict)


class ConcurrentMap:
    """Thread-safe mapping from integer keys to summed numeric values."""

    def __init__(self, bucket_count: int) -> None:
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self._buckets = [_Bucket() for _ in range(bucket_count)]

    def _bucket(self, key: int) -> _Bucket:
        if not isinstance(key, int):
            raise TypeError("ConcurrentMap supports only integer keys")
        return self._buckets[(key % _UINT64) % len(self._buckets)]

    def add(self, key: int, value: float) -> None:
        """Add ``value`` to the entry for ``key``, creating it at zero if absent."""
        bucket = self._bucket(key)
        with bucket.lock:
            bucket.values[key] = bucket.values.get(key, 0) + value

    def erase(self, key: int) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        with bucket.lock:
            bucket.values.pop(key, None)

    def build_ordinary_map(self) -> dict[int, float]:
        """Return a plain dict of all entries, ordered by key."""
        merged: dict[int, float] = {}
        for bucket in self._buckets:
            with bucket.lock:
                merged.update(bucket.values)
        return dict(sorted(merged.items()))