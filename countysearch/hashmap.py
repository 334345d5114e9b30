"""A separately chained hash map with prime capacities and load-factor growth."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

LOAD_FACTOR_THRESHOLD = 0.75
DEFAULT_CAPACITY = 101


def _is_prime(number: int) -> bool:
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def _next_prime(current_capacity: int) -> int:
    """Return the first prime at or above ``2 * current_capacity + 1``, stepping by two."""
    candidate = current_capacity * 2 + 1
    while not _is_prime(candidate):
        candidate += 2
    return candidate


@dataclass(frozen=True)
class HashMapStats:
    """A snapshot of a map's bucket usage."""

    capacity: int
    num_elements: int
    load_factor: float
    average_chain_length: float
    longest_chain: int
    empty_buckets: int


class HashMap(Generic[K, V]):
    """Hash map that keeps colliding entries in per-bucket chains."""

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("Capacity must be positive.")
        self._buckets: list[list[list[Any]]] = [
            [] for _ in range(_next_prime(initial_capacity))
        ]
        self._count = 0

    def _bucket_for(self, key: K) -> list[list[Any]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def _find(self, key: K) -> list[Any] | None:
        return next((entry for entry in self._bucket_for(key) if entry[0] == key), None)

    def _resize_and_rehash(self) -> None:
        new_capacity = _next_prime(len(self._buckets))
        new_buckets: list[list[list[Any]]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[hash(entry[0]) % new_capacity].append(entry)
        self._buckets = new_buckets

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if self._count / len(self._buckets) > LOAD_FACTOR_THRESHOLD:
            self._resize_and_rehash()
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
            return
        self._bucket_for(key).append([key, value])
        self._count += 1

    def search(self, key: K) -> V | None:
        """Return the value stored under ``key``, or None when it is absent."""
        entry = self._find(key)
        return None if entry is None else entry[1]

    def remove(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket_for(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._count -= 1
                return True
        return False

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def clear(self) -> None:
        """Drop every entry, keeping the current capacity."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def capacity(self) -> int:
        """Return the number of buckets."""
        return len(self._buckets)

    def stats(self) -> HashMapStats:
        """Return bucket statistics for the map."""
        capacity = len(self._buckets)
        chain_lengths = [len(bucket) for bucket in self._buckets]
        return HashMapStats(
            capacity=capacity,
            num_elements=self._count,
            load_factor=self._count / capacity,
            average_chain_length=sum(chain_lengths) / capacity,
            longest_chain=max(chain_lengths, default=0),
            empty_buckets=chain_lengths.count(0),
        )

    def format_stats(self) -> str:
        """Return the statistics as a human-readable report."""
        stats = self.stats()
        return "\n".join(
            [
                "HashMap Statistics:",
                f"  Current Capacity: {stats.capacity}",
                f"  Number of Elements: {stats.num_elements}",
                f"  Load Factor: {stats.load_factor:g}",
                f"  Average Chain Length: {stats.average_chain_length:g}",
                f"  Longest Chain Length: {stats.longest_chain}",
                f"  Number of Empty Buckets: {stats.empty_buckets}",
            ]
        )