"""Frequency counting, value lookup, random lists and LSD radix sorting."""

from __future__ import annotations

import random
import time
from collections import Counter
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

__all__ = [
    "Tally",
    "most_common",
    "find_positions",
    "count_unordered",
    "fill_random",
    "lsd_radix_sort",
    "auto_lsd_sort",
]

T = TypeVar("T", bound=Hashable)

_RAND_MAX = 0x7FFF


class Tally(Generic[T]):
    """Multiset counter mapping each item to how often it was added."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._counts: dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: T, times: int = 1) -> None:
        """Count ``item`` ``times`` more times."""
        self._counts[item] = self._counts.get(item, 0) + times

    def remove(self, item: T, times: int = 1) -> None:
        """Count ``item`` ``times`` fewer times, dropping it when none are left."""
        current = self._counts.get(item)
        if current is None:
            return
        if current > times:
            self._counts[item] = current - times
        else:
            del self._counts[item]

    def count(self, item: T) -> int:
        """How many times ``item`` is counted; zero if absent."""
        return self._counts.get(item, 0)

    def total(self) -> int:
        """Sum of all counts."""
        return sum(self._counts.values())

    def most(self) -> T:
        """One of the items with the highest count."""
        if not self._counts:
            raise ValueError("tally is empty")
        return max(self._counts, key=self._counts.__getitem__)

    def most_repeat(self) -> list[T]:
        """Every item sharing the highest count."""
        if not self._counts:
            return []
        best = max(self._counts.values())
        return [item for item, n in self._counts.items() if n == best]

    def keys(self) -> list[T]:
        """All distinct items."""
        return list(self._counts)

    def merge(self, other: Tally[T]) -> None:
        """Add every count of ``other`` into this tally."""
        for item, n in other._counts.items():
            self.add(item, n)

    def clear(self) -> None:
        """Forget every item."""
        self._counts.clear()

    def format(self) -> str:
        """One ``item count`` line per distinct item."""
        return "".join(f"{item} {n}\n" for item, n in self._counts.items())

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[T]:
        return iter(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def __str__(self) -> str:
        return self.format()


def most_common(values: Iterable[T]) -> set[T]:
    """Set of the values that occur most often."""
    counts = Counter(values)
    if not counts:
        return set()
    best = max(counts.values())
    return {value for value, n in counts.items() if n == best}


def find_positions(haystack: list[int], needles: Iterable[int]) -> list[tuple[int, int]]:
    """First and last index in ``haystack`` of each needle, needles in ascending order.

    A needle missing from ``haystack`` gives ``(0, 0)``.
    """
    spans: dict[int, tuple[int, int]] = {}
    for index, value in enumerate(haystack):
        first, _ = spans.get(value, (index, index))
        spans[value] = (first, index)
    return [spans.get(needle, (0, 0)) for needle in sorted(needles)]


def count_unordered(values: Iterable[T]) -> list[tuple[T, int]]:
    """Pairs of each distinct value and its number of occurrences."""
    return list(Counter(values).items())


def fill_random(size: int, seed: int | None = None) -> list[int]:
    """``size`` pseudo-random integers in ``[0, 0x7FFF]``; seeded from the clock by default."""
    if size < 0:
        raise ValueError("size must be non-negative")
    rng = random.Random(int(time.time()) | 19491001 if seed is None else seed)
    return [rng.randint(0, _RAND_MAX) for _ in range(size)]


def _check_non_negative(values: list[int]) -> None:
    if any(v < 0 for v in values):
        raise ValueError("radix sort needs non-negative integers")


def _radix_passes(values: list[int], positions: Iterable[int]) -> list[int]:
    result = list(values)
    for position in positions:
        divisor = 10**position
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // divisor) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
    return result


def lsd_radix_sort(values: Iterable[int], digits: int) -> list[int]:
    """Stable bucket passes on the tens digit up to the ``10**digits`` digit.

    The units digit takes no part: ``[1, 3, 73, 889, 951]`` with one pass
    becomes ``[1, 3, 951, 73, 889]``.
    """
    items = list(values)
    _check_non_negative(items)
    return _radix_passes(items, range(1, digits + 1))


def auto_lsd_sort(values: Iterable[int]) -> list[int]:
    """Values sorted ascending by LSD radix passes over every decimal digit."""
    items = list(values)
    _check_non_negative(items)
    width = max((len(str(v)) for v in items), default=0)
    return _radix_passes(items, range(width))