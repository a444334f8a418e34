"""Array-backed binary heaps ordered by a comparison function."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

__all__ = ["BinaryHeap", "MinHeap", "MaxHeap"]

T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """Binary heap where ``compare(a, b)`` is true when ``a`` belongs below ``b``.

    With the default ``operator.lt`` the largest value is on top.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        compare: Callable[[Any, Any], bool] = operator.lt,
    ) -> None:
        self._compare = compare
        self._data: list[T] = []
        for item in items:
            self.push(item)

    def push(self, value: T) -> None:
        """Add ``value`` and restore the heap order."""
        data = self._data
        data.append(value)
        cur = len(data) - 1
        while cur > 0:
            parent = (cur - 1) // 2
            if not self._compare(data[parent], data[cur]):
                break
            data[parent], data[cur] = data[cur], data[parent]
            cur = parent

    def pop(self) -> T:
        """Remove and return the value on top."""
        data = self._data
        if not data:
            raise IndexError("Heap is empty")
        data[0], data[-1] = data[-1], data[0]
        value = data.pop()
        length = len(data)
        cur = 0
        while 2 * cur + 1 < length:
            child = 2 * cur + 1
            if child + 1 < length and self._compare(data[child], data[child + 1]):
                child += 1
            if not self._compare(data[cur], data[child]):
                break
            data[cur], data[child] = data[child], data[cur]
            cur = child
        return value

    def top(self) -> T:
        """The value on top, left in place."""
        if not self._data:
            raise IndexError("Heap is empty")
        return self._data[0]

    def merge(self, other: BinaryHeap[T]) -> None:
        """Move every value of ``other`` into this heap, leaving ``other`` empty."""
        if other is self:
            return
        for value in other._data:
            self.push(value)
        other._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        """Values in heap array order, top first."""
        return iter(list(self._data))

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class MinHeap(BinaryHeap[T]):
    """Heap with the smallest value on top."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__(items, operator.gt)


class MaxHeap(BinaryHeap[T]):
    """Heap with the largest value on top."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__(items, operator.lt)