"""A linked stack, a growable array with explicit capacity, and a raw block."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["LinkedStack", "DynamicArray", "Block"]

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: _Node[T] | None


class LinkedStack(Generic[T]):
    """Last-in first-out stack built from linked nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._top: _Node[T] | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """The top value, left in place."""
        if self._top is None:
            raise IndexError("Stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __iter__(self) -> Iterator[T]:
        """Values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next


class DynamicArray(Generic[T]):
    """Growable array that tracks its capacity and doubles it when full."""

    def __init__(self, items: Iterable[T] = (), default: Any = None) -> None:
        self._default = default
        self._slots: list[Any] = []
        self._size = 0
        for item in items:
            self.append(item)

    def _grow_to(self, capacity: int) -> None:
        self._slots.extend([self._default] * (capacity - len(self._slots)))

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("Index out of range")

    def append(self, value: T) -> None:
        """Add ``value`` at the end, doubling the capacity when it is used up."""
        if self._size == len(self._slots):
            self._grow_to(max(1, 2 * len(self._slots)))
        self._slots[self._size] = value
        self._size += 1

    def erase(self, index: int) -> None:
        """Remove the element at ``index``, shifting later ones down."""
        self._check(index)
        del self._slots[index]
        self._slots.append(self._default)
        self._size -= 1

    def resize(self, new_size: int) -> None:
        """Change the length; growing past the capacity sets it to twice ``new_size``."""
        if new_size < 0:
            raise ValueError("size must be non-negative")
        if new_size > len(self._slots):
            self._grow_to(2 * new_size)
        self._size = new_size

    def capacity(self) -> int:
        """Number of elements that fit before the storage must grow."""
        return len(self._slots)

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._slots[index] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._size])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"


class Block(Generic[T]):
    """Storage block with a used size and a separately tracked allocation."""

    def __init__(self, size: int = 0, default: Any = None) -> None:
        self._default = default
        self._data: list[Any] = []
        self.size = 0
        self.resize(size)

    @property
    def allocated(self) -> int:
        """Number of slots reserved; never shrinks on resize."""
        return len(self._data)

    def _allocate(self, size: int) -> None:
        if size > len(self._data):
            self._data.extend([self._default] * (size - len(self._data)))
        self.size = size

    def resize(self, size: int) -> None:
        """Set the used size, reserving more slots if needed."""
        if size < 0:
            raise ValueError("size must be non-negative")
        self._allocate(size)

    def fill(self, value: T) -> None:
        """Set every used slot to ``value``."""
        self._data[: self.size] = [value] * self.size

    def copy(self, source: Iterable[T]) -> None:
        """Overwrite the first slots with ``source``, growing the size if it is longer."""
        items = list(source)
        if len(items) > self.size:
            self._allocate(len(items))
        self._data[: len(items)] = items

    def multiply(self, factor: int) -> None:
        """Resize to ``factor`` times the current size."""
        self.resize(self.size * factor)

    def extend_by(self, amount: int) -> None:
        """Resize to the current size plus ``amount``."""
        self.resize(self.size + amount)

    def release(self) -> None:
        """Drop all storage."""
        self._data = []
        self.size = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError("Index out of range")

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._data[index] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[: self.size])