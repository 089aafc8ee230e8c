"""A growable sequence that tracks its capacity and can destroy removed elements."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

from .growth import GrowthPolicy, next_capacity

__all__ = ["Vector"]

T = TypeVar("T")

Destructor = Callable[[Any], None]


class Vector(Generic[T]):
    """A sequence with an explicit capacity and an optional element destructor.

    The destructor, if set, is called on every element that leaves the vector
    through :meth:`erase`, :meth:`clear`, :meth:`pop_back`, :meth:`resize` or
    :meth:`free`. When the vector is full, appending or inserting grows the
    capacity according to ``policy``.
    """

    __slots__ = ("_items", "_capacity", "destructor", "policy")

    def __init__(
        self,
        capacity: int = 0,
        destructor: Optional[Destructor] = None,
        policy: GrowthPolicy = GrowthPolicy.LINEAR,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if not isinstance(policy, GrowthPolicy):
            raise TypeError("policy must be a GrowthPolicy")
        self._items: list[T] = []
        self._capacity = capacity
        self.destructor = destructor
        self.policy = policy

    # -- introspection ----------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    # -- internal ---------------------------------------------------------

    def _destroy(self, item: T) -> None:
        if self.destructor is not None:
            self.destructor(item)

    def _grow_if_full(self) -> None:
        if self._capacity <= len(self._items):
            self._capacity = next_capacity(self.policy, self._capacity)

    # -- capacity ---------------------------------------------------------

    def reserve(self, n: int) -> None:
        """Make the capacity at least ``n``."""
        if n < 0:
            raise ValueError("capacity must not be negative")
        if self._capacity < n:
            self._capacity = n

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = len(self._items)

    # -- modification -----------------------------------------------------

    def erase(self, index: int) -> None:
        """Remove the element at ``index``; an index out of range does nothing."""
        if 0 <= index < len(self._items):
            self._destroy(self._items[index])
            del self._items[index]

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        for item in self._items:
            self._destroy(item)
        self._items.clear()

    def push_back(self, value: T) -> None:
        """Append ``value``, growing the capacity if the vector is full."""
        self._grow_if_full()
        self._items.append(value)

    def insert(self, pos: int, value: T) -> None:
        """Insert ``value`` before position ``pos`` (``pos == size`` appends)."""
        if pos < 0 or pos > len(self._items):
            raise IndexError("insert position out of range")
        self._grow_if_full()
        self._items.insert(pos, value)

    def pop_back(self) -> T:
        """Remove the last element and return it."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        self._destroy(self._items[-1])
        return self._items.pop()

    def resize(self, count: int, value: T) -> None:
        """Make the size ``count``, filling with ``value`` or dropping from the back."""
        if count < 0:
            raise ValueError("count must not be negative")
        size = len(self._items)
        if count > size:
            self.reserve(count)
            self._items.extend([value] * (count - size))
        else:
            while len(self._items) > count:
                self.pop_back()

    def free(self) -> None:
        """Destroy every element and release the storage."""
        for item in self._items:
            self._destroy(item)
        self._items = []
        self._capacity = 0

    # -- access -----------------------------------------------------------

    def copy(self) -> "Vector[T]":
        """Return a new vector with the same elements and capacity equal to the size.

        The copy has no destructor.
        """
        result: Vector[T] = Vector(len(self._items), policy=self.policy)
        result._items = list(self._items)
        return result

    def at(self, n: int) -> Optional[T]:
        """Return the element at ``n``, or ``None`` if ``n`` is out of range."""
        if 0 <= n < len(self._items):
            return self._items[n]
        return None

    def front(self) -> Optional[T]:
        """Return the first element, or ``None`` when empty."""
        return self._items[0] if self._items else None

    def back(self) -> Optional[T]:
        """Return the last element, or ``None`` when empty."""
        return self._items[-1] if self._items else None

    def for_each(self, func: Optional[Callable[[T], Any]]) -> None:
        """Call ``func`` on each element in order; ``None`` does nothing."""
        if func is None:
            return
        for item in self._items:
            func(item)