"""A byte buffer with an explicit length and a capacity that grows on demand."""

from __future__ import annotations

from enum import Enum

__all__ = ["GrowthMode", "UBytesError", "UBytes"]


class GrowthMode(Enum):
    """How a buffer grows when a write does not fit."""

    LINEAR = 1
    EXPONENTIAL = 2


class UBytesError(ValueError):
    """Raised when a buffer operation gets bad sizes or does not fit."""


class UBytes:
    """A byte buffer whose used length is tracked apart from its capacity."""

    __slots__ = ("_data", "_length")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise UBytesError("capacity must not be negative")
        self._data = bytearray(capacity)
        self._length = 0

    @property
    def data(self) -> bytearray:
        """The whole storage, ``capacity`` bytes long."""
        return self._data

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def length(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        """Bytes of capacity beyond the used length."""
        return self.capacity - self._length

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self._data[: self._length])

    def __repr__(self) -> str:
        return f"UBytes(length={self._length}, capacity={self.capacity})"

    def grow(self, size: int) -> None:
        """Add ``size`` bytes of capacity, keeping the contents."""
        if size <= 0:
            raise UBytesError("grow size must be positive")
        self._data.extend(bytes(size))

    @staticmethod
    def _check_source(source: bytes) -> bytes:
        if source is None:
            raise TypeError("source must be a bytes-like object")
        source = bytes(source)
        if not source:
            raise UBytesError("source must not be empty")
        return source

    def write(self, source: bytes, offset: int = 0) -> None:
        """Copy ``source`` in at ``offset``; the length becomes its end."""
        source = self._check_source(source)
        if offset < 0:
            raise UBytesError("offset must not be negative")
        end = offset + len(source)
        if end > self.capacity:
            raise UBytesError("write exceeds the buffer capacity")
        self._data[offset:end] = source
        self._length = end

    def append(self, source: bytes) -> None:
        """Copy ``source`` after the used length, growing exactly as needed."""
        source = self._check_source(source)
        needed = self._length + len(source)
        if needed > self.capacity:
            self.grow(needed - self.capacity)
        self._data[self._length : needed] = source
        self._length = needed

    def write_autogrow(
        self, source: bytes, offset: int = 0, mode: GrowthMode = GrowthMode.LINEAR
    ) -> None:
        """Write like :meth:`write`, growing the capacity first if it is short."""
        source = self._check_source(source)
        if offset < 0:
            raise UBytesError("offset must not be negative")
        required = offset + len(source)
        if required > self.capacity:
            if mode is GrowthMode.EXPONENTIAL:
                new_capacity = self.capacity or 1
                while new_capacity < required:
                    new_capacity *= 2
            else:
                new_capacity = required
            self.grow(new_capacity - self.capacity)
        self.write(source, offset)

    def set_length(self, new_length: int) -> None:
        """Set the used length, which may not exceed the capacity."""
        if new_length < 0 or new_length > self.capacity:
            raise UBytesError("length must lie within the capacity")
        self._length = new_length

    def increase_length(self, amount: int) -> None:
        """Extend the used length by ``amount`` within the capacity."""
        if amount < 0 or self._length + amount > self.capacity:
            raise UBytesError("length must lie within the capacity")
        self._length += amount

    def has_remaining(self) -> bool:
        """Return whether the capacity exceeds the used length."""
        return self.capacity > self._length