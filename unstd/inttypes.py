"""Fixed-width integer types and their value limits."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "IntType",
    "is_signed",
    "unsigned_maximum",
    "signed_maximum",
    "signed_minimum",
]


class IntType(Enum):
    """A fixed-width integer type, described by its bit width and signedness."""

    U8 = (8, False)
    S8 = (8, True)
    U16 = (16, False)
    S16 = (16, True)
    U32 = (32, False)
    S32 = (32, True)
    U64 = (64, False)
    S64 = (64, True)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def mask(self) -> int:
        """All bits of the type set, as an unsigned value."""
        return (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        """Convert ``value`` to this type, wrapping modulo 2**bits like a cast."""
        value &= self.mask
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value


def is_signed(int_type: IntType) -> bool:
    """Return whether ``int_type`` is signed, judged by whether -1 stays below 0."""
    return int_type.wrap(-1) < int_type.wrap(0)


def unsigned_maximum(int_type: IntType) -> int:
    """Return the type's value with every bit set.

    This is the maximum only for unsigned types; a signed type yields -1.
    """
    return int_type.wrap(~0)


def signed_maximum(int_type: IntType) -> int:
    """Return the largest value ``int_type`` can hold."""
    if is_signed(int_type):
        return int_type.wrap((1 << (int_type.bits - 1)) - 1)
    return unsigned_maximum(int_type)


def signed_minimum(int_type: IntType) -> int:
    """Return the smallest value ``int_type`` can hold."""
    if is_signed(int_type):
        return int_type.wrap(-(1 << (int_type.bits - 1)))
    return 0