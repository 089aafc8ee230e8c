"""Classification of single byte values (ASCII and extended ASCII)."""

from __future__ import annotations

from typing import Union

from .inttypes import IntType

__all__ = [
    "is_ascii_control",
    "is_ascii_printable",
    "is_ascii_extended",
    "is_ascii_visible",
    "is_ascii",
    "is_alphabetic",
    "is_alphanumeric",
    "is_digit",
    "is_hex",
    "is_whitespace",
]

ByteLike = Union[int, str, bytes, bytearray]

_WHITESPACE = frozenset((32, 9, 10, 11, 12, 13))


def _byte(byte: ByteLike) -> int:
    """Return ``byte`` as an unsigned 8-bit value, wrapping integers like a cast."""
    if isinstance(byte, bool):
        raise TypeError("byte must be an int or a single character")
    if isinstance(byte, int):
        return IntType.U8.wrap(byte)
    if isinstance(byte, (str, bytes, bytearray)):
        if len(byte) != 1:
            raise ValueError("byte must be a single character")
        return IntType.U8.wrap(byte[0] if not isinstance(byte, str) else ord(byte))
    raise TypeError("byte must be an int or a single character")


def is_ascii_control(byte: ByteLike) -> bool:
    """Return whether ``byte`` is a control character (0-31 or 127)."""
    value = _byte(byte)
    return value <= 31 or value == 127


def is_ascii_printable(byte: ByteLike) -> bool:
    """Return whether ``byte`` is a printable ASCII character (32-126)."""
    return 32 <= _byte(byte) <= 126


def is_ascii_extended(byte: ByteLike) -> bool:
    """Return whether ``byte`` lies in the extended range (128-255)."""
    return 128 <= _byte(byte) <= 255


def is_ascii_visible(byte: ByteLike) -> bool:
    """Return whether ``byte`` is printable or extended."""
    return is_ascii_printable(byte) or is_ascii_extended(byte)


def is_ascii(byte: ByteLike) -> bool:
    """Return whether ``byte`` lies in 0-255, which every 8-bit value does."""
    return 0 <= _byte(byte) <= 255


def is_alphabetic(byte: ByteLike) -> bool:
    """Return whether ``byte`` is an ASCII letter."""
    value = _byte(byte)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def is_alphanumeric(byte: ByteLike) -> bool:
    """Return whether ``byte`` is an ASCII letter or digit."""
    return is_alphabetic(byte) or is_digit(byte)


def is_digit(byte: ByteLike) -> bool:
    """Return whether ``byte`` is an ASCII decimal digit."""
    return ord("0") <= _byte(byte) <= ord("9")


def is_hex(byte: ByteLike) -> bool:
    """Return whether ``byte`` is an ASCII hexadecimal digit."""
    value = _byte(byte)
    return (
        is_digit(value)
        or ord("a") <= value <= ord("f")
        or ord("A") <= value <= ord("F")
    )


def is_whitespace(byte: ByteLike) -> bool:
    """Return whether ``byte`` is space, tab, newline, vertical tab, form feed or CR."""
    return _byte(byte) in _WHITESPACE