"""Helpers for NUL-terminated strings held in ``str``, ``bytes`` or code-unit sequences.

Every function reads its inputs only up to the first NUL (``"\\0"`` or ``0``),
the way a terminated C string is read. ``None`` stands for a missing string.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import takewhile
from typing import Optional, Union

from .inttypes import IntType

__all__ = [
    "strlen",
    "strlen16",
    "str_equal",
    "str_equal_ignorecase",
    "find_char",
    "find_substring",
    "find_substring_ignorecase",
    "concat",
    "compare",
    "compare_n",
]

Text = Union[str, bytes, bytearray]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _terminated(buffer: Text) -> Text:
    """Return ``buffer`` cut off at its first NUL."""
    nul = "\0" if isinstance(buffer, str) else b"\0"
    index = buffer.find(nul)
    return buffer if index < 0 else buffer[:index]


def _ascii_lower(buffer: Text) -> Text:
    if isinstance(buffer, str):
        return buffer.translate(_ASCII_LOWER)
    # bytes.lower only folds ASCII letters
    return buffer.lower()


def _units(buffer: Union[Text, Iterable[int]]) -> Iterator[int]:
    values: Iterable[int]
    if isinstance(buffer, str):
        values = (ord(c) for c in buffer)
    else:
        values = buffer
    return takewhile(lambda unit: unit != 0, values)


def strlen(buffer: Optional[Text]) -> int:
    """Return the number of characters before the first NUL; 0 for ``None``."""
    if not buffer:
        return 0
    return len(_terminated(buffer))


def strlen16(buffer: Optional[Sequence[int]]) -> int:
    """Return the number of 16-bit code units before the first zero unit."""
    if not buffer:
        return 0
    return sum(1 for _ in _units(buffer))


def str_equal(first: Optional[Text], second: Optional[Text]) -> bool:
    """Return whether both strings exist and hold the same characters."""
    if first is None or second is None:
        return False
    return _terminated(first) == _terminated(second)


def str_equal_ignorecase(first: Optional[Text], second: Optional[Text]) -> bool:
    """Like :func:`str_equal`, folding ASCII letters to lower case."""
    if first is None or second is None:
        return False
    return _ascii_lower(_terminated(first)) == _ascii_lower(_terminated(second))


def _char_code(buffer: Text, char: Union[int, str, bytes]) -> int:
    if isinstance(char, int):
        code = char
    else:
        if len(char) != 1:
            raise ValueError("char must be a single character")
        code = ord(char)
    if not isinstance(buffer, str):
        code &= 0xFF
    return code


def find_char(buffer: Text, char: Union[int, str, bytes]) -> Optional[int]:
    """Return the index of the first ``char`` in ``buffer``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(buffer)``.
    """
    code = _char_code(buffer, char)
    text = _terminated(buffer)
    if code == 0:
        return len(text)
    for index, unit in enumerate(_units(text)):
        if unit == code:
            return index
    return None


def find_substring(buffer: Text, substring: Text) -> Optional[int]:
    """Return the index of the first ``substring`` in ``buffer``, or ``None``.

    An empty substring is found at index 0.
    """
    index = _terminated(buffer).find(_terminated(substring))
    return None if index < 0 else index


def find_substring_ignorecase(buffer: Text, substring: Text) -> Optional[int]:
    """Like :func:`find_substring`, folding ASCII letters to lower case."""
    index = _ascii_lower(_terminated(buffer)).find(
        _ascii_lower(_terminated(substring))
    )
    return None if index < 0 else index


def concat(first: Optional[Text], second: Optional[Text]) -> Optional[Text]:
    """Join two strings.

    Returns ``None`` when both are empty or missing, and the other argument
    unchanged when only one of them is.
    """
    first_empty = not first or strlen(first) == 0
    second_empty = not second or strlen(second) == 0
    if first_empty and second_empty:
        return None
    if first_empty:
        return second
    if second_empty:
        return first
    return _terminated(first) + _terminated(second)


def _signed_units(buffer: Text) -> list[int]:
    if isinstance(buffer, str):
        return [ord(c) for c in _terminated(buffer)]
    return [IntType.S8.wrap(b) for b in _terminated(buffer)]


def compare(first: Optional[Text], second: Optional[Text]) -> int:
    """Compare two strings character by character.

    Returns 0 when equal, otherwise the difference of the first differing
    characters (bytes count as signed chars). Returns -1 if exactly one
    argument, or both distinct ones, are ``None``.
    """
    if first is second:
        return 0
    if first is None or second is None:
        return -1
    left = _signed_units(first) + [0]
    right = _signed_units(second) + [0]
    for a, b in zip(left, right):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def compare_n(first: Optional[Text], second: Optional[Text], n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Characters count as unsigned. With a missing argument the result is 0 if
    both are missing, 1 if only ``second`` is, and -1 if only ``first`` is.
    """
    if first is None or second is None:
        if first is None and second is None:
            return 0
        return 1 if first is not None else -1
    left = list(_units(first))
    right = list(_units(second))
    for index in range(n):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a != b or a == 0 or b == 0:
            return a - b
    return 0