"""A growable text string with tracked capacity and an optional capacity limit."""

from __future__ import annotations

from typing import Optional, Union

from .string_compat import strlen

__all__ = ["UStringError", "CapacityLimitError", "EmptyStringError", "UString"]

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)

# Capacity of an empty string: room for one character and the terminator.
_EMPTY_CAPACITY = 2


class UStringError(ValueError):
    """Base class for string operation errors."""


class CapacityLimitError(UStringError):
    """Raised when an operation would take the capacity beyond the limit."""


class EmptyStringError(UStringError):
    """Raised when an operation needs a non-empty string but got an empty one."""


def _ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def _ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def _terminated(text: str) -> str:
    """Return ``text`` cut off at its first NUL."""
    return text[: strlen(text)]


def _require_text(text: Optional[str]) -> str:
    if text is None:
        raise TypeError("text must be a string, not None")
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    return _terminated(text)


def _require_char(char: Union[str, int]) -> str:
    if isinstance(char, int) and not isinstance(char, bool):
        return chr(char)
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("char must be a single character")
    return char


class UString:
    """A mutable string that tracks its capacity like a terminated buffer.

    The capacity always leaves room for a terminator. A non-zero ``limit``
    caps how large the capacity may become.
    """

    __slots__ = ("_text", "_capacity", "_limit")

    def __init__(self, text: Optional[str] = "", limit: int = 0) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        text = "" if text is None else _require_text(text)
        if text:
            if limit and limit < len(text):
                raise CapacityLimitError("text does not fit within the limit")
            capacity = len(text) + 1
        else:
            capacity = _EMPTY_CAPACITY
        self._text = text
        self._capacity = capacity
        self._limit = limit

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def limit(self) -> int:
        return self._limit

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return (
            f"UString({self._text!r}, capacity={self._capacity}, "
            f"limit={self._limit})"
        )

    def _require_non_empty(self) -> None:
        if not self._text:
            raise EmptyStringError("string is empty")

    def _grow(self, amount: int) -> None:
        new_capacity = self._capacity + amount
        if self._limit and new_capacity > self._limit:
            raise CapacityLimitError("growing would exceed the limit")
        self._capacity = new_capacity

    # -- contents ---------------------------------------------------------

    def set(self, text: str) -> None:
        """Replace the contents, growing the capacity if needed."""
        text = _require_text(text)
        required = len(text) + 1
        if self._limit and required > self._limit:
            raise CapacityLimitError("text does not fit within the limit")
        if required > self._capacity:
            self._capacity = required
        self._text = text

    def reset(self) -> None:
        """Empty the string and return the capacity to its initial size."""
        self._text = ""
        self._capacity = _EMPTY_CAPACITY

    def clear(self) -> None:
        """Empty the string, keeping the capacity."""
        self._text = ""

    # -- comparison -------------------------------------------------------

    def _other_text(self, other: Union["UString", str]) -> str:
        if isinstance(other, UString):
            return other._text
        return _require_text(other)

    def _check_pair(self, other_text: str) -> Optional[bool]:
        """Handle the empty cases: True if both empty, raise if only one is."""
        if not self._text and not other_text:
            return True
        if not self._text or not other_text:
            raise EmptyStringError("only one of the strings is empty")
        return None

    def equals(self, other: Union["UString", str]) -> bool:
        """Return whether both strings hold the same text.

        Two empty strings are equal; an empty string compared with a
        non-empty one raises :class:`EmptyStringError`.
        """
        other_text = self._other_text(other)
        both_empty = self._check_pair(other_text)
        if both_empty is not None:
            return both_empty
        return self._text == other_text

    def equals_ignorecase(self, other: Union["UString", str]) -> bool:
        """Like :meth:`equals`, folding ASCII letters to lower case."""
        other_text = self._other_text(other)
        both_empty = self._check_pair(other_text)
        if both_empty is not None:
            return both_empty
        if len(self._text) != len(other_text):
            return False
        return _ascii_lower(self._text) == _ascii_lower(other_text)

    def startswith_char(self, char: Union[str, int]) -> bool:
        """Return whether the first character is ``char``."""
        char = _require_char(char)
        self._require_non_empty()
        return self._text[0] == char

    def startswith_char_ignorecase(self, char: Union[str, int]) -> bool:
        """Like :meth:`startswith_char`, ignoring ASCII case."""
        char = _require_char(char)
        self._require_non_empty()
        return _ascii_lower(self._text[0]) == _ascii_lower(char)

    def endswith_char(self, char: Union[str, int]) -> bool:
        """Return whether the last character is ``char``."""
        char = _require_char(char)
        self._require_non_empty()
        return self._text[-1] == char

    def endswith_char_ignorecase(self, char: Union[str, int]) -> bool:
        """Like :meth:`endswith_char`, ignoring ASCII case."""
        char = _require_char(char)
        self._require_non_empty()
        return _ascii_lower(self._text[-1]) == _ascii_lower(char)

    def startswith(self, other: Union["UString", str]) -> bool:
        """Return whether the string begins with ``other``."""
        other_text = self._other_text(other)
        both_empty = self._check_pair(other_text)
        if both_empty is not None:
            return both_empty
        return self._text.startswith(other_text)

    def endswith(self, other: Union["UString", str]) -> bool:
        """Return whether the string ends with ``other``."""
        other_text = self._other_text(other)
        both_empty = self._check_pair(other_text)
        if both_empty is not None:
            return both_empty
        return self._text.endswith(other_text)

    # -- case -------------------------------------------------------------

    def to_lower(self) -> None:
        """Fold ASCII letters to lower case in place."""
        self._require_non_empty()
        self._text = _ascii_lower(self._text)

    def to_upper(self) -> None:
        """Fold ASCII letters to upper case in place."""
        self._require_non_empty()
        self._text = _ascii_upper(self._text)

    def lower_copy(self) -> "UString":
        """Return a new string in lower case with the same limit."""
        self._require_non_empty()
        return UString(_ascii_lower(self._text), self._limit)

    def upper_copy(self) -> "UString":
        """Return a new string in upper case with the same limit."""
        self._require_non_empty()
        return UString(_ascii_upper(self._text), self._limit)

    # -- editing ----------------------------------------------------------

    def push_char(self, char: Union[str, int]) -> None:
        """Append one character, growing the capacity by one if it is full."""
        char = _require_char(char)
        if len(self._text) + 2 > self._capacity:
            self._grow(1)
        self._text += char

    def push_str(self, text: str) -> None:
        """Append ``text``, growing the capacity by its length if needed."""
        text = _require_text(text)
        if not text:
            raise EmptyStringError("nothing to append")
        if len(self._text) + len(text) + 1 > self._capacity:
            self._grow(len(text))
        self._text += text

    def pop_char(self) -> str:
        """Remove and return the last character, shrinking the capacity by one."""
        self._require_non_empty()
        last = self._text[-1]
        self._capacity -= 1
        self._text = self._text[:-1]
        return last

    def substr(self, start: int, span: int = 0) -> "UString":
        """Return ``span`` characters from ``start`` as a new, unlimited string.

        A ``span`` that is not positive, or reaches past the end, takes the
        rest of the string.
        """
        self._require_non_empty()
        if start < 0 or start >= len(self._text):
            raise IndexError("start lies outside the string")
        rest = len(self._text) - start
        size = rest if span <= 0 or span >= rest else span
        result = UString()
        result._text = self._text[start : start + size]
        result._capacity = size + 1
        return result