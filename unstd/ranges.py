"""Inclusive numeric ranges that count up or down."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["foreach_range"]


def foreach_range(start: int, end: int, step: int = 1) -> Iterator[int]:
    """Yield numbers from ``start`` to ``end`` inclusive.

    The direction follows ``start`` and ``end``: upwards when ``start < end``,
    otherwise downwards. ``step`` is its magnitude; a step that is not
    positive counts as 1.
    """
    if step <= 0:
        step = 1
    if start < end:
        current = start
        while current <= end:
            yield current
            current += step
    else:
        current = start
        while current >= end:
            yield current
            current -= step