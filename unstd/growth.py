"""Capacity growth policies for containers that grow one step at a time."""

from __future__ import annotations

from enum import Enum

__all__ = ["GrowthPolicy", "next_capacity"]


class GrowthPolicy(Enum):
    """How a full container picks its next capacity."""

    LINEAR = "linear"
    """Grow by one slot each time."""

    LOGARITHMIC = "logarithmic"
    """Double the capacity each time, starting from one."""


def next_capacity(policy: GrowthPolicy, capacity: int) -> int:
    """Return the capacity a container with ``capacity`` slots grows to.

    ``LINEAR`` adds one slot. ``LOGARITHMIC`` doubles the capacity, and an
    empty container gets a single slot.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError("capacity must be an int")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if policy is GrowthPolicy.LINEAR:
        return capacity + 1
    if policy is GrowthPolicy.LOGARITHMIC:
        return capacity << 1 if capacity else 1
    raise TypeError("policy must be a GrowthPolicy")