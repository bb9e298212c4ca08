"""Bounds checks shared across buffer operations."""

from __future__ import annotations

import operator

from .errors import IndexOutOfRangeError, InvalidDisplacementError


def ensure_index(pos: object, size: int) -> int:
    index = operator.index(pos)  # type: ignore[arg-type]
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(index, size)
    return index


def ensure_slot(pos: object, capacity: int) -> int:
    """Like ``ensure_index`` but for physical slots, gap included."""

    index = operator.index(pos)  # type: ignore[arg-type]
    if index < 0 or index >= capacity:
        raise IndexOutOfRangeError(
            index,
            capacity,
            message=f"Array index {index} outside storage of capacity {capacity}",
        )
    return index


def ensure_displacement(cursor: int, delta: object, size: int) -> int:
    """Return the cursor target for ``delta`` or raise.

    ``size`` never exceeds capacity, so keeping the target within
    ``[0, size]`` also keeps it within ``[0, capacity]`` while stopping the
    gap from running off the end of storage.
    """

    step = operator.index(delta)  # type: ignore[arg-type]
    target = cursor + step
    if target < 0 or target > size:
        raise InvalidDisplacementError(step, target, size)
    return target
