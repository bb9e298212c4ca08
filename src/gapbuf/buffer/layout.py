"""Construction options and read-only layout snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class BufferOptions:
    """Tunables fixed for the lifetime of a buffer."""

    default_capacity: int = 10
    growth_factor: int = 2
    tombstone: Any = "\0"
    gap_marker: str = "*"
    cursor_marker: str = "|"

    def __post_init__(self) -> None:
        if self.default_capacity < 0:
            raise ValueError("default_capacity cannot be negative")
        if self.growth_factor < 2:
            raise ValueError("growth_factor must be at least 2")
        if not self.gap_marker or not self.cursor_marker:
            raise ValueError("markers cannot be empty")

    def grown_capacity(self, capacity: int) -> int:
        return max(capacity * self.growth_factor, 1)


@dataclass(frozen=True, slots=True)
class GapLayout:
    """Physical layout of a buffer at one point in time."""

    capacity: int
    size: int
    cursor: int
    gap_size: int

    @property
    def gap_start(self) -> int:
        return self.cursor

    @property
    def gap_end(self) -> int:
        return self.cursor + self.gap_size

    @property
    def right_start(self) -> int:
        return self.gap_end

    def in_gap(self, array_index: int) -> bool:
        return self.gap_start <= array_index < self.gap_end

    def is_consistent(self) -> bool:
        return (
            self.gap_size == self.capacity - self.size
            and 0 <= self.cursor <= self.capacity
            and self.cursor + self.gap_size <= self.capacity
        )


def render_layout(
    layout: GapLayout, storage: Sequence[Any], options: BufferOptions
) -> str:
    """Draw every physical slot, marking the cursor and the gap.

    Live slots show their element, gap slots show ``options.gap_marker``.
    The cursor marker precedes the slot at the cursor, or closes the row
    when the cursor sits at the end of storage.
    """

    cells = []
    for i in range(layout.capacity):
        prefix = options.cursor_marker if i == layout.cursor else " "
        body = options.gap_marker if layout.in_gap(i) else str(storage[i])
        cells.append(prefix + body)
    closing = options.cursor_marker if layout.cursor == layout.capacity else " "
    return "[" + "".join(cells) + closing + "]"
