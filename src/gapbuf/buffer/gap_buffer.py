"""Gap buffer: a sequence with a movable hole for cheap edits at the cursor."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator, List, Optional

from gapbuf.runtime.telemetry import record_event, span

from .errors import GapInvariantError, NoSuccessorError
from .handles import ElementHandle
from .layout import BufferOptions, GapLayout, render_layout
from .validation import ensure_displacement, ensure_index, ensure_slot

LOGGER_NAME = "gapbuf.buffer"

_UNSET: Any = object()


class GapBuffer:
    """Mutable sequence stored as ``[left][gap][right]`` in one list.

    Logical (external) indices address the live elements only. Physical
    (array) indices address the backing list, gap included. The cursor is
    the physical start of the gap; because nothing precedes the left
    segment it is also the logical position of the cursor.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        count: Optional[int] = None,
        value: Any = _UNSET,
        *,
        options: Optional[BufferOptions] = None,
    ) -> None:
        self.options = options or BufferOptions()
        if value is _UNSET:
            value = self.options.tombstone

        if count is None:
            capacity = self.options.default_capacity
            size = 0
        else:
            size = operator.index(count)
            if size < 0:
                raise ValueError("count cannot be negative")
            capacity = 2 * size

        self._storage: List[Any] = [value] * size
        self._storage.extend([self.options.tombstone] * (capacity - size))
        self._capacity = capacity
        self._size = size
        self._cursor = size
        self._gap_size = capacity - size
        self._generation = 0

    @classmethod
    def from_iterable(
        cls, items: Iterable[Any], *, options: Optional[BufferOptions] = None
    ) -> "GapBuffer":
        """Build a buffer holding ``items`` with the cursor after the last one."""

        values = list(items)
        buffer = cls(options=options)
        buffer.reserve(len(values))
        for item in values:
            buffer.insert_at_cursor(item)
        return buffer

    # ------------------------------------------------------------------
    # Index translation

    def to_array_index(self, external_index: int) -> int:
        index = ensure_index(external_index, self._size)
        return self._array_index(index)

    def to_external_index(self, array_index: int) -> int:
        index = ensure_slot(array_index, self._capacity)
        if index < self._cursor:
            return index
        if index >= self._cursor + self._gap_size:
            return index - self._gap_size
        raise GapInvariantError(index, (self._cursor, self._cursor + self._gap_size))

    def _array_index(self, external_index: int) -> int:
        if external_index < self._cursor:
            return external_index
        return external_index + self._gap_size

    # ------------------------------------------------------------------
    # Reads and in-place writes

    def at(self, pos: int) -> Any:
        index = ensure_index(pos, self._size)
        return self._storage[self._array_index(index)]

    def set_at(self, pos: int, value: Any) -> None:
        index = ensure_index(pos, self._size)
        self._storage[self._array_index(index)] = value

    def get_at_cursor(self) -> Any:
        if self._cursor == self._size:
            raise NoSuccessorError(self._cursor)
        return self._storage[self._cursor + self._gap_size]

    def set_at_cursor(self, value: Any) -> None:
        if self._cursor == self._size:
            raise NoSuccessorError(self._cursor)
        self._storage[self._cursor + self._gap_size] = value

    def handle(self, pos: int) -> ElementHandle:
        index = ensure_index(pos, self._size)
        return ElementHandle(self, index, self._generation)

    def cursor_handle(self) -> ElementHandle:
        if self._cursor == self._size:
            raise NoSuccessorError(self._cursor)
        return ElementHandle(self, self._cursor, self._generation)

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def cursor_index(self) -> int:
        return self._cursor

    def capacity(self) -> int:
        return self._capacity

    def gap_size(self) -> int:
        return self._gap_size

    @property
    def generation(self) -> int:
        """Counter bumped by every structural edit; handles compare against it."""

        return self._generation

    def layout(self) -> GapLayout:
        return GapLayout(
            capacity=self._capacity,
            size=self._size,
            cursor=self._cursor,
            gap_size=self._gap_size,
        )

    # ------------------------------------------------------------------
    # Structural edits

    def insert_at_cursor(self, value: Any) -> None:
        if self._gap_size == 0:
            self.reserve(self.options.grown_capacity(self._capacity))
        self._storage[self._cursor] = value
        self._cursor += 1
        self._size += 1
        self._gap_size -= 1
        self._generation += 1

    def delete_at_cursor(self) -> None:
        """Backspace: drop the element just before the cursor.

        Does nothing when the cursor is at the start.
        """

        if self._cursor == 0:
            return
        self._cursor -= 1
        self._size -= 1
        self._gap_size += 1
        self._storage[self._cursor] = self.options.tombstone
        self._generation += 1

    def move_cursor(self, delta: int) -> None:
        """Shift the gap by ``delta`` slots, carrying elements across it.

        Moving right pulls the first ``delta`` elements of the right segment
        down to the old cursor; moving left pushes the last ``-delta``
        elements of the left segment up against the far side of the gap.
        """

        target = ensure_displacement(self._cursor, delta, self._size)
        if target == self._cursor:
            return

        cursor, gap = self._cursor, self._gap_size
        storage = self._storage
        if target > cursor:
            storage[cursor:target] = storage[cursor + gap : target + gap]
        else:
            storage[target + gap : cursor + gap] = storage[target:cursor]
        storage[target : target + gap] = [self.options.tombstone] * gap
        self._cursor = target
        self._generation += 1

    def reserve(self, new_capacity: int) -> None:
        """Grow storage to ``new_capacity`` slots; never shrinks.

        The new list is fully populated before it replaces the old one, and
        the gap is re-derived as ``new_capacity - size()``.
        """

        capacity = operator.index(new_capacity)
        if capacity <= self._capacity:
            return

        with span(
            "buffer::reserve",
            data={"capacity": self._capacity, "new_capacity": capacity},
            logger_name=LOGGER_NAME,
        ):
            new_gap = capacity - self._size
            grown = [self.options.tombstone] * capacity
            grown[: self._cursor] = self._storage[: self._cursor]
            grown[self._cursor + new_gap :] = self._storage[
                self._cursor + self._gap_size :
            ]
            old_capacity = self._capacity
            self._storage = grown
            self._capacity = capacity
            self._gap_size = new_gap
            self._generation += 1

        record_event(
            "buffer.grow",
            level="debug",
            data={
                "from": old_capacity,
                "to": capacity,
                "size": self._size,
                "gap_size": new_gap,
            },
            logger_name=LOGGER_NAME,
        )

    # ------------------------------------------------------------------
    # Sequence protocol

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        yield from self._storage[: self._cursor]
        yield from self._storage[self._cursor + self._gap_size :]

    def __getitem__(self, pos: int) -> Any:
        return self.at(pos)

    def __setitem__(self, pos: int, value: Any) -> None:
        self.set_at(pos, value)

    def to_list(self) -> List[Any]:
        return list(self)

    def text(self) -> str:
        """Join the logical sequence; elements must be strings."""

        return "".join(self)

    # ------------------------------------------------------------------
    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GapBuffer):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GapBuffer):
            return NotImplemented
        return self.to_list() < other.to_list()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GapBuffer):
            return NotImplemented
        return self.to_list() <= other.to_list()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GapBuffer):
            return NotImplemented
        return self.to_list() > other.to_list()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GapBuffer):
            return NotImplemented
        return self.to_list() >= other.to_list()

    # ------------------------------------------------------------------
    # Diagnostics

    def render(self) -> str:
        return render_layout(self.layout(), self._storage, self.options)

    def debug(self) -> str:
        rendered = self.render()
        record_event(
            "buffer.debug",
            level="debug",
            data={"layout": rendered, "cursor": self._cursor, "size": self._size},
            logger_name=LOGGER_NAME,
        )
        return rendered

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"GapBuffer(size={self._size}, capacity={self._capacity}, "
            f"cursor={self._cursor}, gap_size={self._gap_size})"
        )


__all__ = ["GapBuffer", "LOGGER_NAME"]
