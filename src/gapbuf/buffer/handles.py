"""Scoped handles for editing a single slot in place."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any

from .errors import StaleHandleError

if TYPE_CHECKING:
    from .gap_buffer import GapBuffer


class ElementHandle(AbstractContextManager["ElementHandle"]):
    """Get/set access to one logical element.

    The handle resolves its physical slot on every access and is bound to the
    buffer generation it was issued under; any insert, delete, cursor move or
    growth makes it stale. Leaving a ``with`` block closes it.
    """

    def __init__(self, buffer: "GapBuffer", index: int, generation: int) -> None:
        self._buffer = buffer
        self._index = index
        self._generation = generation
        self._closed = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def valid(self) -> bool:
        return not self._closed and self._generation == self._buffer.generation

    def _check(self) -> None:
        if self._closed:
            raise StaleHandleError(f"Handle for index {self._index} is closed")
        if self._generation != self._buffer.generation:
            raise StaleHandleError(
                f"Handle for index {self._index} was invalidated by a buffer edit"
            )

    def get(self) -> Any:
        self._check()
        return self._buffer.at(self._index)

    def set(self, value: Any) -> None:
        self._check()
        self._buffer.set_at(self._index, value)

    def close(self) -> None:
        self._closed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        state = "valid" if self.valid else "stale"
        return f"ElementHandle(index={self._index}, {state})"
