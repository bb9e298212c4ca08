"""Error kinds raised by gap buffer operations."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

IndexRange = Tuple[int, int]  # [start, stop)


class ErrorKind(str, Enum):
    OUT_OF_RANGE = "out_of_range"
    NO_SUCCESSOR = "no_successor"
    INVALID_DISPLACEMENT = "invalid_displacement"


class GapBufferError(IndexError):
    """Base class for caller-input violations.

    ``index`` is the offending logical index (or cursor target) and
    ``valid_range`` the half-open range that would have been accepted.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        valid_range: Optional[IndexRange] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.valid_range = valid_range


class IndexOutOfRangeError(GapBufferError):
    """Raised when a logical index does not name a live element."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, index: int, size: int, *, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Index {index} out of range for buffer of size {size}",
            index=index,
            valid_range=(0, size),
        )


class NoSuccessorError(GapBufferError):
    """Raised when the cursor element is read at the logical end."""

    kind = ErrorKind.NO_SUCCESSOR

    def __init__(self, cursor: int) -> None:
        super().__init__(
            f"No element after the cursor at {cursor}",
            index=cursor,
            valid_range=(0, cursor),
        )


class InvalidDisplacementError(GapBufferError):
    kind = ErrorKind.INVALID_DISPLACEMENT

    def __init__(self, delta: int, target: int, limit: int) -> None:
        super().__init__(
            f"Cursor move by {delta} targets {target}, outside [0, {limit}]",
            index=target,
            valid_range=(0, limit + 1),
        )
        self.delta = delta


class StaleHandleError(RuntimeError):
    """Raised when an element handle outlives the layout it was issued for."""


class GapInvariantError(AssertionError):
    """A physical index inside the gap was translated to a logical one."""

    def __init__(self, array_index: int, gap: IndexRange) -> None:
        super().__init__(
            f"Array index {array_index} lies inside the gap [{gap[0]}, {gap[1]})"
        )
        self.array_index = array_index
        self.gap = gap


__all__ = [
    "ErrorKind",
    "GapBufferError",
    "IndexOutOfRangeError",
    "NoSuccessorError",
    "InvalidDisplacementError",
    "StaleHandleError",
    "GapInvariantError",
]
