"""Gap buffer container for cursor-local edits."""

from .buffer import (
    BufferOptions,
    ElementHandle,
    ErrorKind,
    GapBuffer,
    GapBufferError,
    GapInvariantError,
    GapLayout,
    IndexOutOfRangeError,
    InvalidDisplacementError,
    NoSuccessorError,
    StaleHandleError,
)

__all__ = [
    "buffer",
    "runtime",
    "GapBuffer",
    "BufferOptions",
    "GapLayout",
    "ElementHandle",
    "ErrorKind",
    "GapBufferError",
    "IndexOutOfRangeError",
    "NoSuccessorError",
    "InvalidDisplacementError",
    "StaleHandleError",
    "GapInvariantError",
]

__version__ = "0.1.0"
