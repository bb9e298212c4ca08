"""Gap buffer storage, its errors, handles, and layout helpers."""

from .errors import (
    ErrorKind,
    GapBufferError,
    GapInvariantError,
    IndexOutOfRangeError,
    InvalidDisplacementError,
    NoSuccessorError,
    StaleHandleError,
)
from .gap_buffer import GapBuffer
from .handles import ElementHandle
from .layout import BufferOptions, GapLayout, render_layout
from .validation import ensure_displacement, ensure_index, ensure_slot

__all__ = [
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
    "ensure_index",
    "ensure_displacement",
    "ensure_slot",
    "render_layout",
]
