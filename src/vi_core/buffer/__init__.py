"""Text storage, cursor, undo history and registers."""

from .clipboard import SystemClipboard
from .cursor import Cursor
from .position import Position, ordered
from .registers import (
    Characters,
    Lines,
    RegisterContent,
    RegisterManager,
    default_registers,
    flatten,
)
from .sync import BufferMirror, BufferValidationError
from .text_buffer import TextBuffer
from .undo import UndoEntry, UndoTimeline

__all__ = [
    "BufferMirror",
    "BufferValidationError",
    "Characters",
    "Cursor",
    "Lines",
    "Position",
    "RegisterContent",
    "RegisterManager",
    "SystemClipboard",
    "TextBuffer",
    "UndoEntry",
    "UndoTimeline",
    "default_registers",
    "flatten",
    "ordered",
]
