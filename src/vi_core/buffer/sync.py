"""Types exchanged with host adapters at the buffer boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .position import Position


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot: composited display lines plus cursor state."""

    lines: tuple[str, ...]
    cursor: Position
    mode: str
    selection: Optional[tuple[Position, Position]] = None
    dirty: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-bounds position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


__all__ = ["BufferMirror", "BufferValidationError"]
