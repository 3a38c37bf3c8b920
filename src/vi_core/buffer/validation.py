"""Bounds checks for caller-supplied buffer positions."""

from __future__ import annotations

from typing import Sequence

from .position import Position
from .sync import BufferValidationError


def ensure_line(lines: Sequence[str], index: int) -> int:
    if index < 0 or index >= len(lines):
        raise BufferValidationError(
            f"Line {index} out of range", position=Position(max(index, 0), 0)
        )
    return index


def ensure_position(lines: Sequence[str], position: Position) -> Position:
    ensure_line(lines, position.line)
    if position.column < 0 or position.column > len(lines[position.line]):
        raise BufferValidationError("Column out of range", position=position)
    return position
