"""Cursor position with a sticky column for vertical motion."""

from __future__ import annotations

from dataclasses import dataclass

from .position import Position


@dataclass(slots=True)
class Cursor:
    """Current cell plus the column vertical moves try to return to.

    ``preferred_column`` follows horizontal and deliberate moves
    (:meth:`move_to`); vertical moves assign ``position`` directly and leave
    it alone.
    """

    position: Position = Position()
    preferred_column: int = 0

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def move_to(self, position: Position) -> None:
        self.position = position
        self.preferred_column = position.column


__all__ = ["Cursor"]
