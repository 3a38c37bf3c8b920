"""Buffer coordinates."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A ``(line, column)`` cell; ordered by line, then column."""

    line: int = 0
    column: int = 0

    def with_column(self, column: int) -> "Position":
        return replace(self, column=column)

    def with_line(self, line: int) -> "Position":
        return replace(self, line=line)


def ordered(first: Position, second: Position) -> tuple[Position, Position]:
    """Return the pair sorted so the first element is ``<=`` the second."""

    if second < first:
        return second, first
    return first, second


__all__ = ["Position", "ordered"]
