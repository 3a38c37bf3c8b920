"""Visual selection state and range normalisation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vi_core.buffer import Position, TextBuffer, ordered


@dataclass(slots=True)
class SelectionState:
    """Anchor of a visual selection plus an optional pinned end.

    ``forced_end`` anchors the far end independently of the cursor (used for
    programmatic selections); keystrokes clear it before acting.
    """

    start: Position = Position()
    forced_end: Optional[Position] = None
    line_wise: bool = False
    block_wise: bool = False

    def reset(self) -> None:
        self.start = Position()
        self.forced_end = None


def selection_range(
    state: SelectionState, buffer: TextBuffer, cursor_position: Position
) -> tuple[Position, Position]:
    """Return the ordered inclusive range the selection covers.

    Line-wise selections widen to whole lines. Block-wise selections are
    returned as their two corners with no rectangular expansion.
    """

    end = state.forced_end or cursor_position
    start, end = ordered(state.start, end)
    if state.line_wise:
        start = start.with_column(0)
        end = end.with_column(max(0, buffer.line_length(end.line) - 1))
    return start, end


__all__ = ["SelectionState", "selection_range"]
