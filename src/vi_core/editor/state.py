"""Per-document editing state and the cursor primitives modes build on."""

from __future__ import annotations

import string
from typing import Dict, Optional

from vi_core.buffer import (
    Cursor,
    Position,
    RegisterManager,
    SystemClipboard,
    TextBuffer,
    UndoEntry,
    UndoTimeline,
    default_registers,
)
from vi_core.modes.base_mode import EditorMode
from vi_core.runtime import EditorConfig, telemetry

MARK_NAMES = frozenset(string.ascii_lowercase)


class EditorState:
    """Buffer, cursor, registers, undo history, dirty flag and mode tag.

    Registers default to the process-wide store shared by every document;
    marks belong to this one. Motion primitives clamp against the buffer and
    never fail; the buffer itself does no clamping.
    """

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        *,
        registers: Optional[RegisterManager] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig.from_env()
        self.buffer = buffer or TextBuffer()
        self.cursor = Cursor()
        self.registers = registers or default_registers(
            clipboard=SystemClipboard(
                timeout=self.config.clipboard_timeout,
                enabled=self.config.clipboard_enabled,
            )
        )
        self.undo_timeline = UndoTimeline(depth=self.config.undo_depth)
        self.mode: str = EditorMode.NORMAL
        self.is_dirty = False
        self.marks: Dict[str, Position] = {}

    # -- cursor primitives ------------------------------------------------

    def _max_column(self, line: int) -> int:
        length = self.buffer.line_length(line)
        if self.mode == EditorMode.INSERT:
            return length
        return max(0, length - 1)

    def move_cursor_left(self, count: int = 1) -> None:
        column = max(0, self.cursor.column - max(count, 1))
        self.cursor.move_to(self.cursor.position.with_column(column))

    def move_cursor_right(self, count: int = 1, *, past_end: bool = False) -> None:
        line = self.cursor.line
        limit = self._max_column(line)
        if past_end:
            limit = self.buffer.line_length(line)
        column = min(self.cursor.column + max(count, 1), limit)
        self.cursor.move_to(Position(line, max(column, 0)))

    def move_cursor_up(self, count: int = 1) -> None:
        self._move_vertical(self.cursor.line - max(count, 1))

    def move_cursor_down(self, count: int = 1) -> None:
        self._move_vertical(self.cursor.line + max(count, 1))

    def _move_vertical(self, target: int) -> None:
        line = max(0, min(target, self.buffer.line_count() - 1))
        column = min(self.cursor.preferred_column, self._max_column(line))
        # Vertical moves keep preferred_column so the column sticks.
        self.cursor.position = Position(line, column)

    def move_cursor_to(self, position: Position) -> None:
        self.cursor.move_to(self._clamped(position))

    def _clamped(self, position: Position) -> Position:
        line = max(0, min(position.line, self.buffer.line_count() - 1))
        column = max(0, min(position.column, self._max_column(line)))
        return Position(line, column)

    def clamp_cursor_to_buffer_for_render(self) -> None:
        """Make the cursor reference an existing cell before drawing."""

        line = max(0, min(self.cursor.line, self.buffer.line_count() - 1))
        length = self.buffer.line_length(line)
        column = 0 if length == 0 else max(0, min(self.cursor.column, length - 1))
        self.cursor.move_to(Position(line, column))

    # -- marks ------------------------------------------------------------

    def set_mark(self, name: str) -> bool:
        """Remember the cursor under ``name`` (``a``-``z``)."""

        if len(name) != 1 or name not in MARK_NAMES:
            return False
        self.marks[name] = self.cursor.position
        return True

    def mark(self, name: str) -> Optional[Position]:
        # Lines may have gone since the mark was set.
        position = self.marks.get(name)
        return self._clamped(position) if position is not None else None

    # -- document bookkeeping ---------------------------------------------

    def mark_dirty(self) -> None:
        self.is_dirty = True

    def _entry(self, label: str) -> UndoEntry:
        return UndoEntry(
            lines=self.buffer.snapshot(), cursor=self.cursor.position, label=label
        )

    def save_undo_state(self, label: str = "edit") -> None:
        self.undo_timeline.push(self._entry(label))

    def undo(self) -> bool:
        entry = self.undo_timeline.undo(self._entry("undo"))
        if entry is None:
            return False
        self._apply(entry)
        telemetry.record_event("buffer.undo", data={"label": entry.label})
        return True

    def redo(self) -> bool:
        entry = self.undo_timeline.redo(self._entry("redo"))
        if entry is None:
            return False
        self._apply(entry)
        telemetry.record_event("buffer.redo", data={"label": entry.label})
        return True

    def _apply(self, entry: UndoEntry) -> None:
        self.buffer.restore(entry.lines)
        self.move_cursor_to(entry.cursor)
        self.mark_dirty()


__all__ = ["EditorState", "MARK_NAMES"]
