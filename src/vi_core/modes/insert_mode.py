"""Insert mode: typed text goes straight into the buffer."""

from __future__ import annotations

from typing import Optional

from vi_core.actions import core as core_actions
from vi_core.buffer import Position
from vi_core.runtime import telemetry

from .base_mode import (
    BACKSPACE,
    CTRL_H,
    EditorMode,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
    unhandled,
)

NEWLINES = frozenset({"\r", "\n"})


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vi_core.modes.insert")

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        # Leaving insert steps back onto the last typed character.
        self.state.move_cursor_left(1)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.is_cancel:
            return core_actions.exit_to_normal_mode("exit_insert")

        char = key.key
        if char in NEWLINES:
            self._insert("\n")
            return ModeResult(consumed=True, message="newline")
        if char in (BACKSPACE, CTRL_H):
            self._backspace()
            return ModeResult(consumed=True, message="backspace")
        if char in ("LEFT", "RIGHT", "UP", "DOWN", "HOME", "END"):
            self._arrow(char)
            return ModeResult(consumed=True, message="motion")
        if char == "\t" or key.text:
            self._insert(key.text or char)
            return ModeResult(consumed=True, message="insert")
        return unhandled()

    def _insert(self, text: str) -> None:
        state = self.state
        at = state.cursor.position
        at = at.with_column(min(at.column, state.buffer.line_length(at.line)))
        state.cursor.move_to(state.buffer.insert(at, text))
        state.mark_dirty()

    def _backspace(self) -> None:
        state = self.state
        line, column = state.cursor.line, state.cursor.column
        if column > 0:
            target = Position(line, column - 1)
            state.buffer.delete_range(target, target)
            state.cursor.move_to(target)
        elif line > 0:
            state.cursor.move_to(state.buffer.join_lines(line - 1))
        else:
            return
        state.mark_dirty()

    def _arrow(self, name: str) -> None:
        state = self.state
        if name == "LEFT":
            state.move_cursor_left(1)
        elif name == "RIGHT":
            state.move_cursor_right(1, past_end=True)
        elif name == "UP":
            state.move_cursor_up(1)
        elif name == "DOWN":
            state.move_cursor_down(1)
        elif name == "HOME":
            state.move_cursor_to(state.cursor.position.with_column(0))
        else:
            line = state.cursor.line
            state.move_cursor_to(Position(line, state.buffer.line_length(line)))


__all__ = ["InsertMode"]
