"""Visual modes: character, line and block selections over the buffer."""

from __future__ import annotations

from typing import Optional

from vi_core.actions import core as core_actions
from vi_core.actions import motion as motion_actions
from vi_core.actions import text as text_actions
from vi_core.actions import visual as visual_actions
from vi_core.buffer import Position
from vi_core.motions import TextObjectEngine
from vi_core.runtime import telemetry
from vi_core.selection import SelectionState, selection_range

from .base_mode import (
    CTRL_V,
    EditorMode,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
    unhandled,
)

ENTRY_KEYS = {
    EditorMode.VISUAL: "v",
    EditorMode.VISUAL_LINE: "V",
    EditorMode.VISUAL_BLOCK: CTRL_V,
}

SELECTION_MOTIONS = frozenset(
    {"h", "j", "k", "l", "w", "b", "e", "W", "B", "E", "0", "^", "$"}
    | {"LEFT", "RIGHT", "UP", "DOWN", "HOME", "END"}
)


class VisualMode(Mode):
    """One handler registered once per visual variant.

    The selection runs from the anchor fixed on entry to the cursor, unless
    :meth:`pin_end` fixed the far end; the next keystroke drops the pin.
    """

    def __init__(
        self, context: ModeContext, *, variant: EditorMode = EditorMode.VISUAL
    ) -> None:
        super().__init__(context)
        if variant not in ENTRY_KEYS:
            raise ValueError(f"'{variant}' is not a visual mode")
        self.name = variant
        self.selection = SelectionState(
            line_wise=variant == EditorMode.VISUAL_LINE,
            block_wise=variant == EditorMode.VISUAL_BLOCK,
        )
        self.logger = telemetry.get_logger("vi_core.modes.visual")
        # "i" or "a" while waiting for a text object key.
        self._object_prefix: Optional[str] = None

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.selection.start = self.state.cursor.position
        self.selection.forced_end = None
        self._object_prefix = None
        visual_actions.publish_selection(self.context, self.selection)

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._object_prefix = None
        self.selection.reset()

    def pin_end(self, position: Position) -> None:
        self.selection.forced_end = position
        self.state.move_cursor_to(position)

    def selection_range(self) -> tuple[Position, Position]:
        return selection_range(
            self.selection, self.state.buffer, self.state.cursor.position
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        self.selection.forced_end = None
        char = key.key
        if key.is_cancel:
            return core_actions.exit_to_normal_mode("exit_visual")
        if self._object_prefix is not None:
            inner, self._object_prefix = self._object_prefix == "i", None
            return self._select_object(char, inner=inner)
        if char == ENTRY_KEYS[self.name]:
            return core_actions.exit_to_normal_mode("exit_visual")

        if char in SELECTION_MOTIONS:
            motion_actions.MOTIONS[char](self.state, 1)
            visual_actions.publish_selection(self.context, self.selection)
            return ModeResult(consumed=True, message="motion")

        if char == "o":
            visual_actions.swap_anchor(self.context, self.selection)
            return ModeResult(consumed=True, message="swap_anchor")

        if char in ("i", "a"):
            self._object_prefix = char
            return ModeResult(
                consumed=True, status="pending", message="awaiting_object"
            )

        if char in ("d", "x", "y", "c"):
            start, end = self.selection_range()
            return self._operate(char, start, end)

        if char in text_actions.CASE_CHANGES:
            start, end = self.selection_range()
            text_actions.change_case(self.context, start, end, char)
            self.state.move_cursor_to(start)
            return core_actions.exit_to_normal_mode("change_case")

        if char in (">", "<"):
            start, end = self.selection_range()
            text_actions.shift_lines(
                self.context, start.line, end.line, right=char == ">"
            )
            self.state.move_cursor_to(start.with_column(0))
            return core_actions.exit_to_normal_mode("shift_lines")

        return unhandled()

    def _select_object(self, key: str, *, inner: bool) -> ModeResult:
        engine = TextObjectEngine(self.state.buffer, self.state.cursor)
        text_range = engine.select(key, inner=inner)
        if text_range is None:
            return unhandled()
        self.selection.start = text_range.start
        self.state.cursor.move_to(text_range.end)
        visual_actions.publish_selection(self.context, self.selection)
        return ModeResult(consumed=True, message="text_object")

    def _operate(self, char: str, start: Position, end: Position) -> ModeResult:
        if char == "y":
            visual_actions.yank_selection(self.context, start, end)
            self.logger.debug(f"yanked {start} -> {end}")
            return core_actions.exit_to_normal_mode("yank")
        if char == "c":
            visual_actions.delete_selection(
                self.context, start, end, label="visual_change"
            )
            return ModeResult(
                consumed=True, switch_to=EditorMode.INSERT, message="change"
            )
        visual_actions.delete_selection(self.context, start, end)
        return core_actions.exit_to_normal_mode("delete")


__all__ = ["ENTRY_KEYS", "VisualMode"]
