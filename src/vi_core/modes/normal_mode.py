"""Normal mode: counts, register prefixes, motions and editing verbs."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from vi_core.actions import core as core_actions
from vi_core.actions import motion as motion_actions
from vi_core.actions import normal as normal_actions
from vi_core.actions import text as text_actions
from vi_core.buffer import Position
from vi_core.buffer.registers import is_valid_name
from vi_core.motions import MotionEngine, TextObjectEngine, TextRange
from vi_core.runtime import telemetry

from .base_mode import (
    CTRL_R,
    CTRL_V,
    EditorMode,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
    unhandled,
)

Command = Callable[[Optional[int]], ModeResult]

OPERATORS = frozenset({"d", "c", "y"})
FIND_KEYS = frozenset({"f", "F", "t", "T"})
MARK_JUMPS = frozenset({"'", "`"})
PREFIXES = OPERATORS | FIND_KEYS | MARK_JUMPS | {"g", "m", ">", "<", '"'}


def _done(message: str) -> ModeResult:
    return ModeResult(consumed=True, message=message)


def _pending(message: str) -> ModeResult:
    return ModeResult(consumed=True, status="pending", message=message)


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vi_core.modes.normal")
        self._count = ""
        self._prefix: Optional[str] = None
        self._register: Optional[str] = None
        # (char, forward, till) of the last f/F/t/T, for ; and ,
        self._last_find: Optional[Tuple[str, bool, bool]] = None
        self._commands: Dict[str, Command] = {
            "x": self._delete_chars,
            "D": self._delete_to_line_end,
            "p": self._put_after,
            "P": self._put_before,
            "J": self._join,
            "~": self._toggle_case,
            ";": self._repeat_find,
            ",": self._reverse_find,
            "u": self._undo,
            CTRL_R: self._redo,
            "i": self._insert,
            "a": self._append,
            "I": self._insert_at_first_non_blank,
            "A": self._append_at_line_end,
            "o": self._open_below,
            "O": self._open_above,
            "v": self._visual(EditorMode.VISUAL),
            "V": self._visual(EditorMode.VISUAL_LINE),
            CTRL_V: self._visual(EditorMode.VISUAL_BLOCK),
        }

    @property
    def pending(self) -> str:
        """Keys typed so far towards an incomplete command."""

        register = f'"{self._register}' if self._register else ""
        return register + self._count + (self._prefix or "")

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._reset()

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.is_cancel:
            self._reset()
            return _done("cancel")

        char = key.key
        if self._prefix == '"':
            self._prefix = None
            if not is_valid_name(char):
                self._reset()
                return unhandled()
            self._register = char
            return _pending("register")

        # The key after a prefix is its argument, digits included (f1, m2).
        if self._prefix is not None:
            prefix, self._prefix = self._prefix, None
            result = self._complete(prefix, char)
            if result.status == "pending":
                return result
            return self._finish(result)

        if char.isdigit() and (char != "0" or self._count):
            self._count += char
            return _pending("count")

        if char in PREFIXES:
            self._prefix = char
            return _pending("awaiting_sequence")

        motion = motion_actions.MOTIONS.get(char)
        if motion is not None:
            motion(self.state, self._take_count())
            return self._finish(_done("motion"))

        command = self._commands.get(char)
        if command is None:
            self._reset()
            return unhandled()
        return self._finish(command(self._take_count()))

    # -- prefixes ------------------------------------------------------------

    def _complete(self, prefix: str, char: str) -> ModeResult:
        if prefix in OPERATORS and char in ("i", "a"):
            self._prefix = prefix + char
            return _pending("awaiting_object")

        count = self._take_count()
        if len(prefix) == 2:
            return self._apply_object(prefix[0], prefix[1] == "i", char)
        if prefix in FIND_KEYS:
            self._last_find = (char, prefix in ("f", "t"), prefix in ("t", "T"))
            return self._find(count, reverse=False)
        if prefix == "m":
            return _done("mark") if self.state.set_mark(char) else unhandled()
        if prefix in MARK_JUMPS:
            return self._jump_to_mark(char, exact=prefix == "`")
        if char != prefix and prefix != "g":
            self.logger.debug(f"unknown sequence {prefix}{char}")
            return unhandled()

        if prefix == "g" and char == "g":
            motion_actions.go_to_top(self.state, count)
            return _done("motion")
        if prefix == "d":
            normal_actions.delete_lines(self.context, count, self._register)
            return _done("delete_lines")
        if prefix == "c":
            return self._change_lines(count)
        if prefix == "y":
            register = normal_actions.yank_lines(self.context, count, self._register)
            return _done(f"yank::{register}")
        if prefix in (">", "<"):
            return self._shift(count, right=prefix == ">")
        self.logger.debug(f"unknown sequence {prefix}{char}")
        return unhandled()

    def _apply_object(self, operator: str, inner: bool, key: str) -> ModeResult:
        engine = TextObjectEngine(self.state.buffer, self.state.cursor)
        text_range = engine.select(key, inner=inner)
        if text_range is None:
            return unhandled()
        if operator == "y":
            register = normal_actions.yank_text_range(
                self.context, text_range, self._register
            )
            return _done(f"yank::{register}")
        if operator == "c":
            return self._change(text_range)
        normal_actions.delete_text_range(self.context, text_range, self._register)
        self.state.move_cursor_to(self.state.cursor.position)
        return _done("delete_object")

    def _change(self, text_range: TextRange) -> ModeResult:
        normal_actions.delete_text_range(
            self.context,
            text_range,
            self._register,
            keep_line=True,
            label="change",
        )
        return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="change")

    def _change_lines(self, count: Optional[int]) -> ModeResult:
        first = self.state.cursor.line
        last = min(first + max(count or 1, 1), self.state.buffer.line_count()) - 1
        end = Position(last, max(0, self.state.buffer.line_length(last) - 1))
        return self._change(TextRange(Position(first, 0), end, line_wise=True))

    def _shift(self, count: Optional[int], *, right: bool) -> ModeResult:
        first = self.state.cursor.line
        last = min(first + max(count or 1, 1), self.state.buffer.line_count()) - 1
        text_actions.shift_lines(self.context, first, last, right=right)
        engine = MotionEngine(self.state.buffer, self.state.cursor)
        self.state.move_cursor_to(engine.first_non_blank(first))
        return _done("shift_lines")

    def _jump_to_mark(self, name: str, *, exact: bool) -> ModeResult:
        position = self.state.mark(name)
        if position is None:
            return _done("mark_not_set")
        if exact:
            self.state.move_cursor_to(position)
        else:
            engine = MotionEngine(self.state.buffer, self.state.cursor)
            self.state.move_cursor_to(engine.first_non_blank(position.line))
        return _done("motion")

    # -- character search ----------------------------------------------------

    def _find(self, count: Optional[int], *, reverse: bool) -> ModeResult:
        if self._last_find is None:
            return unhandled()
        char, forward, till = self._last_find
        for _ in range(max(count or 1, 1)):
            engine = MotionEngine(self.state.buffer, self.state.cursor)
            target = engine.find_char(char, forward=forward != reverse, till=till)
            if target == self.state.cursor.position:
                break
            self.state.move_cursor_to(target)
        return _done("motion")

    def _repeat_find(self, count: Optional[int]) -> ModeResult:
        return self._find(count, reverse=False)

    def _reverse_find(self, count: Optional[int]) -> ModeResult:
        return self._find(count, reverse=True)

    # -- editing verbs -------------------------------------------------------

    def _delete_chars(self, count: Optional[int]) -> ModeResult:
        normal_actions.delete_chars(self.context, count, self._register)
        return _done("delete_chars")

    def _delete_to_line_end(self, count: Optional[int]) -> ModeResult:
        del count
        normal_actions.delete_to_line_end(self.context, self._register)
        return _done("delete_to_line_end")

    def _put_after(self, count: Optional[int]) -> ModeResult:
        normal_actions.put(self.context, self._register, count=count)
        return _done("put")

    def _put_before(self, count: Optional[int]) -> ModeResult:
        normal_actions.put(self.context, self._register, before=True, count=count)
        return _done("put")

    def _join(self, count: Optional[int]) -> ModeResult:
        normal_actions.join_lines(self.context, count)
        return _done("join_lines")

    def _toggle_case(self, count: Optional[int]) -> ModeResult:
        normal_actions.toggle_case(self.context, count)
        return _done("toggle_case")

    def _undo(self, count: Optional[int]) -> ModeResult:
        steps = 0
        for _ in range(max(count or 1, 1)):
            if not self.state.undo():
                break
            steps += 1
        self.context.bus.emit("buffer.undo", {"steps": steps})
        return _done("undo" if steps else "already_at_oldest_change")

    def _redo(self, count: Optional[int]) -> ModeResult:
        steps = 0
        for _ in range(max(count or 1, 1)):
            if not self.state.redo():
                break
            steps += 1
        self.context.bus.emit("buffer.redo", {"steps": steps})
        return _done("redo" if steps else "already_at_newest_change")

    # -- mode entries --------------------------------------------------------

    def _insert(self, count: Optional[int]) -> ModeResult:
        del count
        return core_actions.enter_insert_mode(self.state)

    def _append(self, count: Optional[int]) -> ModeResult:
        del count
        result = core_actions.enter_insert_mode(self.state)
        self.state.move_cursor_right(1, past_end=True)
        return result

    def _insert_at_first_non_blank(self, count: Optional[int]) -> ModeResult:
        del count
        result = core_actions.enter_insert_mode(self.state)
        engine = MotionEngine(self.state.buffer, self.state.cursor)
        self.state.cursor.move_to(engine.first_non_blank())
        return result

    def _append_at_line_end(self, count: Optional[int]) -> ModeResult:
        del count
        result = core_actions.enter_insert_mode(self.state)
        line = self.state.cursor.line
        self.state.cursor.move_to(Position(line, self.state.buffer.line_length(line)))
        return result

    def _open_below(self, count: Optional[int]) -> ModeResult:
        del count
        result = core_actions.enter_insert_mode(self.state)
        normal_actions.open_line(self.context)
        return result

    def _open_above(self, count: Optional[int]) -> ModeResult:
        del count
        result = core_actions.enter_insert_mode(self.state)
        normal_actions.open_line(self.context, above=True)
        return result

    @staticmethod
    def _visual(variant: EditorMode) -> Command:
        def enter(count: Optional[int]) -> ModeResult:
            del count
            return core_actions.enter_visual_mode(variant)

        return enter

    # -- bookkeeping ---------------------------------------------------------

    def _take_count(self) -> Optional[int]:
        count = int(self._count) if self._count else None
        self._count = ""
        return count

    def _finish(self, result: ModeResult) -> ModeResult:
        self._reset()
        return result

    def _reset(self) -> None:
        self._count = ""
        self._prefix = None
        self._register = None


__all__ = ["NormalMode"]
