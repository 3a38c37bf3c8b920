"""Cursor motions shared by Normal and Visual modes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Optional

from vi_core.buffer import Position
from vi_core.motions import MotionEngine

if TYPE_CHECKING:
    from vi_core.editor.state import EditorState

Motion = Callable[["EditorState", Optional[int]], None]


def _times(count: Optional[int]) -> int:
    return max(count or 1, 1)


def _repeat(query: Callable[[MotionEngine], Position]) -> Motion:
    def motion(state: "EditorState", count: Optional[int]) -> None:
        for _ in range(_times(count)):
            target = query(MotionEngine(state.buffer, state.cursor))
            if target == state.cursor.position:
                break
            state.move_cursor_to(target)

    return motion


def _once(query: Callable[[MotionEngine], Position]) -> Motion:
    def motion(state: "EditorState", count: Optional[int]) -> None:
        del count
        state.move_cursor_to(query(MotionEngine(state.buffer, state.cursor)))

    return motion


def _left(state: "EditorState", count: Optional[int]) -> None:
    state.move_cursor_left(_times(count))


def _right(state: "EditorState", count: Optional[int]) -> None:
    state.move_cursor_right(_times(count))


def _up(state: "EditorState", count: Optional[int]) -> None:
    state.move_cursor_up(_times(count))


def _down(state: "EditorState", count: Optional[int]) -> None:
    state.move_cursor_down(_times(count))


def _line_end(state: "EditorState", count: Optional[int]) -> None:
    if count and count > 1:
        state.move_cursor_down(count - 1)
    state.move_cursor_to(MotionEngine(state.buffer, state.cursor).line_end())


def _file_end(state: "EditorState", count: Optional[int]) -> None:
    engine = MotionEngine(state.buffer, state.cursor)
    state.move_cursor_to(engine.go_to_line(count) if count else engine.file_end())


def go_to_top(state: "EditorState", count: Optional[int]) -> None:
    """``gg``: first line, or line ``count`` when given."""

    engine = MotionEngine(state.buffer, state.cursor)
    state.move_cursor_to(engine.go_to_line(count) if count else engine.file_start())


MOTIONS: Dict[str, Motion] = {
    "h": _left,
    "LEFT": _left,
    "l": _right,
    "RIGHT": _right,
    "k": _up,
    "UP": _up,
    "j": _down,
    "DOWN": _down,
    "w": _repeat(lambda engine: engine.next_word()),
    "W": _repeat(lambda engine: engine.next_word(big=True)),
    "b": _repeat(lambda engine: engine.previous_word()),
    "B": _repeat(lambda engine: engine.previous_word(big=True)),
    "e": _repeat(lambda engine: engine.end_of_word()),
    "E": _repeat(lambda engine: engine.end_of_word(big=True)),
    "0": _once(lambda engine: engine.line_start()),
    "HOME": _once(lambda engine: engine.line_start()),
    "^": _once(lambda engine: engine.first_non_blank()),
    "$": _line_end,
    "END": _line_end,
    "G": _file_end,
    "%": _once(lambda engine: engine.match_bracket()),
    "}": _repeat(lambda engine: engine.next_paragraph()),
    "{": _repeat(lambda engine: engine.previous_paragraph()),
}


__all__ = ["MOTIONS", "Motion", "go_to_top"]
