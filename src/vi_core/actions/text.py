"""Case changes and line shifts shared by Normal and Visual modes."""

from __future__ import annotations

from typing import Callable, Dict

from vi_core.buffer import Position
from vi_core.modes.base_mode import ModeContext

CASE_CHANGES: Dict[str, Callable[[str], str]] = {
    "~": str.swapcase,
    "u": str.lower,
    "U": str.upper,
}


def change_case(context: ModeContext, start: Position, end: Position, how: str) -> bool:
    """Rewrite the inclusive range with ``CASE_CHANGES[how]``."""

    state = context.state
    original = state.buffer.substring(start, end)
    changed = CASE_CHANGES[how](original)
    if changed == original:
        return False
    state.save_undo_state("change_case")
    state.buffer.delete_range(start, end)
    state.buffer.insert(start, changed)
    state.mark_dirty()
    context.bus.emit("buffer.case", {"how": how, "range": (start, end)})
    return True


def shift_lines(context: ModeContext, first: int, last: int, *, right: bool) -> bool:
    """``>``/``<``: indent or dedent lines ``first..last`` by the shift width.

    Empty lines are never indented; dedent removes at most one shift width of
    leading spaces.
    """

    state = context.state
    width = state.config.shift_width
    updates = []
    for index in range(first, last + 1):
        text = state.buffer.line(index)
        if right:
            shifted = " " * width + text if text else text
        else:
            spaces = len(text) - len(text.lstrip(" "))
            shifted = text[min(spaces, width) :]
        if shifted != text:
            updates.append((index, shifted))
    if not updates:
        return False
    state.save_undo_state("shift_lines")
    for index, shifted in updates:
        state.buffer.replace_line(index, shifted)
    state.mark_dirty()
    context.bus.emit(
        "buffer.shift", {"lines": (first, last), "direction": ">" if right else "<"}
    )
    return True


__all__ = ["CASE_CHANGES", "change_case", "shift_lines"]
