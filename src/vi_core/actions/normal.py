"""Normal mode editing verbs: delete, yank, put, join, case and text objects."""

from __future__ import annotations

from typing import Optional

from vi_core.buffer import Characters, Lines, Position, RegisterContent
from vi_core.modes.base_mode import ModeContext
from vi_core.motions import TextRange

from . import core
from .text import change_case


def _times(count: Optional[int]) -> int:
    return max(count or 1, 1)


def delete_chars(
    context: ModeContext, count: Optional[int], register: Optional[str]
) -> bool:
    """``x``: remove characters under and after the cursor on this line."""

    state = context.state
    line, column = state.cursor.line, state.cursor.column
    length = state.buffer.line_length(line)
    if column >= length:
        return False
    end = Position(line, min(column + _times(count), length) - 1)
    state.save_undo_state("delete_chars")
    removed = state.buffer.substring(state.cursor.position, end)
    state.buffer.delete_range(state.cursor.position, end)
    state.mark_dirty()
    core.store_register(state, register, Characters(removed), default="-")
    state.move_cursor_to(state.cursor.position)
    return True


def delete_to_line_end(context: ModeContext, register: Optional[str]) -> bool:
    """``D``: remove from the cursor to the end of the line."""

    state = context.state
    line = state.cursor.line
    length = state.buffer.line_length(line)
    if state.cursor.column >= length:
        return False
    return delete_chars(context, length - state.cursor.column, register)


def delete_lines(
    context: ModeContext, count: Optional[int], register: Optional[str]
) -> bool:
    """``dd``: remove ``count`` whole lines starting at the cursor."""

    state = context.state
    first = state.cursor.line
    last = min(first + _times(count), state.buffer.line_count()) - 1
    state.save_undo_state("delete_lines")
    removed = state.buffer.delete_lines(first, last)
    state.mark_dirty()
    core.store_register(state, register, Lines(removed), default="1")
    target = min(first, state.buffer.line_count() - 1)
    state.move_cursor_to(Position(target, 0))
    return True


def yank_lines(
    context: ModeContext, count: Optional[int], register: Optional[str]
) -> str:
    """``yy``: copy ``count`` whole lines; returns the register used."""

    state = context.state
    first = state.cursor.line
    last = min(first + _times(count), state.buffer.line_count())
    content = Lines(state.buffer.lines()[first:last])
    return core.store_register(state, register, content, default="0")


def put(
    context: ModeContext,
    register: Optional[str],
    *,
    before: bool = False,
    count: Optional[int] = None,
) -> bool:
    """``p``/``P``: paste after/before the cursor (lines go below/above)."""

    state = context.state
    registers = state.registers
    content = registers.get(register) if register else registers.put_register()
    if content is None:
        return False
    if not (content.lines if isinstance(content, Lines) else content.text):
        return False

    state.save_undo_state("put")
    if isinstance(content, Lines):
        lines = list(content.lines) * _times(count)
        index = state.cursor.line if before else state.cursor.line + 1
        state.buffer.insert_lines(index, lines)
        state.move_cursor_to(Position(index, 0))
    else:
        text = content.text * _times(count)
        line, column = state.cursor.line, state.cursor.column
        length = state.buffer.line_length(line)
        at = Position(line, min(column if before else column + 1, length))
        end = state.buffer.insert(at, text)
        state.move_cursor_to(Position(end.line, max(end.column - 1, 0)))
    state.mark_dirty()
    context.bus.emit("normal.put", {"register": register or '"', "content": content})
    return True


def open_line(context: ModeContext, *, above: bool = False) -> None:
    """``o``/``O``: insert an empty line and put the cursor on it."""

    state = context.state
    index = state.cursor.line if above else state.cursor.line + 1
    state.buffer.insert_lines(index, [""])
    state.cursor.move_to(Position(index, 0))
    state.mark_dirty()


def join_lines(context: ModeContext, count: Optional[int]) -> bool:
    """``J``: join the next line(s) onto this one with a single space."""

    state = context.state
    joins = max(_times(count) - 1, 1)
    if state.cursor.line + 1 >= state.buffer.line_count():
        return False
    state.save_undo_state("join_lines")
    seam = state.cursor.position
    for _ in range(joins):
        line = state.cursor.line
        if line + 1 >= state.buffer.line_count():
            break
        following = state.buffer.line(line + 1)
        indent = len(following) - len(following.lstrip())
        if indent:
            state.buffer.delete_range(
                Position(line + 1, 0), Position(line + 1, indent - 1)
            )
        separator = " " if state.buffer.line(line) and following.strip() else ""
        seam = state.buffer.join_lines(line, separator)
    state.mark_dirty()
    state.move_cursor_to(seam)
    return True


def delete_text_range(
    context: ModeContext,
    text_range: TextRange,
    register: Optional[str],
    *,
    keep_line: bool = False,
    label: str = "delete_object",
) -> RegisterContent:
    """Remove a text object and park the cursor where it started.

    Line-wise ranges go to register ``1`` as ``Lines``; with ``keep_line`` a
    single empty line is left in their place (the ``c`` operator). The
    cursor is not clamped, so Insert mode can start past the line end.
    """

    state = context.state
    start, end = text_range.start, text_range.end
    state.save_undo_state(label)
    if text_range.line_wise and not keep_line:
        removed: RegisterContent = Lines(
            state.buffer.delete_lines(start.line, end.line)
        )
        target = Position(min(start.line, state.buffer.line_count() - 1), 0)
    elif text_range.line_wise:
        removed = Lines(state.buffer.lines()[start.line : end.line + 1])
        state.buffer.delete_range(start, end)
        target = start
    else:
        removed = Characters(state.buffer.substring(start, end))
        state.buffer.delete_range(start, end)
        target = start
    state.mark_dirty()
    default = "1" if text_range.line_wise else "-"
    core.store_register(state, register, removed, default=default)
    state.cursor.move_to(target)
    return removed


def yank_text_range(
    context: ModeContext, text_range: TextRange, register: Optional[str]
) -> str:
    """Copy a text object; the cursor moves to its start."""

    state = context.state
    start, end = text_range.start, text_range.end
    if text_range.line_wise:
        content: RegisterContent = Lines(
            state.buffer.lines()[start.line : end.line + 1]
        )
    else:
        content = Characters(state.buffer.substring(start, end))
    state.move_cursor_to(start)
    return core.store_register(state, register, content, default="0")


def toggle_case(context: ModeContext, count: Optional[int]) -> bool:
    """``~``: swap the case of ``count`` characters and step past them."""

    state = context.state
    line, column = state.cursor.line, state.cursor.column
    length = state.buffer.line_length(line)
    if column >= length:
        return False
    last = min(column + _times(count), length) - 1
    change_case(context, state.cursor.position, Position(line, last), "~")
    state.move_cursor_to(Position(line, last + 1))
    return True


__all__ = [
    "delete_chars",
    "delete_lines",
    "delete_text_range",
    "delete_to_line_end",
    "join_lines",
    "open_line",
    "put",
    "toggle_case",
    "yank_lines",
    "yank_text_range",
]
