"""Selection overlay compositing over ANSI-coloured text.

Syntax highlighting hands the renderer lines that already carry SGR colour
sequences (``ESC [ params m``). The overlay has to survive those sequences,
including the resets that close each coloured token, without changing
anything outside the selected span.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from vi_core.buffer import Position

ESCAPE = "\x1b"
SEQUENCE_END = "m"
SELECTION_COLOR = "\x1b[48;5;242m"
RESET = "\x1b[0m"


def is_selected(line: int, col: int, start: Position, end: Position) -> bool:
    """Membership test for an inclusive, already ordered range."""

    if line < start.line or line > end.line:
        return False
    if start.line == end.line:
        return start.column <= col <= end.column
    if line == start.line:
        return col >= start.column
    if line == end.line:
        return col <= end.column
    return True


def _tokens(text: str) -> Iterator[Tuple[bool, str]]:
    """Yield ``(is_control, chunk)`` pairs.

    A control chunk runs from ESC up to and including the terminating ``m``;
    an unterminated escape swallows the rest of the line as one control chunk.
    """

    index = 0
    while index < len(text):
        char = text[index]
        if char != ESCAPE:
            yield False, char
            index += 1
            continue
        stop = text.find(SEQUENCE_END, index + 1)
        if stop == -1:
            yield True, text[index:]
            return
        yield True, text[index : stop + 1]
        index = stop + 1


def strip_ansi(text: str) -> str:
    return "".join(chunk for control, chunk in _tokens(text) if not control)


def apply_selection_highlighting(
    to: str, line: int, raw: str, start: Position, end: Position
) -> str:
    """Composite the selection colour onto ``to``.

    ``raw`` is the same line without control sequences; its length bounds
    which visible characters can be selected (anything the renderer appends
    past the real content is never highlighted).
    """

    out: list[str] = []
    column = 0
    inside = False
    for control, chunk in _tokens(to):
        if control:
            out.append(chunk)
            if inside and chunk != SELECTION_COLOR:
                out.append(SELECTION_COLOR)
            continue

        selected = column < len(raw) and is_selected(line, column, start, end)
        if selected and not inside:
            out.append(SELECTION_COLOR)
        elif inside and not selected:
            out.append(RESET)
        out.append(chunk)
        inside = selected
        column += 1

    if inside:
        out.append(RESET)
    return "".join(out)


__all__ = [
    "RESET",
    "SELECTION_COLOR",
    "apply_selection_highlighting",
    "is_selected",
    "strip_ansi",
]
