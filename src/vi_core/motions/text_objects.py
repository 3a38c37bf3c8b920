"""Text objects: the ranges named by ``iw``, ``a"``, ``i(``, ``ap`` and friends.

Ranges are inclusive and ordered, like every range the buffer accepts.
Quotes are searched on the cursor line only; brackets may span lines;
paragraphs are line-wise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from vi_core.buffer import Cursor, Position, TextBuffer

from .engine import BLANK, char_class

QUOTES = frozenset("\"'`")
BRACKET_PAIRS = {
    "(": ("(", ")"),
    ")": ("(", ")"),
    "b": ("(", ")"),
    "[": ("[", "]"),
    "]": ("[", "]"),
    "{": ("{", "}"),
    "}": ("{", "}"),
    "B": ("{", "}"),
    "<": ("<", ">"),
    ">": ("<", ">"),
}
OBJECT_KEYS = frozenset({"w", "W", "p"}) | QUOTES | frozenset(BRACKET_PAIRS)


@dataclass(frozen=True, slots=True)
class TextRange:
    start: Position
    end: Position
    line_wise: bool = False


class TextObjectEngine:
    """Resolves text objects around the cursor; never mutates anything."""

    def __init__(self, buffer: TextBuffer, cursor: Cursor) -> None:
        self.buffer = buffer
        self.cursor = cursor

    def select(self, key: str, *, inner: bool) -> Optional[TextRange]:
        """Range for object ``key`` (``w``, ``"``, ``(``...), or ``None``."""

        if key in ("w", "W"):
            return self.word(inner=inner, big=key == "W")
        if key in QUOTES:
            return self.quote(key, inner=inner)
        if key in BRACKET_PAIRS:
            opener, closer = BRACKET_PAIRS[key]
            return self.bracket(opener, closer, inner=inner)
        if key == "p":
            return self.paragraph(inner=inner)
        return None

    # -- words ------------------------------------------------------------

    def word(self, *, inner: bool, big: bool = False) -> Optional[TextRange]:
        row = self.cursor.line
        text = self.buffer.line(row)
        if not text:
            return None
        col = min(self.cursor.column, len(text) - 1)
        kind = char_class(text[col], big=big)
        start = col
        while start > 0 and char_class(text[start - 1], big=big) == kind:
            start -= 1
        end = col
        while end + 1 < len(text) and char_class(text[end + 1], big=big) == kind:
            end += 1
        if not inner and kind != BLANK:
            trailing = end
            while trailing + 1 < len(text) and text[trailing + 1].isspace():
                trailing += 1
            if trailing > end:
                end = trailing
            else:
                while start > 0 and text[start - 1].isspace():
                    start -= 1
        return TextRange(Position(row, start), Position(row, end))

    # -- quotes -----------------------------------------------------------

    def quote(self, quote: str, *, inner: bool) -> Optional[TextRange]:
        row = self.cursor.line
        text = self.buffer.line(row)
        if not text:
            return None
        col = min(self.cursor.column, len(text) - 1)
        if text[col] == quote and quote in text[:col]:
            close = col
            opening = text.rfind(quote, 0, col)
        else:
            opening = text.rfind(quote, 0, col + 1)
            close = text.find(quote, opening + 1 if opening >= 0 else col)
        if opening < 0 or close <= opening:
            return None
        if inner:
            if close - opening == 1:
                return None
            return TextRange(Position(row, opening + 1), Position(row, close - 1))
        return TextRange(Position(row, opening), Position(row, close))

    # -- brackets ---------------------------------------------------------

    def bracket(
        self, opener: str, closer: str, *, inner: bool
    ) -> Optional[TextRange]:
        here = self._cursor_cell()
        if here is None:
            return None
        behind = self._cells(here, -1)
        if self._char(here) == closer:
            next(behind)
        opening = _unmatched(behind, opener, closer)
        if opening is None:
            return None
        ahead = self._cells(opening, 1)
        next(ahead)
        close = _unmatched(ahead, closer, opener)
        if close is None:
            return None
        if not inner:
            return TextRange(opening, close)
        if self._owns_lines(opening, close):
            first, last = opening.line + 1, close.line - 1
            if last < first:
                return None
            end_column = max(0, self.buffer.line_length(last) - 1)
            return TextRange(
                Position(first, 0), Position(last, end_column), line_wise=True
            )
        start = self._after(opening)
        end = self._before(close)
        if end < start:
            return None
        return TextRange(start, end)

    # -- paragraphs -------------------------------------------------------

    def paragraph(self, *, inner: bool) -> TextRange:
        first = last = self.cursor.line
        blank = self._is_blank(first)
        count = self.buffer.line_count()
        while first > 0 and self._is_blank(first - 1) == blank:
            first -= 1
        while last + 1 < count and self._is_blank(last + 1) == blank:
            last += 1
        if not inner:
            if blank:
                while last + 1 < count and not self._is_blank(last + 1):
                    last += 1
            elif last + 1 < count:
                while last + 1 < count and self._is_blank(last + 1):
                    last += 1
            else:
                while first > 0 and self._is_blank(first - 1):
                    first -= 1
        end_column = max(0, self.buffer.line_length(last) - 1)
        return TextRange(
            Position(first, 0), Position(last, end_column), line_wise=True
        )

    # -- helpers ----------------------------------------------------------

    def _is_blank(self, row: int) -> bool:
        return not self.buffer.line(row).strip()

    def _char(self, position: Position) -> str:
        return self.buffer.line(position.line)[position.column]

    def _cursor_cell(self) -> Optional[Position]:
        text = self.buffer.line(self.cursor.line)
        if not text:
            return None
        return Position(self.cursor.line, min(self.cursor.column, len(text) - 1))

    def _cells(self, origin: Position, step: int) -> Iterator[Tuple[Position, str]]:
        """Walk character cells from ``origin`` (inclusive) in ``step`` order."""

        row, col = origin.line, origin.column
        while 0 <= row < self.buffer.line_count():
            text = self.buffer.line(row)
            while 0 <= col < len(text):
                yield Position(row, col), text[col]
                col += step
            row += step
            if 0 <= row < self.buffer.line_count():
                col = 0 if step > 0 else self.buffer.line_length(row) - 1

    def _owns_lines(self, opening: Position, close: Position) -> bool:
        """True when the pair sits on lines of its own around a block."""

        if opening.line == close.line:
            return False
        after = self.buffer.line(opening.line)[opening.column + 1 :]
        before = self.buffer.line(close.line)[: close.column]
        return not after.strip() and not before.strip()

    def _after(self, position: Position) -> Position:
        if position.column + 1 < self.buffer.line_length(position.line):
            return position.with_column(position.column + 1)
        return Position(position.line + 1, 0)

    def _before(self, position: Position) -> Position:
        if position.column > 0:
            return position.with_column(position.column - 1)
        row = position.line - 1
        return Position(row, max(0, self.buffer.line_length(row) - 1))


def _unmatched(
    cells: Iterator[Tuple[Position, str]], target: str, nested: str
) -> Optional[Position]:
    depth = 0
    for position, char in cells:
        if char == nested:
            depth += 1
        elif char == target:
            if depth == 0:
                return position
            depth -= 1
    return None


__all__ = ["OBJECT_KEYS", "TextObjectEngine", "TextRange"]
