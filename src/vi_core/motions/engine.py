"""Read-only motion queries over a buffer and cursor."""

from __future__ import annotations

from vi_core.buffer import Cursor, Position, TextBuffer

BLANK = 0
WORD = 1
PUNCTUATION = 2

_BRACKETS = {
    "(": (")", 1),
    ")": ("(", -1),
    "[": ("]", 1),
    "]": ("[", -1),
    "{": ("}", 1),
    "}": ("{", -1),
}


def char_class(char: str, *, big: bool = False) -> int:
    """Classify ``char`` for word motions.

    Small words split alphanumerics/underscore from other punctuation; big
    words (``W``/``B``/``E``) treat every non-blank as one class.
    """

    if char.isspace():
        return BLANK
    if big or char.isalnum() or char == "_":
        return WORD
    return PUNCTUATION


class MotionEngine:
    """Computes motion targets; never mutates the buffer or cursor.

    Every query is total: it returns a position inside the buffer for any
    cursor, and word motions that start on an empty line return that line's
    start.
    """

    def __init__(self, buffer: TextBuffer, cursor: Cursor) -> None:
        self.buffer = buffer
        self.cursor = cursor

    # -- word motions -----------------------------------------------------

    def next_word(self, *, big: bool = False) -> Position:
        row, col = self.cursor.line, self.cursor.column
        text = self.buffer.line(row)
        if not text:
            return Position(row, 0)

        if col < len(text):
            current = char_class(text[col], big=big)
            if current != BLANK:
                while col < len(text) and char_class(text[col], big=big) == current:
                    col += 1
        col = _skip_blanks(text, col)
        if col < len(text):
            return Position(row, col)

        for row in range(row + 1, self.buffer.line_count()):
            text = self.buffer.line(row)
            if not text:
                return Position(row, 0)
            col = _skip_blanks(text, 0)
            if col < len(text):
                return Position(row, col)
        return self._last_cell()

    def previous_word(self, *, big: bool = False) -> Position:
        row, col = self.cursor.line, self.cursor.column
        text = self.buffer.line(row)
        if not text:
            return Position(row, 0)

        col = min(col, len(text)) - 1
        while True:
            while col >= 0 and text[col].isspace():
                col -= 1
            if col >= 0:
                current = char_class(text[col], big=big)
                while col > 0 and char_class(text[col - 1], big=big) == current:
                    col -= 1
                return Position(row, col)
            row -= 1
            if row < 0:
                return Position(0, 0)
            text = self.buffer.line(row)
            if not text:
                return Position(row, 0)
            col = len(text) - 1

    def end_of_word(self, *, big: bool = False) -> Position:
        row, col = self.cursor.line, self.cursor.column
        text = self.buffer.line(row)
        if not text:
            return Position(row, 0)

        col += 1
        while True:
            col = _skip_blanks(text, col)
            if col < len(text):
                current = char_class(text[col], big=big)
                while (
                    col + 1 < len(text)
                    and char_class(text[col + 1], big=big) == current
                ):
                    col += 1
                return Position(row, col)
            row += 1
            if row >= self.buffer.line_count():
                return self.cursor.position
            text = self.buffer.line(row)
            col = 0

    # -- line motions -----------------------------------------------------

    def line_start(self) -> Position:
        return Position(self.cursor.line, 0)

    def line_end(self) -> Position:
        row = self.cursor.line
        return Position(row, _last_column(self.buffer.line(row)))

    def first_non_blank(self, line: int | None = None) -> Position:
        row = self.cursor.line if line is None else line
        text = self.buffer.line(row)
        col = _skip_blanks(text, 0)
        return Position(row, min(col, _last_column(text)))

    # -- file motions -----------------------------------------------------

    def file_start(self) -> Position:
        return self.first_non_blank(0)

    def file_end(self) -> Position:
        return self.first_non_blank(self.buffer.line_count() - 1)

    def go_to_line(self, number: int) -> Position:
        """1-based line jump, clamped to the buffer."""

        row = max(1, min(number, self.buffer.line_count())) - 1
        return self.first_non_blank(row)

    def next_paragraph(self) -> Position:
        count = self.buffer.line_count()
        row = self.cursor.line + 1
        while row < count and self._is_blank_line(row):
            row += 1
        while row < count and not self._is_blank_line(row):
            row += 1
        if row >= count:
            return self._last_cell()
        return Position(row, 0)

    def previous_paragraph(self) -> Position:
        row = self.cursor.line - 1
        while row >= 0 and self._is_blank_line(row):
            row -= 1
        while row >= 0 and not self._is_blank_line(row):
            row -= 1
        if row < 0:
            return Position(0, 0)
        return Position(row, 0)

    def match_bracket(self) -> Position:
        """Jump to the bracket matching the one under the cursor, if any."""

        row, col = self.cursor.line, self.cursor.column
        text = self.buffer.line(row)
        if col >= len(text) or text[col] not in _BRACKETS:
            return self.cursor.position

        opener = text[col]
        target, step = _BRACKETS[opener]
        depth = 1
        col += step
        while 0 <= row < self.buffer.line_count():
            text = self.buffer.line(row)
            while 0 <= col < len(text):
                char = text[col]
                if char == opener:
                    depth += 1
                elif char == target:
                    depth -= 1
                    if depth == 0:
                        return Position(row, col)
                col += step
            row += step
            if 0 <= row < self.buffer.line_count():
                col = 0 if step > 0 else len(self.buffer.line(row)) - 1
        return self.cursor.position

    def find_char(
        self, char: str, *, forward: bool = True, till: bool = False
    ) -> Position:
        """``f``/``F`` (and ``t``/``T`` with ``till``): next ``char`` in a direction.

        The search continues onto following (or preceding) lines. ``till``
        stops one cell short of the match on its line. Returns the cursor
        position when ``char`` does not occur.
        """

        step = 1 if forward else -1
        row, col = self.cursor.line, self.cursor.column + step
        while 0 <= row < self.buffer.line_count():
            text = self.buffer.line(row)
            while 0 <= col < len(text):
                if text[col] == char:
                    if till:
                        col = max(0, min(col - step, len(text) - 1))
                    return Position(row, col)
                col += step
            row += step
            if 0 <= row < self.buffer.line_count():
                col = 0 if forward else len(self.buffer.line(row)) - 1
        return self.cursor.position

    # -- helpers ----------------------------------------------------------

    def _last_cell(self) -> Position:
        row = self.buffer.line_count() - 1
        return Position(row, _last_column(self.buffer.line(row)))

    def _is_blank_line(self, row: int) -> bool:
        return not self.buffer.line(row).strip()


def _skip_blanks(text: str, col: int) -> int:
    while col < len(text) and text[col].isspace():
        col += 1
    return col


def _last_column(text: str) -> int:
    return max(0, len(text) - 1)


__all__ = ["MotionEngine", "char_class", "BLANK", "WORD", "PUNCTUATION"]
