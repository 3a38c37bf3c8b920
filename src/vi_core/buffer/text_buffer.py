"""Line-oriented text storage."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .position import Position
from .sync import BufferValidationError
from .validation import ensure_line, ensure_position

LINE_SEPARATOR = "\n"


class TextBuffer:
    """Ordered list of lines; never empty (an empty buffer is one empty line).

    Ranges are inclusive on both ends and must arrive ordered. The buffer does
    not clamp: out-of-range lines raise :class:`BufferValidationError`, and
    keeping positions in bounds is the cursor's job.
    """

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: List[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        # "a\nb\n" is three lines; the trailing empty one is addressable.
        return cls(text.split(LINE_SEPARATOR))

    @property
    def text(self) -> str:
        return LINE_SEPARATOR.join(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line(self, index: int) -> str:
        return self._lines[ensure_line(self._lines, index)]

    def line_length(self, index: int) -> int:
        return len(self.line(index))

    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    def substring(self, start: Position, end: Position) -> str:
        ensure_line(self._lines, start.line)
        ensure_line(self._lines, end.line)
        if start.line == end.line:
            return self._lines[start.line][start.column : end.column + 1]
        parts = [self._lines[start.line][start.column :]]
        parts.extend(self._lines[start.line + 1 : end.line])
        parts.append(self._lines[end.line][: end.column + 1])
        return LINE_SEPARATOR.join(parts)

    def delete_range(self, start: Position, end: Position) -> None:
        ensure_line(self._lines, start.line)
        ensure_line(self._lines, end.line)
        head = self._lines[start.line][: start.column]
        tail = self._lines[end.line][end.column + 1 :]
        self._lines[start.line : end.line + 1] = [head + tail]

    def insert(self, at: Position, text: str) -> Position:
        """Insert ``text`` at ``at``; return the position just past it."""

        ensure_position(self._lines, at)
        line = self._lines[at.line]
        head, tail = line[: at.column], line[at.column :]
        pieces = text.split(LINE_SEPARATOR)
        if len(pieces) == 1:
            self._lines[at.line] = head + text + tail
            return Position(at.line, at.column + len(text))
        replacement = [head + pieces[0], *pieces[1:-1], pieces[-1] + tail]
        self._lines[at.line : at.line + 1] = replacement
        return Position(at.line + len(pieces) - 1, len(pieces[-1]))

    def insert_lines(self, index: int, lines: Iterable[str]) -> None:
        if index < 0 or index > len(self._lines):
            raise BufferValidationError(f"Line {index} out of range")
        self._lines[index:index] = list(lines)

    def delete_lines(self, first: int, last: int) -> List[str]:
        """Remove lines ``first..last`` inclusive and return them."""

        ensure_line(self._lines, first)
        ensure_line(self._lines, last)
        removed = self._lines[first : last + 1]
        del self._lines[first : last + 1]
        if not self._lines:
            self._lines = [""]
        return removed

    def replace_line(self, index: int, text: str) -> None:
        ensure_line(self._lines, index)
        self._lines[index] = text

    def join_lines(self, index: int, separator: str = "") -> Position:
        """Merge line ``index + 1`` onto line ``index``; return the seam."""

        ensure_line(self._lines, index + 1)
        head = self._lines[index]
        self._lines[index : index + 2] = [head + separator + self._lines[index + 1]]
        return Position(index, len(head))

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def restore(self, lines: Sequence[str]) -> None:
        self._lines = list(lines) or [""]

    def __len__(self) -> int:
        return len(self._lines)


__all__ = ["TextBuffer", "LINE_SEPARATOR"]
