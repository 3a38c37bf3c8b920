"""Linear undo/redo over whole-buffer snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .position import Position


@dataclass(frozen=True, slots=True)
class UndoEntry:
    lines: tuple[str, ...]
    cursor: Position
    label: str = "edit"


class UndoTimeline:
    """Two-stack history; a fresh push discards everything redoable."""

    def __init__(self, *, depth: int = 200) -> None:
        self._undo: Deque[UndoEntry] = deque(maxlen=depth)
        self._redo: List[UndoEntry] = []

    def push(self, entry: UndoEntry) -> None:
        self._undo.append(entry)
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self, current: UndoEntry) -> Optional[UndoEntry]:
        """Pop the last snapshot, remembering ``current`` for redo."""

        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: UndoEntry) -> Optional[UndoEntry]:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def __len__(self) -> int:
        return len(self._undo)
