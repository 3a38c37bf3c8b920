"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from vi_core.editor.state import EditorState

ESCAPE = "\x1b"
CTRL_C = "\x03"
CTRL_R = "\x12"
CTRL_V = "\x16"
BACKSPACE = "\x7f"
CTRL_H = "\x08"

_KEY_ALIASES = {
    "ESC": ESCAPE,
    "<Esc>": ESCAPE,
    "ENTER": "\r",
    "RETURN": "\r",
    "TAB": "\t",
    "BACKSPACE": BACKSPACE,
}


class EditorMode(str, Enum):
    """Modes the editor can be in; exactly one is active."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    VISUAL_LINE = "visual_line"
    VISUAL_BLOCK = "visual_block"

    def __str__(self) -> str:
        return self.value


VISUAL_MODES = frozenset(
    {EditorMode.VISUAL, EditorMode.VISUAL_LINE, EditorMode.VISUAL_BLOCK}
)


@dataclass(slots=True)
class KeyInput:
    """Normalized input unit passed to modes.

    ``key`` is either a single character (the raw byte the terminal produced,
    so Escape is ``"\\x1b"``) or a named key such as ``"LEFT"``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def from_unit(cls, unit: str) -> "KeyInput":
        key = _KEY_ALIASES.get(unit, unit)
        text = key if len(key) == 1 and key.isprintable() else None
        return cls(key=key, text=text)

    @property
    def is_cancel(self) -> bool:
        if self.key in (ESCAPE, CTRL_C):
            return True
        return self.key.lower() == "c" and "CTRL" in self.modifiers


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    state: "EditorState"
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def state(self) -> "EditorState":
        return self.context.state

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


def unhandled() -> ModeResult:
    return ModeResult(consumed=False, status="miss", message="unhandled")


__all__ = [
    "EditorMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "VISUAL_MODES",
    "unhandled",
]
