"""Adapter that feeds Textual key events to an Editor and mirrors it back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vi_core.buffer import BufferMirror
from vi_core.editor import Editor
from vi_core.modes.base_mode import (
    BACKSPACE,
    CTRL_C,
    CTRL_H,
    CTRL_R,
    CTRL_V,
    ESCAPE,
    EditorMode,
)

TEXTUAL_KEYS: Dict[str, str] = {
    "escape": ESCAPE,
    "enter": "\r",
    "return": "\r",
    "tab": "\t",
    "backspace": BACKSPACE,
    "ctrl+c": CTRL_C,
    "ctrl+h": CTRL_H,
    "ctrl+r": CTRL_R,
    "ctrl+v": CTRL_V,
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
}

EVENTS = (
    "mode.switch",
    "visual.selection",
    "visual.yank",
    "visual.delete",
    "normal.put",
    "buffer.undo",
    "buffer.redo",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def unit_for_key(key: str, character: Optional[str] = None) -> Optional[str]:
    """Translate a Textual key name into the input unit the editor expects."""

    if key in TEXTUAL_KEYS:
        return TEXTUAL_KEYS[key]
    if character and len(character) == 1 and character.isprintable():
        return character
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualVimAdapter:
    """Bridges an Editor and its bus events to a Textual-friendly surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(self, key: str, character: Optional[str] = None) -> bool:
        """Dispatch one Textual key event; ``True`` when the editor used it."""

        unit = unit_for_key(key, character)
        if unit is None:
            self.hooks.log(f"key -> {key!r} ignored")
            return False
        handled = self.editor.handle_input(unit)
        self.hooks.log(
            f"key -> {key!r} handled={handled} mode={self.editor.mode} "
            f"cursor={self.editor.cursor}"
        )
        self._refresh()
        return handled

    def _subscribe_events(self) -> None:
        for event in EVENTS:
            self.editor.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} {payload!r}")
        self.hooks.handle_event(name, payload)

    def _refresh(self) -> None:
        # Insert mode may legitimately sit one past the end of the line.
        if self.editor.mode != EditorMode.INSERT:
            self.editor.clamp_cursor_to_buffer_for_render()
        self.hooks.update_buffer(self.editor.mirror())
        self.hooks.update_status(str(self.editor.mode))


__all__ = [
    "EVENTS",
    "TEXTUAL_KEYS",
    "TextualUIHooks",
    "TextualVimAdapter",
    "unit_for_key",
]
