"""Editor façade wiring state, modes and rendering together."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from vi_core.buffer import BufferMirror, Position, RegisterManager, TextBuffer
from vi_core.modes import (
    VISUAL_MODES,
    EditorMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    NormalMode,
    VisualMode,
)
from vi_core.runtime import EditorConfig
from vi_core.selection import apply_selection_highlighting

from .state import EditorState


class Editor:
    """A single document with its modes.

    >>> editor = Editor("hello world")
    >>> editor.feed("wx")
    >>> editor.text
    'hello orld'
    """

    def __init__(
        self,
        text: str = "",
        *,
        registers: Optional[RegisterManager] = None,
        config: Optional[EditorConfig] = None,
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.state = EditorState(
            TextBuffer.from_text(text), registers=registers, config=config
        )
        self.context = ModeContext(state=self.state, bus=bus or ModeBus())
        self.modes = ModeManager(self.context)
        self.modes.register_mode(NormalMode)
        self.modes.register_mode(InsertMode)
        for variant in (
            EditorMode.VISUAL,
            EditorMode.VISUAL_LINE,
            EditorMode.VISUAL_BLOCK,
        ):
            self.modes.register_mode(VisualMode, variant=variant)

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    @property
    def mode(self) -> str:
        return self.state.mode

    @property
    def text(self) -> str:
        return self.state.buffer.text

    @property
    def cursor(self) -> Position:
        return self.state.cursor.position

    def handle_input(self, unit: Union[str, KeyInput]) -> bool:
        return self.modes.handle_input(unit)

    def feed(self, keys: Iterable[Union[str, KeyInput]]) -> None:
        """Dispatch each unit in turn; unhandled units are dropped."""

        for unit in keys:
            self.handle_input(unit)

    def set_mode(self, name: str) -> None:
        self.modes.switch_mode(name)

    # -- selection -----------------------------------------------------------

    def _visual(self) -> Optional[VisualMode]:
        mode = self.modes.active_mode
        return mode if isinstance(mode, VisualMode) else None

    def selection_range(self) -> Optional[Tuple[Position, Position]]:
        visual = self._visual()
        return visual.selection_range() if visual else None

    def select_range(
        self, start: Position, end: Position, *, mode: str = EditorMode.VISUAL
    ) -> None:
        """Select ``start..end`` programmatically, entering ``mode`` if needed."""

        if self.state.mode not in VISUAL_MODES:
            self.state.move_cursor_to(start)
            self.set_mode(mode)
        visual = self._visual()
        if visual is None:
            raise RuntimeError(f"Mode '{mode}' is not a visual mode")
        visual.selection.start = start
        visual.pin_end(end)

    def select_all(self) -> None:
        buffer = self.state.buffer
        last = buffer.line_count() - 1
        end = Position(last, max(0, buffer.line_length(last) - 1))
        self.select_range(Position(0, 0), end)

    # -- rendering -----------------------------------------------------------

    def clamp_cursor_to_buffer_for_render(self) -> None:
        self.state.clamp_cursor_to_buffer_for_render()

    def render_line(self, index: int, display_text: Optional[str] = None) -> str:
        """Return line ``index`` with the selection overlay applied.

        ``display_text`` is an optional already-coloured rendering of the same
        line (syntax highlighting); its escape sequences are kept.
        """

        raw = self.state.buffer.line(index)
        rendered = raw if display_text is None else display_text
        selection = self.selection_range()
        if selection is None:
            return rendered
        start, end = selection
        return apply_selection_highlighting(rendered, index, raw, start, end)

    def render_lines(self) -> List[str]:
        return [self.render_line(i) for i in range(self.state.buffer.line_count())]

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            lines=tuple(self.render_lines()),
            cursor=self.state.cursor.position,
            mode=str(self.state.mode),
            selection=self.selection_range(),
            dirty=self.state.is_dirty,
        )


__all__ = ["Editor"]
