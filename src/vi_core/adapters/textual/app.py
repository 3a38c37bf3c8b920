"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use vi_core.adapters.textual.app"
    ) from exc

from vi_core.buffer import BufferMirror
from vi_core.editor import Editor
from vi_core.runtime import telemetry
from vi_core.terminal import (
    capture_terminal_attributes,
    install_signal_handlers,
    restore_terminal,
)

from .controller import TextualUIHooks, TextualVimAdapter


def render_mirror(mirror: BufferMirror) -> Text:
    """Turn composited lines into rich text with the cursor cell reversed."""

    rows = []
    for index, line in enumerate(mirror.lines):
        row = Text.from_ansi(line)
        if index == mirror.cursor.line:
            column = mirror.cursor.column
            if column >= len(row.plain):
                row.append(" ")
            row.stylize("reverse", column, column + 1)
        rows.append(row)
    return Text("\n").join(rows)


class ViCoreApp(App[None]):
    """Minimal Textual UI embedding the editor."""

    CSS = """
    #buffer-view {
        height: 1fr;
        padding: 0 1;
        overflow: auto;
    }

    #status-line {
        dock: bottom;
        height: 1;
        background: $boost;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.editor = Editor(text)
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    async def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualVimAdapter(self.editor, hooks)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key == "ctrl+q":
            return
        if self.adapter.handle_textual_key(event.key, event.character):
            event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            cursor = self.editor.cursor
            dirty = " [+]" if self.editor.state.is_dirty else ""
            self._status_widget.update(
                f"-- {status.upper()} --  {cursor.line + 1}:{cursor.column + 1}{dirty}"
            )

    def _handle_event(self, name: str, payload: Any | None) -> None:
        del payload
        telemetry.record_event(
            "ui.event", data={"name": name}, logger_name="vi_core.app"
        )

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("vi_core.app").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vi-core Textual demo.")
    parser.add_argument("path", nargs="?", help="File to load into the buffer")
    parser.add_argument(
        "--preset",
        choices=("development", "production"),
        default=None,
        help="Telemetry preset (default: from VI_CORE_* environment)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    if not capture_terminal_attributes():
        telemetry.get_logger("vi_core.app").debug(
            "terminal attributes not captured; restore writes sequences only"
        )
    install_signal_handlers()
    try:
        ViCoreApp(text).run()
    finally:
        restore_terminal()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
