from __future__ import annotations

from vi_core.buffer import Position, RegisterManager, SystemClipboard
from vi_core.editor import Editor
from vi_core.modes import EditorMode
from vi_core.runtime import EditorConfig


def make_editor(text: str = "") -> Editor:
    registers = RegisterManager(clipboard=SystemClipboard(enabled=False))
    config = EditorConfig(clipboard_enabled=False)
    editor = Editor(text, registers=registers, config=config)
    editor.handle_input("i")
    return editor


def test_typing_inserts_text() -> None:
    editor = make_editor()

    editor.feed("hi there")

    assert editor.text == "hi there"
    assert editor.cursor == Position(0, 8)
    assert editor.state.is_dirty is True


def test_enter_splits_line() -> None:
    editor = make_editor("abc")
    editor.handle_input("RIGHT")

    editor.handle_input("\r")
    editor.handle_input("ENTER")

    assert editor.text == "a\n\nbc"
    assert editor.cursor == Position(2, 0)


def test_backspace_deletes_previous_character() -> None:
    editor = make_editor("abc")
    editor.handle_input("END")

    editor.handle_input("\x7f")

    assert editor.text == "ab"
    assert editor.cursor == Position(0, 2)


def test_backspace_at_line_start_joins_lines() -> None:
    editor = make_editor("ab\ncd")
    editor.handle_input("DOWN")

    editor.handle_input("\x08")

    assert editor.text == "abcd"
    assert editor.cursor == Position(0, 2)


def test_backspace_at_buffer_start_is_noop() -> None:
    editor = make_editor("abc")

    editor.handle_input("\x7f")

    assert editor.text == "abc"
    assert editor.state.is_dirty is False


def test_tab_is_inserted() -> None:
    editor = make_editor("x")

    editor.handle_input("\t")

    assert editor.text == "\tx"


def test_arrows_may_sit_past_line_end() -> None:
    editor = make_editor("ab")

    editor.feed(["RIGHT", "RIGHT", "RIGHT"])
    assert editor.cursor == Position(0, 2)

    editor.handle_input("LEFT")
    assert editor.cursor == Position(0, 1)


def test_escape_steps_cursor_left() -> None:
    editor = make_editor("abc")
    editor.handle_input("END")

    editor.handle_input("\x1b")

    assert editor.mode == EditorMode.NORMAL
    assert editor.cursor == Position(0, 2)


def test_ctrl_c_leaves_insert_at_line_start() -> None:
    editor = make_editor("abc")

    assert editor.handle_input("\x03") is True

    assert editor.mode == EditorMode.NORMAL
    assert editor.cursor == Position(0, 0)


def test_control_bytes_are_not_inserted() -> None:
    editor = make_editor("abc")

    assert editor.handle_input("\x01") is False
    assert editor.text == "abc"
