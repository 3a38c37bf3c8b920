from __future__ import annotations

from dataclasses import fields
from typing import Dict, List

import pytest

from vi_core.buffer import Characters, Position, RegisterManager, SystemClipboard
from vi_core.editor import Editor
from vi_core.modes import EditorMode
from vi_core.runtime import EditorConfig
from vi_core.selection import RESET, SELECTION_COLOR


def make_editor(text: str = "hello world\nsecond line") -> Editor:
    registers = RegisterManager(clipboard=SystemClipboard(enabled=False))
    config = EditorConfig(clipboard_enabled=False)
    return Editor(text, registers=registers, config=config)


def select_two_lines(editor: Editor) -> None:
    editor.feed("wvj")
    assert editor.mode == EditorMode.VISUAL
    assert editor.selection_range() == (Position(0, 6), Position(1, 6))


@pytest.mark.parametrize("key", ["d", "x"])
def test_delete_two_line_selection(key: str) -> None:
    editor = make_editor()
    select_two_lines(editor)

    assert editor.handle_input(key) is True

    assert editor.text == "hello line"
    assert editor.cursor == Position(0, 6)
    assert editor.mode == EditorMode.NORMAL
    assert editor.state.is_dirty is True
    assert editor.state.registers.unnamed == Characters("world\nsecond ")


def test_yank_two_line_selection_leaves_buffer_alone() -> None:
    editor = make_editor()
    select_two_lines(editor)

    editor.handle_input("y")

    assert editor.text == "hello world\nsecond line"
    assert editor.mode == EditorMode.NORMAL
    assert editor.state.is_dirty is False
    assert editor.state.registers.unnamed == Characters("world\nsecond ")
    assert editor.state.registers.get("0") == Characters("world\nsecond ")


def test_change_two_line_selection_enters_insert() -> None:
    editor = make_editor()
    select_two_lines(editor)

    editor.handle_input("c")
    editor.feed("big ")

    assert editor.mode == EditorMode.INSERT
    assert editor.text == "hello big line"
    assert editor.state.is_dirty is True


def test_delete_can_be_undone() -> None:
    editor = make_editor()
    select_two_lines(editor)
    editor.handle_input("d")

    editor.handle_input("u")

    assert editor.text == "hello world\nsecond line"


@pytest.mark.parametrize("key", ["\x1b", "\x03", "v"])
def test_cancel_keys_return_to_normal(key: str) -> None:
    editor = make_editor()
    editor.feed("vl")

    assert editor.handle_input(key) is True

    assert editor.mode == EditorMode.NORMAL
    assert editor.selection_range() is None
    assert editor.text == "hello world\nsecond line"


def test_unknown_key_is_not_handled() -> None:
    editor = make_editor()
    editor.handle_input("v")

    assert editor.handle_input("Q") is False
    assert editor.mode == EditorMode.VISUAL


def test_o_swaps_anchor_and_cursor() -> None:
    editor = make_editor()
    editor.feed("vll")

    editor.handle_input("o")

    assert editor.cursor == Position(0, 0)
    assert editor.selection_range() == (Position(0, 0), Position(0, 2))


def test_line_visual_yank_stores_widened_characters() -> None:
    editor = make_editor()

    editor.feed("Vy")

    assert editor.state.registers.unnamed == Characters("hello world")


def test_line_visual_range_covers_whole_lines() -> None:
    editor = make_editor()
    editor.feed("wVj")

    assert editor.mode == EditorMode.VISUAL_LINE
    assert editor.selection_range() == (Position(0, 0), Position(1, 10))


def test_line_visual_delete_removes_covered_text() -> None:
    editor = make_editor("a\nb\nc")

    editor.feed("Vjd")

    assert editor.text == "\nc"
    assert editor.state.registers.unnamed == Characters("a\nb")


def test_block_visual_tracks_corners() -> None:
    editor = make_editor("abcd\nefgh")
    editor.feed("l\x16jl")

    assert editor.mode == EditorMode.VISUAL_BLOCK
    assert editor.selection_range() == (Position(0, 1), Position(1, 2))

    editor.handle_input("y")
    assert editor.state.registers.unnamed == Characters("bcd\nefg")


def test_pinned_end_is_dropped_by_next_key() -> None:
    editor = make_editor()
    editor.select_range(Position(0, 1), Position(1, 2))

    assert editor.selection_range() == (Position(0, 1), Position(1, 2))

    editor.handle_input("l")
    assert editor.selection_range() == (Position(0, 1), Position(1, 3))


def test_select_all_covers_buffer() -> None:
    editor = make_editor()

    editor.select_all()
    editor.handle_input("d")

    assert editor.text == ""


def test_render_line_highlights_selection() -> None:
    editor = make_editor()
    editor.feed("wve")

    assert editor.render_line(0) == "hello " + SELECTION_COLOR + "world" + RESET
    assert editor.render_line(1) == "second line"


def test_render_line_with_display_text() -> None:
    editor = make_editor("func main()")
    editor.select_range(Position(0, 2), Position(0, 7))

    rendered = editor.render_line(0, "\x1b[31mfunc\x1b[0m main()")

    assert rendered.startswith("\x1b[31mfu" + SELECTION_COLOR)


def test_bus_reports_visual_events() -> None:
    editor = make_editor()
    seen: Dict[str, List[object]] = {}
    for name in ("visual.selection", "visual.delete", "mode.switch"):
        editor.bus.subscribe(
            name, lambda payload, name=name: seen.setdefault(name, []).append(payload)
        )

    select_two_lines(editor)
    editor.handle_input("d")

    assert seen["visual.selection"]
    assert seen["visual.delete"][0]["register"] == "-"
    assert [event["to"] for event in seen["mode.switch"]] == ["visual", "normal"]


def test_text_object_extends_selection() -> None:
    editor = make_editor()
    editor.feed("wv")

    editor.feed("iw")
    assert editor.mode == EditorMode.VISUAL
    assert editor.selection_range() == (Position(0, 6), Position(0, 10))

    editor.handle_input("y")
    assert editor.state.registers.get("0") == Characters("world")


def test_unknown_text_object_keeps_selection() -> None:
    editor = make_editor()
    editor.feed("vl")

    editor.handle_input("i")
    assert editor.handle_input("z") is False
    assert editor.mode == EditorMode.VISUAL
    assert editor.selection_range() == (Position(0, 0), Position(0, 1))


def test_case_keys_rewrite_selection_and_leave_visual() -> None:
    editor = make_editor()

    editor.feed("veU")
    assert editor.text == "HELLO world\nsecond line"
    assert editor.mode == EditorMode.NORMAL
    assert editor.cursor == Position(0, 0)

    editor.feed("Vj~")
    assert editor.text == "hello WORLD\nSECOND LINE"

    editor.feed("Vu")
    assert editor.text == "hello world\nSECOND LINE"


def test_shift_keys_indent_covered_lines() -> None:
    editor = make_editor()

    editor.feed("vj>")
    assert editor.text == "    hello world\n    second line"
    assert editor.mode == EditorMode.NORMAL

    editor.feed("V<")
    assert editor.text == "hello world\n    second line"


def test_mirror_fills_every_field() -> None:
    editor = make_editor()
    editor.feed("xvl")

    mirror = editor.mirror()

    assert [f.name for f in fields(mirror)] == [
        "lines",
        "cursor",
        "mode",
        "selection",
        "dirty",
    ]
    assert mirror.lines[1] == "second line"
    assert mirror.cursor == Position(0, 1)
    assert mirror.mode == "visual"
    assert mirror.selection == (Position(0, 0), Position(0, 1))
    assert mirror.dirty is True
