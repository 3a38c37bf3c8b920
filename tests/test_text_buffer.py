from __future__ import annotations

import pytest

from vi_core.buffer import BufferValidationError, Position, TextBuffer


def make_buffer(text: str = "hello world\nsecond line\nthird") -> TextBuffer:
    return TextBuffer.from_text(text)


def test_empty_buffer_has_one_empty_line() -> None:
    buffer = TextBuffer()

    assert buffer.line_count() == 1
    assert buffer.line(0) == ""
    assert TextBuffer([]).lines() == ("",)


def test_substring_is_inclusive_and_spans_lines() -> None:
    buffer = make_buffer()

    assert buffer.substring(Position(0, 6), Position(0, 10)) == "world"
    assert buffer.substring(Position(0, 6), Position(1, 5)) == "world\nsecond"


def test_delete_range_merges_line_fragments() -> None:
    buffer = make_buffer()

    buffer.delete_range(Position(0, 5), Position(1, 6))

    assert buffer.lines() == ("helloline", "third")


def test_delete_range_within_line() -> None:
    buffer = make_buffer()

    buffer.delete_range(Position(0, 0), Position(0, 5))

    assert buffer.line(0) == "world"
    assert buffer.line_count() == 3


def test_insert_returns_position_after_text() -> None:
    buffer = make_buffer("abc")

    end = buffer.insert(Position(0, 1), "XY")

    assert buffer.text == "aXYbc"
    assert end == Position(0, 3)


def test_insert_with_newlines_splits_line() -> None:
    buffer = make_buffer("abc")

    end = buffer.insert(Position(0, 1), "1\n2\n3")

    assert buffer.lines() == ("a1", "2", "3bc")
    assert end == Position(2, 1)


def test_insert_at_line_end_is_allowed() -> None:
    buffer = make_buffer("abc")

    buffer.insert(Position(0, 3), "d")

    assert buffer.text == "abcd"


def test_out_of_range_line_raises() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.line(3)
    with pytest.raises(BufferValidationError):
        buffer.insert_lines(5, ["x"])


def test_delete_lines_never_leaves_buffer_empty() -> None:
    buffer = make_buffer("only")

    removed = buffer.delete_lines(0, 0)

    assert removed == ["only"]
    assert buffer.lines() == ("",)


def test_join_lines_returns_seam() -> None:
    buffer = make_buffer("foo\nbar")

    seam = buffer.join_lines(0, " ")

    assert buffer.text == "foo bar"
    assert seam == Position(0, 3)


def test_snapshot_and_restore() -> None:
    buffer = make_buffer()
    snapshot = buffer.snapshot()

    buffer.delete_lines(0, 1)
    buffer.restore(snapshot)

    assert buffer.text == "hello world\nsecond line\nthird"


def test_replace_line_swaps_one_line() -> None:
    buffer = make_buffer()

    buffer.replace_line(1, "  second line")

    assert buffer.lines() == ("hello world", "  second line", "third")
