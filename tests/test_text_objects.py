from __future__ import annotations

import pytest

from vi_core.buffer import Cursor, Position, TextBuffer
from vi_core.motions import TextObjectEngine, TextRange


def make_engine(text: str, line: int = 0, column: int = 0) -> TextObjectEngine:
    cursor = Cursor()
    cursor.move_to(Position(line, column))
    return TextObjectEngine(TextBuffer.from_text(text), cursor)


def span(start: tuple[int, int], end: tuple[int, int], **kwargs) -> TextRange:
    return TextRange(Position(*start), Position(*end), **kwargs)


def test_inner_word_covers_the_class_run() -> None:
    engine = make_engine("foo bar baz", column=5)

    assert engine.select("w", inner=True) == span((0, 4), (0, 6))


def test_a_word_takes_trailing_blanks() -> None:
    engine = make_engine("foo bar baz", column=5)

    assert engine.select("w", inner=False) == span((0, 4), (0, 7))


def test_a_word_at_line_end_takes_leading_blanks() -> None:
    engine = make_engine("foo bar baz", column=9)

    assert engine.select("w", inner=False) == span((0, 7), (0, 10))


def test_big_word_spans_punctuation() -> None:
    engine = make_engine("foo.bar baz", column=1)

    assert engine.select("w", inner=True) == span((0, 0), (0, 2))
    assert engine.select("W", inner=True) == span((0, 0), (0, 6))


def test_word_on_empty_line_is_none() -> None:
    assert make_engine("").select("w", inner=True) is None


@pytest.mark.parametrize("column", [4, 5, 7])
def test_quotes_from_inside_or_on_either_quote(column: int) -> None:
    engine = make_engine('say "hi" now', column=column)

    assert engine.select('"', inner=True) == span((0, 5), (0, 6))
    assert engine.select('"', inner=False) == span((0, 4), (0, 7))


def test_empty_quotes_have_no_inner_range() -> None:
    engine = make_engine('x = ""', column=4)

    assert engine.select('"', inner=True) is None
    assert engine.select('"', inner=False) == span((0, 4), (0, 5))


def test_quote_missing_on_line_is_none() -> None:
    assert make_engine("say 'hi\nthere'", column=5).select("'", inner=True) is None


def test_inner_bracket_skips_nested_pairs() -> None:
    engine = make_engine("f(a, (b))", column=2)

    assert engine.select("(", inner=True) == span((0, 2), (0, 7))


def test_innermost_bracket_wins() -> None:
    engine = make_engine("f(a, (b))", column=6)

    assert engine.select("(", inner=True) == span((0, 6), (0, 6))
    assert engine.select(")", inner=False) == span((0, 5), (0, 7))


@pytest.mark.parametrize("column", [1, 8])
def test_cursor_on_a_bracket_selects_its_own_pair(column: int) -> None:
    engine = make_engine("f(a, (b))", column=column)

    assert engine.select("b", inner=False) == span((0, 1), (0, 8))


def test_block_on_own_lines_is_line_wise_inside() -> None:
    engine = make_engine("fn {\n  body\n}", line=1, column=2)

    assert engine.select("{", inner=True) == span((1, 0), (1, 5), line_wise=True)
    assert engine.select("B", inner=False) == span((0, 3), (2, 0))


def test_bracket_spanning_lines_inline() -> None:
    engine = make_engine("call(a,\n  b)", line=1, column=2)

    assert engine.select("(", inner=True) == span((0, 5), (1, 2))


def test_empty_or_missing_brackets_are_none() -> None:
    assert make_engine("f()", column=1).select("(", inner=True) is None
    assert make_engine("abc", column=1).select("[", inner=False) is None


def test_paragraph_objects_are_line_wise() -> None:
    engine = make_engine("one\ntwo\n\nthree")

    assert engine.select("p", inner=True) == span((0, 0), (1, 2), line_wise=True)
    assert engine.select("p", inner=False) == span((0, 0), (2, 0), line_wise=True)


def test_last_paragraph_takes_preceding_blanks() -> None:
    engine = make_engine("one\ntwo\n\nthree", line=3)

    assert engine.select("p", inner=False) == span((2, 0), (3, 4), line_wise=True)


def test_blank_run_is_a_paragraph_of_its_own() -> None:
    engine = make_engine("one\n\n\ntwo", line=1)

    assert engine.select("p", inner=True) == span((1, 0), (2, 0), line_wise=True)
    assert engine.select("p", inner=False) == span((1, 0), (3, 2), line_wise=True)


def test_unknown_object_is_none() -> None:
    assert make_engine("abc").select("z", inner=True) is None
