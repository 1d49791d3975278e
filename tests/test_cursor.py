import pytest

from sroc.cursor import END, Cursor, Position
from sroc.errors import EndOfInput


def test_starts_at_line_one_column_one():
    cursor = Cursor("abc")
    assert cursor.position() == Position(line=1, column=1, offset=0)
    assert cursor.peek() == "a"


def test_advance_tracks_lines_and_columns():
    cursor = Cursor("ab\ncd")
    assert [cursor.advance() for _ in range(3)] == ["a", "b", "\n"]
    assert cursor.position() == Position(line=2, column=1, offset=3)
    cursor.advance()
    assert cursor.position() == Position(line=2, column=2, offset=4)


def test_advance_at_end_raises():
    cursor = Cursor("x")
    cursor.advance()
    assert cursor.at_end
    assert cursor.peek() == END
    with pytest.raises(EndOfInput) as excinfo:
        cursor.advance()
    assert (excinfo.value.line, excinfo.value.column) == (1, 2)


def test_seek_forward_keeps_line_numbers_exact():
    cursor = Cursor("one\ntwo\nthree")
    cursor.seek_to(9)
    assert cursor.position() == Position(line=3, column=2, offset=9)
    assert cursor.peek() == "h"


def test_seek_backwards_is_rejected():
    cursor = Cursor("abc")
    cursor.seek_to(2)
    with pytest.raises(ValueError):
        cursor.seek_to(1)
    assert cursor.offset == 2


def test_seek_past_end_raises():
    with pytest.raises(EndOfInput):
        Cursor("abc").seek_to(10)


def test_consume_line_stops_after_newline():
    cursor = Cursor("# comment\nnext")
    assert cursor.consume_line() == "# comment"
    assert cursor.position() == Position(line=2, column=1, offset=10)


def test_skip_whitespace_does_not_cross_newlines():
    cursor = Cursor(" \t\n  x")
    cursor.skip_whitespace()
    assert cursor.peek() == "\n"
    cursor.skip_blank()
    assert cursor.peek() == "x"


def test_text_is_never_modified():
    text = "a = 1\n"
    cursor = Cursor(text)
    cursor.seek_to(len(text))
    assert cursor.text is text


def test_failed_seek_past_end_does_not_move():
    cursor = Cursor("abc\ndef")
    cursor.seek_to(1)
    with pytest.raises(EndOfInput):
        cursor.seek_to(50)
    assert cursor.position() == Position(line=1, column=2, offset=1)
