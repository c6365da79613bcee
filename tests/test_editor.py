from __future__ import annotations

import pytest

from rim.editor import Editor
from rim.editor_model import Direction
from rim.editor_service import NoFilePathError


def test_move_cursor_up():
    editor = Editor(lines=["line1", "line2"], cursor_y=1)
    editor.move_cursor(Direction.UP)
    assert editor.cursor_y == 0


def test_move_cursor_up_at_top_stays():
    editor = Editor(lines=["line1"])
    editor.move_cursor(Direction.UP)
    assert editor.cursor_y == 0


def test_move_cursor_down():
    editor = Editor(lines=["line1", "line2"])
    editor.move_cursor(Direction.DOWN)
    assert editor.cursor_y == 1


def test_move_cursor_down_at_bottom_stays():
    editor = Editor(lines=["line1", "line2"], cursor_y=1)
    editor.move_cursor(Direction.DOWN)
    assert editor.cursor_y == 1


def test_move_cursor_left():
    editor = Editor(lines=["line1"], cursor_x=3)
    editor.move_cursor(Direction.LEFT)
    assert editor.cursor_x == 2


def test_move_cursor_left_wraps_to_previous_line_end():
    editor = Editor(lines=["abc", "de"], cursor_y=1)
    editor.move_cursor(Direction.LEFT)
    assert (editor.cursor_y, editor.cursor_x) == (0, 3)


def test_move_cursor_right():
    editor = Editor(lines=["line1"])
    editor.move_cursor(Direction.RIGHT)
    assert editor.cursor_x == 1


def test_move_cursor_right_wraps_to_next_line():
    editor = Editor(lines=["ab", "cd"], cursor_x=2)
    editor.move_cursor(Direction.RIGHT)
    assert (editor.cursor_y, editor.cursor_x) == (1, 0)


def test_move_cursor_snaps_to_line_end():
    editor = Editor(lines=["long line", "ab"], cursor_x=7)
    editor.move_cursor(Direction.DOWN)
    assert (editor.cursor_y, editor.cursor_x) == (1, 2)


def test_insert_char():
    editor = Editor(lines=[""])
    editor.insert_char("a")
    assert editor.lines[0] == "a"
    assert editor.cursor_x == 1


def test_insert_char_into_empty_buffer_creates_line():
    editor = Editor()
    editor.insert_char("z")
    assert editor.lines == ["z"]


def test_delete_char():
    editor = Editor(lines=["abc"], cursor_x=3)
    editor.delete_char()
    assert editor.lines[0] == "ab"
    assert editor.cursor_x == 2


def test_delete_char_at_beginning_of_line():
    editor = Editor(lines=["line1", "line2"], cursor_y=1, cursor_x=0)
    editor.delete_char()
    assert editor.lines == ["line1line2"]
    assert editor.cursor_y == 0
    assert editor.cursor_x == 5


def test_delete_char_at_start_of_buffer_does_nothing():
    editor = Editor(lines=["abc"])
    editor.delete_char()
    assert editor.lines == ["abc"]
    assert editor.cursor_x == 0


def test_open_and_save_round_trip(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("one\r\ntwo\nthree\n", encoding="utf-8", newline="")
    editor = Editor()
    editor.open(str(path))
    assert editor.lines == ["one", "two", "three"]
    assert editor.filepath == str(path)
    editor.insert_char("X")
    editor.save()
    assert path.read_text(encoding="utf-8") == "Xone\ntwo\nthree"


def test_open_missing_file(tmp_path):
    editor = Editor()
    with pytest.raises(FileNotFoundError):
        editor.open(str(tmp_path / "missing.txt"))
    assert editor.filepath is None


def test_save_without_filepath():
    editor = Editor(lines=["text"])
    with pytest.raises(NoFilePathError):
        editor.save()