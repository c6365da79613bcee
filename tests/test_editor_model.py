import pytest

from rim.editor_model import (
    ChangeKind,
    Direction,
    EditorMode,
    EditorModel,
    LastChange,
)


def model_with(*lines, x=0, y=0, yanked=None):
    editor = EditorModel()
    editor.lines.extend(lines)
    editor.cursor_x = x
    editor.cursor_y = y
    editor.yanked_line = yanked
    return editor


def cursor(editor):
    return editor.cursor_y, editor.cursor_x


def two_snapshots():
    editor = model_with("line1")
    editor.save_snapshot()
    editor.lines.append("line2")
    editor.save_snapshot()
    return editor


def test_defaults():
    editor = EditorModel()
    assert editor.lines == []
    assert editor.mode is EditorMode.NORMAL
    assert editor.command_buffer == ""
    assert editor.filepath is None
    assert editor.last_change is None


@pytest.mark.parametrize(
    "lines, x, y, direction, expected",
    [
        (("line1", "line2"), 0, 1, Direction.UP, (0, 0)),
        (("line1", "line2"), 0, 0, Direction.DOWN, (1, 0)),
        (("line1",), 3, 0, Direction.LEFT, (0, 2)),
        (("line1",), 0, 0, Direction.RIGHT, (0, 1)),
        (("line1",), 0, 0, Direction.UP, (0, 0)),
        (("line1", "line2"), 0, 1, Direction.LEFT, (0, 5)),
        (("line1", "line2"), 5, 0, Direction.RIGHT, (1, 0)),
        (("line1", "ab"), 5, 0, Direction.DOWN, (1, 2)),
    ],
)
def test_move_cursor(lines, x, y, direction, expected):
    editor = model_with(*lines, x=x, y=y)
    editor.move_cursor(direction)
    assert cursor(editor) == expected


@pytest.mark.parametrize(
    "lines, x, y, yanked, action, args, expected_lines, expected_cursor",
    [
        (("",), 0, 0, None, "insert_char", ("a",), ["a"], (0, 1)),
        ((), 0, 0, None, "insert_char", ("a",), ["a"], (0, 1)),
        (("abc",), 3, 0, None, "delete_char", (), ["ab"], (0, 2)),
        (("line1", "line2"), 0, 1, None, "delete_char", (), ["line1line2"], (0, 5)),
        (("Hello World",), 5, 0, None, "insert_newline", (), ["Hello", " World"], (1, 0)),
        (("Hello World",), 11, 0, None, "insert_newline", (), ["Hello World", ""], (1, 0)),
        (("",), 0, 0, None, "insert_newline", (), ["", ""], (1, 0)),
        (("line1", "line2"), 0, 0, None, "insert_line_below", (), ["line1", "", "line2"], (1, 0)),
        ((), 0, 0, None, "insert_line_below", (), [""], (0, 0)),
        (("line1", "line2"), 0, 1, None, "insert_line_above", (), ["line1", "", "line2"], (1, 0)),
        (("abc",), 1, 0, None, "delete_char_under_cursor", (), ["ac"], (0, 1)),
        (("abc",), 2, 0, None, "delete_char_under_cursor", (), ["ab"], (0, 2)),
        (("",), 0, 0, None, "delete_char_under_cursor", (), [""], (0, 0)),
        (("line1", "line2", "line3"), 0, 1, None, "delete_current_line", (), ["line1", "line3"], (1, 0)),
        (("line1", "line2"), 0, 0, None, "delete_current_line", (), ["line2"], (0, 0)),
        (("line1", "line2"), 0, 1, None, "delete_current_line", (), ["line1"], (0, 0)),
        (("line1",), 0, 0, None, "delete_current_line", (), [""], (0, 0)),
        (("line1", "line2"), 0, 0, "yanked_line", "put_line_below", (), ["line1", "yanked_line", "line2"], (1, 0)),
        (("line1",), 0, 0, "", "put_line_below", (), ["line1", ""], (1, 0)),
    ],
)
def test_edit_operations(lines, x, y, yanked, action, args, expected_lines, expected_cursor):
    editor = model_with(*lines, x=x, y=y, yanked=yanked)
    getattr(editor, action)(*args)
    assert editor.lines == expected_lines
    assert cursor(editor) == expected_cursor


@pytest.mark.parametrize(
    "lines, x, y, yanked, action, args, expected_lines, expected_cursor",
    [
        (("",), 0, 0, None, "insert_char", ("a",), ["aa"], (0, 2)),
        (("abc",), 3, 0, None, "delete_char", (), ["a"], (0, 1)),
        (("abc",), 0, 0, None, "delete_char_under_cursor", (), ["c"], (0, 0)),
        (("line1",), 5, 0, None, "insert_newline", (), ["line1", "", ""], (2, 0)),
        (("line1",), 0, 0, None, "insert_line_below", (), ["line1", "", ""], (2, 0)),
        (("line1",), 0, 0, None, "insert_line_above", (), ["", "", "line1"], (0, 0)),
        (("line1", "line2"), 0, 0, None, "delete_current_line", (), [""], (0, 0)),
        (("line1",), 0, 0, "yanked", "put_line_below", (), ["line1", "yanked", "yanked"], (2, 0)),
    ],
)
def test_repeat_last_change(lines, x, y, yanked, action, args, expected_lines, expected_cursor):
    editor = model_with(*lines, x=x, y=y, yanked=yanked)
    getattr(editor, action)(*args)
    editor.repeat_last_change()
    assert editor.lines == expected_lines
    assert cursor(editor) == expected_cursor


def test_insert_char_records_last_change():
    editor = EditorModel()
    editor.insert_char("a")
    assert editor.last_change == LastChange(ChangeKind.INSERT_CHAR, "a")


def test_delete_char_at_buffer_start_records_nothing():
    editor = model_with("abc")
    editor.delete_char()
    assert editor.lines == ["abc"]
    assert editor.last_change is None
    assert len(editor.history) == 0


def test_put_line_below_without_yank_does_nothing():
    editor = model_with("line1")
    editor.put_line_below()
    assert editor.lines == ["line1"]
    assert editor.last_change is None


def test_repeat_without_change_keeps_buffer():
    editor = model_with("line1")
    editor.repeat_last_change()
    assert editor.lines == ["line1"]


def test_save_snapshot():
    editor = model_with("line1")
    editor.save_snapshot()
    assert len(editor.history) == 1
    assert editor.history.index == 1
    assert editor.history.snapshots[0].lines == ("line1",)


@pytest.mark.parametrize(
    "redo_after, expected_lines, expected_index",
    [
        (False, ["line1"], 1),
        (True, ["line1", "line2"], 2),
    ],
)
def test_undo_and_redo(redo_after, expected_lines, expected_index):
    editor = two_snapshots()
    editor.undo()
    if redo_after:
        editor.redo()
    assert editor.lines == expected_lines
    assert editor.history.index == expected_index


def test_save_snapshot_after_undo():
    editor = two_snapshots()
    editor.undo()
    editor.lines.append("line3")
    editor.save_snapshot()
    assert len(editor.history) == 2
    assert editor.history.index == 2
    assert editor.history.snapshots[1].lines == ("line1", "line3")


def test_undo_restored_lines_are_independent_of_history():
    editor = two_snapshots()
    editor.undo()
    editor.lines.append("other")
    editor.redo()
    editor.undo()
    assert editor.lines == ["line1"]


def test_search():
    editor = EditorModel()
    editor.lines = ["hello world", "world hello"]
    editor.search("world")
    assert editor.search_matches == [(0, 6), (1, 0)]
    assert editor.search_query == "world"
    assert cursor(editor) == (0, 6)


def test_search_without_match_leaves_cursor():
    editor = model_with("hello", x=2)
    editor.search("zzz")
    assert editor.search_matches == []
    assert editor.current_search_match is None
    assert cursor(editor) == (0, 2)


@pytest.mark.parametrize(
    "method, positions",
    [
        ("find_next", [(0, 3), (1, 1)]),
        ("find_previous", [(1, 3), (1, 1)]),
    ],
)
def test_find_next_and_previous(method, positions):
    editor = EditorModel()
    editor.lines = ["a b c", "d e f"]
    editor.search(" ")
    for expected in positions:
        getattr(editor, method)()
        assert cursor(editor) == expected


@pytest.mark.parametrize(
    "content, lines",
    [
        ("line1\nline2", ["line1", "line2"]),
        ("line1\nline2\n", ["line1", "line2"]),
        ("a\r\nb", ["a", "b"]),
        ("", []),
    ],
)
def test_set_content_splits_lines(content, lines):
    editor = EditorModel()
    editor.set_content(content)
    assert editor.lines == lines


def test_content_round_trip():
    editor = EditorModel()
    editor.set_content("save content\nsecond")
    assert editor.content() == "save content\nsecond"