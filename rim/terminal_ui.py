"""Drawing the editor onto a curses screen."""

from __future__ import annotations

import curses
from typing import Any, Sequence

from rim.editor_model import EditorMode, EditorModel


def status_bar(model: EditorModel) -> str:
    """Return the position, line count, file name and mode summary."""
    name = model.filepath if model.filepath is not None else "[No Name]"
    return (
        f" {model.cursor_y + 1}:{model.cursor_x + 1} | {len(model.lines)} lines"
        f" | {name} | {model.mode.name}"
    )


def status_line(model: EditorModel, status_message: str) -> str:
    """Return the bottom line: the command being typed, or the message."""
    if model.mode is EditorMode.COMMAND:
        return f":{model.command_buffer}"
    return f" {status_message}"


def render(model: EditorModel, status_message: str, cols: int, rows: int) -> list[str]:
    """Return the ``rows`` lines of the screen, status bar and line last."""
    if rows <= 0:
        return []
    text_rows = max(rows - 2, 0)
    body = [
        model.lines[y] if y < len(model.lines) else "" for y in range(text_rows)
    ]
    frame = body + [
        status_bar(model).ljust(cols),
        status_line(model, status_message).ljust(cols),
    ]
    return frame[-rows:]


def _put(screen: Any, y: int, text: str, cols: int, attr: int) -> None:
    try:
        screen.addnstr(y, 0, text, cols, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _place_cursor(screen: Any, y: int, x: int, rows: int, cols: int) -> None:
    screen.move(max(min(y, rows - 1), 0), max(min(x, cols - 1), 0))


def draw_editor(screen: Any, model: EditorModel, status_message: str) -> None:
    """Draw the buffer, status bar and status line, then place the cursor."""
    rows, cols = screen.getmaxyx()
    frame = render(model, status_message, cols, rows)
    screen.erase()
    first_status_row = len(frame) - 2
    for y, text in enumerate(frame):
        attr = curses.A_REVERSE if y >= first_status_row else curses.A_NORMAL
        _put(screen, y, text, cols, attr)
    _place_cursor(screen, model.cursor_y, model.cursor_x, rows, cols)
    screen.refresh()


def draw_editor_rows(
    screen: Any, lines: Sequence[str], cursor_x: int, cursor_y: int
) -> None:
    """Draw plain lines from the top of the screen and place the cursor."""
    rows, cols = screen.getmaxyx()
    screen.erase()
    for y, line in enumerate(lines[:rows]):
        _put(screen, y, line, cols, curses.A_NORMAL)
    _place_cursor(screen, cursor_y, cursor_x, rows, cols)
    screen.refresh()