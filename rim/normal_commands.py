"""Key handlers for normal mode.

Each handler takes the editor service and the key event that triggered it
and returns the new status message, or ``None`` to leave it unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rim.editor_model import Direction, EditorMode
from rim.editor_service import EditorService

KEY_UP = "Up"
KEY_DOWN = "Down"
KEY_LEFT = "Left"
KEY_RIGHT = "Right"
KEY_ESC = "Esc"
KEY_ENTER = "Enter"
KEY_BACKSPACE = "Backspace"
KEY_TAB = "Tab"

INSERT_STATUS = "-- INSERT --"


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a single character or a named key, and the Ctrl state."""

    code: str
    ctrl: bool = False

    @property
    def char(self) -> Optional[str]:
        """The typed character, or ``None`` for a named key."""
        return self.code if len(self.code) == 1 else None


NormalCommand = Callable[[EditorService, KeyEvent], Optional[str]]


def switch_to_insert_mode(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.set_mode(EditorMode.INSERT)
    return INSERT_STATUS


def move_cursor_left(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.move_cursor(Direction.LEFT)
    return ""


def move_cursor_down(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.move_cursor(Direction.DOWN)
    return ""


def move_cursor_up(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.move_cursor(Direction.UP)
    return ""


def move_cursor_right(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.move_cursor(Direction.RIGHT)
    return ""


def insert_line_below(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.insert_line_below()
    service.set_mode(EditorMode.INSERT)
    return INSERT_STATUS


def insert_line_above(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.insert_line_above()
    service.set_mode(EditorMode.INSERT)
    return INSERT_STATUS


def delete_char_under_cursor(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.delete_char_under_cursor()
    return ""


def put_line_below(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.put_line_below()
    return ""


def undo(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.undo()
    return "Undo"


def redo(service: EditorService, event: KeyEvent) -> Optional[str]:
    """Redo, but only when Ctrl is held."""
    if not event.ctrl:
        return None
    service.redo()
    return "Redo"


def repeat_last_change(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.repeat_last_change()
    return ""


def switch_to_search_mode(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.set_mode(EditorMode.SEARCH)
    service.clear_command_buffer()
    return "/"


def find_next(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.find_next()
    return None


def find_previous(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.find_previous()
    return None


def switch_to_command_mode(service: EditorService, event: KeyEvent) -> Optional[str]:
    service.set_mode(EditorMode.COMMAND)
    return ":"


def d_key_handler(service: EditorService, event: KeyEvent) -> Optional[str]:
    """First press arms the operator; the second press runs ``dd`` or ``dy``."""
    model = service.editor_model
    if not model.d_pressed:
        model.d_pressed = True
        return "d"
    model.d_pressed = False
    if event.code == "d":
        service.delete_current_line()
        return ""
    if event.code == "y":
        service.yank_current_line()
        return "Yanked current line."
    return None


def quit(service: EditorService, event: KeyEvent) -> Optional[str]:
    """Does nothing itself; the main loop leaves on ``q``."""
    return None


def build_normal_commands() -> dict[str, NormalCommand]:
    """Return the normal-mode key bindings."""
    return {
        "i": switch_to_insert_mode,
        "h": move_cursor_left,
        "j": move_cursor_down,
        "k": move_cursor_up,
        "l": move_cursor_right,
        "o": insert_line_below,
        "O": insert_line_above,
        "x": delete_char_under_cursor,
        "p": put_line_below,
        "u": undo,
        "r": redo,
        ".": repeat_last_change,
        "/": switch_to_search_mode,
        "n": find_next,
        "N": find_previous,
        ":": switch_to_command_mode,
        "d": d_key_handler,
        "q": quit,
    }