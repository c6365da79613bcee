"""The interactive editor: key dispatch per mode and the curses main loop."""

from __future__ import annotations

import curses
import os
import sys
from typing import Any, Optional, Sequence, Union

from rim.commands import HandleCommandResult
from rim.editor_model import Direction, EditorMode, EditorModel
from rim.editor_service import EditorService
from rim.file_io import FileIO, LocalFileIO
from rim.normal_commands import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_TAB,
    KEY_UP,
    KeyEvent,
    build_normal_commands,
)
from rim.terminal_ui import draw_editor

_ARROWS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}

_SPECIAL_CHARS = {
    "\n": KEY_ENTER,
    "\r": KEY_ENTER,
    "\x1b": KEY_ESC,
    "\x7f": KEY_BACKSPACE,
    "\x08": KEY_BACKSPACE,
    "\t": KEY_TAB,
}

_CURSES_KEYS = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    curses.KEY_BACKSPACE: KEY_BACKSPACE,
    curses.KEY_ENTER: KEY_ENTER,
}


class App:
    """Editor state plus the status message, driven one key at a time."""

    def __init__(self, file_io: Optional[FileIO] = None) -> None:
        self.service = EditorService(file_io if file_io is not None else LocalFileIO())
        self.status_message = ""
        self.normal_commands = build_normal_commands()

    @property
    def model(self) -> EditorModel:
        return self.service.editor_model

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply one key press; return True when the editor should exit."""
        handlers = {
            EditorMode.NORMAL: self._normal_key,
            EditorMode.INSERT: self._insert_key,
            EditorMode.COMMAND: self._command_key,
            EditorMode.SEARCH: self._search_key,
        }
        return handlers[self.model.mode](event)

    def _normal_key(self, event: KeyEvent) -> bool:
        command = self.normal_commands.get(event.code)
        if command is None:
            return False
        status = command(self.service, event)
        if status is not None:
            self.status_message = status
        return event.code == "q"

    def _insert_key(self, event: KeyEvent) -> bool:
        if event.code == KEY_ESC:
            self.service.set_mode(EditorMode.NORMAL)
        elif event.char is not None:
            self.service.insert_char(event.char)
        elif event.code == KEY_ENTER:
            self.model.insert_newline()
        elif event.code == KEY_BACKSPACE:
            self.service.delete_char()
        elif event.code in _ARROWS:
            self.service.move_cursor(_ARROWS[event.code])
        else:
            return False
        self.status_message = ""
        return False

    def _edit_prompt(self, event: KeyEvent, prefix: str) -> None:
        if event.code == KEY_ESC:
            self.service.set_mode(EditorMode.NORMAL)
            self.service.clear_command_buffer()
            self.status_message = ""
        elif event.char is not None:
            self.service.push_command_char(event.char)
            self.status_message = prefix + self.model.command_buffer
        elif event.code == KEY_BACKSPACE:
            self.service.pop_command_char()
            self.status_message = prefix + self.model.command_buffer

    def _command_key(self, event: KeyEvent) -> bool:
        if event.code != KEY_ENTER:
            self._edit_prompt(event, ":")
            return False
        command = self.model.command_buffer
        self.service.clear_command_buffer()
        try:
            result = self.service.handle_command(command)
        except (OSError, ValueError) as exc:
            self.status_message = f"Error: {exc}"
        else:
            if result is HandleCommandResult.QUIT:
                return True
            self.status_message = f"Command executed: {command}"
        self.service.set_mode(EditorMode.NORMAL)
        return False

    def _search_key(self, event: KeyEvent) -> bool:
        if event.code != KEY_ENTER:
            self._edit_prompt(event, "/")
            return False
        self.service.search(self.model.command_buffer)
        self.service.set_mode(EditorMode.NORMAL)
        self.status_message = ""
        return False


def key_event_from_curses(key: Union[str, int]) -> Optional[KeyEvent]:
    """Turn a value from ``get_wch``/``getch`` into a key event, if it is one."""
    if isinstance(key, int):
        if key >= 256 or key < 0:
            name = _CURSES_KEYS.get(key)
            return KeyEvent(name) if name is not None else None
        key = chr(key)
    if key in _SPECIAL_CHARS:
        return KeyEvent(_SPECIAL_CHARS[key])
    if len(key) == 1 and ord(key) < 32:
        return KeyEvent(chr(ord(key) + 96), ctrl=True)
    return KeyEvent(key)


def run(screen: Any, argv: Sequence[str]) -> App:
    """Run the editor on ``screen`` until it is quit; open ``argv[0]`` if given."""
    app = App()
    if argv:
        app.service.open_file(argv[0])
    screen.timeout(500)
    while True:
        draw_editor(screen, app.model, app.status_message)
        try:
            key = screen.get_wch()
        except curses.error:
            continue
        event = key_event_from_curses(key)
        if event is not None and app.handle_key(event):
            return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the editor in the terminal."""
    args = list(sys.argv[1:] if argv is None else argv)
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(run, args)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())