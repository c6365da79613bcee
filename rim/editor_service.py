"""Application layer tying the editor model to file storage and commands."""

from __future__ import annotations

from typing import Optional

from rim.commands import EditCommand, HandleCommandResult, QuitCommand, WriteCommand
from rim.editor_model import Direction, EditorMode, EditorModel
from rim.file_io import FileIO


class NoFilePathError(OSError):
    """Raised when saving a buffer that has no file path."""

    def __init__(self, message: str = "No file path to save to") -> None:
        super().__init__(message)


class UnknownCommandError(ValueError):
    """Raised for a command name that no command answers to."""

    def __init__(self, message: str = "Unknown command") -> None:
        super().__init__(message)


class EditorService:
    """Operations on one editor buffer, backed by a ``FileIO``."""

    def __init__(self, file_io: FileIO) -> None:
        self.editor_model = EditorModel()
        self.file_io = file_io

    # -- files ------------------------------------------------------------

    def open_file(self, filepath: str) -> None:
        """Load ``filepath`` into the buffer and remember the path."""
        content = self.file_io.read_file(filepath)
        self.editor_model.set_content(content)
        self.editor_model.filepath = filepath

    def save_file(self, new_filepath: Optional[str] = None) -> None:
        """Write the buffer to ``new_filepath``, or to the remembered path."""
        if new_filepath is not None:
            self.editor_model.filepath = new_filepath
            path = new_filepath
        elif self.editor_model.filepath is not None:
            path = self.editor_model.filepath
        else:
            raise NoFilePathError()
        self.file_io.write_file(path, self.editor_model.content())

    # -- editing ----------------------------------------------------------

    def move_cursor(self, direction: Direction) -> None:
        self.editor_model.move_cursor(direction)

    def insert_char(self, c: str) -> None:
        self.editor_model.insert_char(c)

    def delete_char(self) -> None:
        self.editor_model.delete_char()

    def set_mode(self, mode: EditorMode) -> None:
        self.editor_model.mode = mode

    def push_command_char(self, c: str) -> None:
        self.editor_model.command_buffer += c

    def pop_command_char(self) -> None:
        self.editor_model.command_buffer = self.editor_model.command_buffer[:-1]

    def clear_command_buffer(self) -> None:
        self.editor_model.command_buffer = ""

    def insert_line_below(self) -> None:
        self.editor_model.insert_line_below()

    def insert_line_above(self) -> None:
        self.editor_model.insert_line_above()

    def delete_char_under_cursor(self) -> None:
        self.editor_model.delete_char_under_cursor()

    def delete_current_line(self) -> None:
        self.editor_model.delete_current_line()

    def yank_current_line(self) -> None:
        """Copy the cursor's line into the yank register."""
        model = self.editor_model
        if model.cursor_y < len(model.lines):
            model.yanked_line = model.lines[model.cursor_y]

    def put_line_below(self) -> None:
        self.editor_model.put_line_below()

    def undo(self) -> None:
        self.editor_model.undo()

    def redo(self) -> None:
        self.editor_model.redo()

    def repeat_last_change(self) -> None:
        self.editor_model.repeat_last_change()

    # -- search -----------------------------------------------------------

    def search(self, query: str) -> None:
        self.editor_model.search(query)

    def find_next(self) -> None:
        self.editor_model.find_next()

    def find_previous(self) -> None:
        self.editor_model.find_previous()

    # -- commands ---------------------------------------------------------

    def handle_command(self, command_str: str) -> HandleCommandResult:
        """Run an ex-style command such as ``w file``, ``q`` or ``e file``."""
        name, separator, rest = command_str.partition(" ")
        arg = rest if separator else None
        commands = (
            WriteCommand(arg),
            QuitCommand(),
            EditCommand(arg or ""),
        )
        for command in commands:
            if name in command.names:
                return command.execute(self)
        raise UnknownCommandError()