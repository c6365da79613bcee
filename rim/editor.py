"""A minimal text buffer bound directly to a file on disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from rim.editor_model import Direction
from rim.editor_service import NoFilePathError


@dataclass
class Editor:
    """Lines of text, a cursor and the file they came from."""

    lines: list[str] = field(default_factory=list)
    cursor_x: int = 0
    cursor_y: int = 0
    filepath: Optional[str] = None

    def open(self, filepath: str) -> None:
        """Load ``filepath``; any failure to read raises ``FileNotFoundError``."""
        try:
            with open(filepath, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileNotFoundError(str(exc)) from exc
        self.lines = _split_lines(content)
        self.filepath = filepath

    def save(self) -> None:
        """Write the lines, joined by newlines, back to the file."""
        if self.filepath is None:
            raise NoFilePathError()
        with open(self.filepath, "w", encoding="utf-8", newline="") as handle:
            handle.write("\n".join(self.lines))

    def move_cursor(self, direction: Direction) -> None:
        """Move the cursor one step, wrapping across line ends for left/right."""
        if direction is Direction.UP:
            self.cursor_y = max(self.cursor_y - 1, 0)
        elif direction is Direction.DOWN:
            if self.cursor_y < max(len(self.lines) - 1, 0):
                self.cursor_y += 1
        elif direction is Direction.LEFT:
            if self.cursor_x > 0:
                self.cursor_x -= 1
            elif self.cursor_y > 0:
                self.cursor_y -= 1
                self.cursor_x = len(self.lines[self.cursor_y])
        elif direction is Direction.RIGHT:
            if self.cursor_y < len(self.lines):
                if self.cursor_x < len(self.lines[self.cursor_y]):
                    self.cursor_x += 1
                elif self.cursor_y < len(self.lines) - 1:
                    self.cursor_y += 1
                    self.cursor_x = 0
        if self.cursor_y < len(self.lines):
            self.cursor_x = min(self.cursor_x, len(self.lines[self.cursor_y]))

    def insert_char(self, c: str) -> None:
        """Insert ``c`` before the cursor and advance past it."""
        if self.cursor_y >= len(self.lines):
            self.lines.append("")
        line = self.lines[self.cursor_y]
        self.lines[self.cursor_y] = line[: self.cursor_x] + c + line[self.cursor_x:]
        self.cursor_x += 1

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cursor_y >= len(self.lines):
            return
        if self.cursor_x > 0:
            line = self.lines[self.cursor_y]
            self.lines[self.cursor_y] = line[: self.cursor_x - 1] + line[self.cursor_x:]
            self.cursor_x -= 1
        elif self.cursor_y > 0:
            removed = self.lines.pop(self.cursor_y)
            self.cursor_y -= 1
            self.cursor_x = len(self.lines[self.cursor_y])
            self.lines[self.cursor_y] += removed


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]