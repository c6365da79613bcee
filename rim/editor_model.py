"""The text buffer, cursor, modes and editing operations of the editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from rim.history import History, Snapshot
from rim.search import Position, SearchState


class Direction(Enum):
    """A cursor movement direction."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class EditorMode(Enum):
    """The mode that decides how key presses are interpreted."""

    NORMAL = auto()
    INSERT = auto()
    COMMAND = auto()
    SEARCH = auto()


class ChangeKind(Enum):
    """The kinds of buffer change that can be repeated."""

    INSERT_CHAR = auto()
    DELETE_CHAR = auto()
    DELETE_CHAR_UNDER_CURSOR = auto()
    INSERT_NEWLINE = auto()
    INSERT_LINE_BELOW = auto()
    INSERT_LINE_ABOVE = auto()
    DELETE_CURRENT_LINE = auto()
    PUT_LINE_BELOW = auto()


@dataclass(frozen=True)
class LastChange:
    """The most recent change; ``char`` is set only for inserted characters."""

    kind: ChangeKind
    char: Optional[str] = None


@dataclass
class EditorModel:
    """A line buffer with cursor, modes, yank register, search and history."""

    lines: list[str] = field(default_factory=list)
    cursor_x: int = 0
    cursor_y: int = 0
    filepath: Optional[str] = None
    mode: EditorMode = EditorMode.NORMAL
    command_buffer: str = ""
    yanked_line: Optional[str] = None
    d_pressed: bool = False
    search_state: SearchState = field(default_factory=SearchState)
    history: History = field(default_factory=History)
    last_change: Optional[LastChange] = None

    # -- content ----------------------------------------------------------

    def set_content(self, content: str) -> None:
        """Replace the buffer with the lines of ``content``."""
        self.lines = _split_lines(content)

    def content(self) -> str:
        """Return the buffer as text, lines joined by newlines."""
        return "\n".join(self.lines)

    # -- search state views -----------------------------------------------

    @property
    def search_query(self) -> Optional[str]:
        return self.search_state.query

    @property
    def search_matches(self) -> list[Position]:
        return self.search_state.matches

    @property
    def current_search_match(self) -> Optional[int]:
        return self.search_state.current

    # -- cursor -----------------------------------------------------------

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

    # -- editing ----------------------------------------------------------

    def insert_char(self, c: str) -> None:
        """Insert ``c`` before the cursor and advance past it."""
        if self.cursor_y >= len(self.lines):
            self.lines.append("")
        line = self.lines[self.cursor_y]
        self.lines[self.cursor_y] = line[: self.cursor_x] + c + line[self.cursor_x:]
        self.cursor_x += 1
        self._record(LastChange(ChangeKind.INSERT_CHAR, c))

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
        else:
            return
        self._record(LastChange(ChangeKind.DELETE_CHAR))

    def delete_char_under_cursor(self) -> None:
        """Delete the character at the cursor, if there is one."""
        if self.cursor_y >= len(self.lines):
            return
        line = self.lines[self.cursor_y]
        if self.cursor_x < len(line):
            self.lines[self.cursor_y] = line[: self.cursor_x] + line[self.cursor_x + 1:]
            self._record(LastChange(ChangeKind.DELETE_CHAR_UNDER_CURSOR))

    def insert_newline(self) -> None:
        """Split the current line at the cursor and move to the new line."""
        if self.cursor_y >= len(self.lines):
            self.lines.append("")
        line = self.lines[self.cursor_y]
        self.lines[self.cursor_y] = line[: self.cursor_x]
        self.lines.insert(self.cursor_y + 1, line[self.cursor_x:])
        self.cursor_y += 1
        self.cursor_x = 0
        self._record(LastChange(ChangeKind.INSERT_NEWLINE))

    def insert_line_below(self) -> None:
        """Open an empty line below the cursor and move onto it."""
        if not self.lines:
            self.lines.append("")
            self.cursor_y = 0
        else:
            self.lines.insert(self.cursor_y + 1, "")
            self.cursor_y += 1
        self.cursor_x = 0
        self._record(LastChange(ChangeKind.INSERT_LINE_BELOW))

    def insert_line_above(self) -> None:
        """Open an empty line at the cursor row, pushing the row down."""
        self.lines.insert(self.cursor_y, "")
        self.cursor_x = 0
        self._record(LastChange(ChangeKind.INSERT_LINE_ABOVE))

    def delete_current_line(self) -> None:
        """Remove the cursor's line, keeping at least one (empty) line."""
        if not self.lines:
            return
        del self.lines[self.cursor_y]
        if self.cursor_y >= len(self.lines) and self.cursor_y > 0:
            self.cursor_y -= 1
        if not self.lines:
            self.lines.append("")
        self.cursor_x = 0
        self._record(LastChange(ChangeKind.DELETE_CURRENT_LINE))

    def put_line_below(self) -> None:
        """Insert the yanked line below the cursor and move onto it."""
        if self.yanked_line is None:
            return
        if not self.lines:
            self.lines.append(self.yanked_line)
            self.cursor_y = 0
        else:
            self.lines.insert(self.cursor_y + 1, self.yanked_line)
            self.cursor_y += 1
        self.cursor_x = 0
        self._record(LastChange(ChangeKind.PUT_LINE_BELOW))

    def repeat_last_change(self) -> None:
        """Perform the most recent change again."""
        change = self.last_change
        if change is None:
            return
        if change.kind is ChangeKind.INSERT_CHAR:
            self.insert_char(change.char or "")
            return
        actions = {
            ChangeKind.DELETE_CHAR: self.delete_char,
            ChangeKind.DELETE_CHAR_UNDER_CURSOR: self.delete_char_under_cursor,
            ChangeKind.INSERT_NEWLINE: self.insert_newline,
            ChangeKind.INSERT_LINE_BELOW: self.insert_line_below,
            ChangeKind.INSERT_LINE_ABOVE: self.insert_line_above,
            ChangeKind.DELETE_CURRENT_LINE: self.delete_current_line,
            ChangeKind.PUT_LINE_BELOW: self.put_line_below,
        }
        actions[change.kind]()

    # -- history ----------------------------------------------------------

    def save_snapshot(self) -> None:
        """Record the current buffer and cursor in the undo history."""
        self.history.save(self.lines, self.cursor_x, self.cursor_y)

    def undo(self) -> None:
        """Restore the previous snapshot, if any."""
        self._restore(self.history.undo())

    def redo(self) -> None:
        """Restore the next snapshot, if any."""
        self._restore(self.history.redo())

    # -- search -----------------------------------------------------------

    def search(self, query: str) -> None:
        """Find ``query`` in the buffer and jump to the first match at or after the cursor."""
        self._jump(
            self.search_state.search(self.lines, query, self.cursor_x, self.cursor_y)
        )

    def find_next(self) -> None:
        """Jump to the next search match."""
        self._jump(self.search_state.find_next())

    def find_previous(self) -> None:
        """Jump to the previous search match."""
        self._jump(self.search_state.find_previous())

    # -- helpers ----------------------------------------------------------

    def _record(self, change: LastChange) -> None:
        self.last_change = change
        self.save_snapshot()

    def _restore(self, snapshot: Optional[Snapshot]) -> None:
        if snapshot is None:
            return
        self.lines = list(snapshot.lines)
        self.cursor_x = snapshot.cursor_x
        self.cursor_y = snapshot.cursor_y

    def _jump(self, position: Optional[Position]) -> None:
        if position is not None:
            self.cursor_y, self.cursor_x = position


def _split_lines(content: str) -> list[str]:
    """Split on ``\\n``, dropping a trailing ``\\r`` and a final empty line."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]