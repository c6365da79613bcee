"""Undo/redo history of buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(frozen=True)
class Snapshot:
    """The buffer's lines and cursor position at one point in time."""

    lines: tuple[str, ...]
    cursor_x: int
    cursor_y: int


@dataclass
class History:
    """A linear undo history.

    ``index`` counts the snapshots that are currently "applied". Saving a
    new snapshot after undoing discards the undone future.
    """

    snapshots: list[Snapshot] = field(default_factory=list)
    index: int = 0

    def __len__(self) -> int:
        return len(self.snapshots)

    def save(self, lines: Iterable[str], cursor_x: int, cursor_y: int) -> Snapshot:
        """Record the given state, dropping any redo future, and return it."""
        del self.snapshots[self.index:]
        snapshot = Snapshot(tuple(lines), cursor_x, cursor_y)
        self.snapshots.append(snapshot)
        self.index += 1
        return snapshot

    def undo(self) -> Optional[Snapshot]:
        """Step back one snapshot; return the state to restore, or None."""
        if self.index <= 1:
            return None
        self.index -= 1
        return self.snapshots[self.index - 1]

    def redo(self) -> Optional[Snapshot]:
        """Step forward one snapshot; return the state to restore, or None."""
        if self.index >= len(self.snapshots):
            return None
        self.index += 1
        return self.snapshots[self.index - 1]