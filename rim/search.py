"""Plain-text search over buffer lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

Position = tuple[int, int]


def find_matches(lines: Iterable[str], query: str) -> list[Position]:
    """Return ``(y, x)`` of every non-overlapping occurrence of ``query``."""
    if not query:
        return []
    matches: list[Position] = []
    for y, line in enumerate(lines):
        x = line.find(query)
        while x != -1:
            matches.append((y, x))
            x = line.find(query, x + len(query))
    return matches


@dataclass
class SearchState:
    """The last search query, its matches and the selected match."""

    query: Optional[str] = None
    matches: list[Position] = field(default_factory=list)
    current: Optional[int] = None

    def search(
        self, lines: Iterable[str], query: str, cursor_x: int, cursor_y: int
    ) -> Optional[Position]:
        """Search for ``query``; return the ``(y, x)`` of the selected match."""
        self.query = query
        self.matches = find_matches(lines, query)
        self.current = None
        if not self.matches:
            return None
        self.current = next(
            (
                i
                for i, (y, x) in enumerate(self.matches)
                if y >= cursor_y and x >= cursor_x
            ),
            0,
        )
        return self.matches[self.current]

    def find_next(self) -> Optional[Position]:
        """Select the following match, wrapping around; return its position."""
        if self.current is None or not self.matches:
            return None
        self.current = (self.current + 1) % len(self.matches)
        return self.matches[self.current]

    def find_previous(self) -> Optional[Position]:
        """Select the preceding match, wrapping around; return its position."""
        if self.current is None or not self.matches:
            return None
        self.current = (self.current - 1) % len(self.matches)
        return self.matches[self.current]