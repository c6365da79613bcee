"""Ex-style commands entered after ``:``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar, Optional


class HandleCommandResult(Enum):
    """What the editor should do after a command has run."""

    CONTINUE = auto()
    QUIT = auto()


@dataclass(frozen=True)
class WriteCommand:
    """Save the buffer, optionally to a new path."""

    filepath: Optional[str] = None
    names: ClassVar[tuple[str, ...]] = ("w", "write")

    def execute(self, service: Any) -> HandleCommandResult:
        service.save_file(self.filepath)
        return HandleCommandResult.CONTINUE


@dataclass(frozen=True)
class QuitCommand:
    """Leave the editor."""

    names: ClassVar[tuple[str, ...]] = ("q", "quit")

    def execute(self, service: Any) -> HandleCommandResult:
        return HandleCommandResult.QUIT


@dataclass(frozen=True)
class EditCommand:
    """Open a file into the buffer."""

    filepath: str = ""
    names: ClassVar[tuple[str, ...]] = ("e", "edit")

    def execute(self, service: Any) -> HandleCommandResult:
        service.open_file(self.filepath)
        return HandleCommandResult.CONTINUE