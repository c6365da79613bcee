"""Reading and writing the files the editor works on."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileIO(ABC):
    """Storage the editor reads files from and writes them to."""

    @abstractmethod
    def read_file(self, path: str) -> str:
        """Return the whole text of ``path``; raise ``OSError`` on failure."""

    @abstractmethod
    def write_file(self, path: str, content: str) -> None:
        """Replace the contents of ``path``; raise ``OSError`` on failure."""


class LocalFileIO(FileIO):
    """Files on the local filesystem, as UTF-8 text kept byte for byte."""

    def read_file(self, path: str) -> str:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_file(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)