import pytest

from rim.file_io import FileIO, LocalFileIO


@pytest.mark.parametrize(
    "content",
    ["line1\nline2", "a\r\nb\n", "カーソル", ""],
)
def test_round_trip(tmp_path, content):
    path = str(tmp_path / "test.txt")
    io = LocalFileIO()
    io.write_file(path, content)
    assert io.read_file(path) == content


def test_line_endings_preserved_on_disk(tmp_path):
    path = tmp_path / "crlf.txt"
    LocalFileIO().write_file(str(path), "a\r\nb\n")
    assert path.read_bytes() == b"a\r\nb\n"


def test_write_overwrites(tmp_path):
    path = str(tmp_path / "save_test.txt")
    io = LocalFileIO()
    io.write_file(path, "first content that is long")
    io.write_file(path, "save content")
    assert io.read_file(path) == "save content"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalFileIO().read_file(str(tmp_path / "non_existent.txt"))


def test_write_into_missing_directory(tmp_path):
    with pytest.raises(OSError):
        LocalFileIO().write_file(str(tmp_path / "missing" / "f.txt"), "x")


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        FileIO()