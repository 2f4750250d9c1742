import io
import os

import pytest

from mp3tagkit.errors import FileError, TagError
from mp3tagkit.file_access import (
    FileAccessFactory,
    FileAccessStrategy,
    FileManager,
    StandardFileAccess,
    default_file_manager,
)


class _MemoryAccess(FileAccessStrategy):
    def __init__(self, files):
        self.files = files

    def open_for_read(self, path):
        return io.BytesIO(self.files[path])

    def open_for_write(self, path):
        self.files[path] = b""
        return io.BytesIO()

    def open_for_read_write(self, path):
        return io.BytesIO(self.files[path])

    def exists(self, path):
        return path in self.files

    def metadata(self, path):
        return os.stat_result((0o100644, 0, 0, 1, 0, 0, len(self.files[path]), 0, 0, 0))


@pytest.fixture
def manager():
    return FileManager(StandardFileAccess())


def test_open_for_read_returns_content(manager, tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"abc")
    with manager.open_for_read(target) as handle:
        assert handle.read() == b"abc"


def test_open_for_write_truncates(manager, tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"old content")
    with manager.open_for_write(target) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"new"


def test_open_for_read_write_keeps_rest(manager, tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"abcdef")
    with manager.open_for_read_write(target) as handle:
        handle.write(b"XY")
    assert target.read_bytes() == b"XYcdef"


def test_open_missing_file_raises_file_error(manager, tmp_path):
    with pytest.raises(FileError) as info:
        manager.open_for_read(tmp_path / "missing.mp3")
    assert isinstance(info.value, OSError)
    assert isinstance(info.value, TagError)


def test_read_write_requires_existing_file(manager, tmp_path):
    with pytest.raises(FileError):
        manager.open_for_read_write(tmp_path / "missing.mp3")


def test_exists_and_metadata(manager, tmp_path):
    target = tmp_path / "a.mp3"
    assert not manager.exists(target)
    target.write_bytes(b"12345")
    assert manager.exists(target)
    assert manager.metadata(target).st_size == 5


def test_metadata_of_missing_file_raises(manager, tmp_path):
    with pytest.raises(FileError):
        manager.metadata(tmp_path / "missing.mp3")


def test_validate_accepts_regular_file(manager, tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"x")
    assert manager.validate_file_path(target) is None
    assert manager.exists(target)


def test_validate_rejects_missing_file(manager, tmp_path):
    with pytest.raises(FileError, match="File not found"):
        manager.validate_file_path(tmp_path / "nonexistent.mp3")


def test_validate_rejects_directory(manager, tmp_path):
    directory = tmp_path / "directory_not_file"
    directory.mkdir()
    with pytest.raises(FileError, match="Path is not a file"):
        manager.validate_file_path(directory)


def test_manager_delegates_to_strategy():
    files = {"song": b"payload"}
    manager = FileManager(_MemoryAccess(files))
    assert manager.open_for_read("song").read() == b"payload"
    assert manager.exists("song")
    assert manager.metadata("song").st_size == len(b"payload")
    assert manager.validate_file_path("song") is None
    with pytest.raises(FileError, match="File not found"):
        manager.validate_file_path("other")


def test_factory_creates_working_access(tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"abc")
    for strategy in (FileAccessFactory.create_standard(), FileAccessFactory.create_default()):
        assert strategy.exists(target)
        assert not strategy.exists(tmp_path / "missing.mp3")
        assert strategy.metadata(target).st_size == 3
        with strategy.open_for_read(target) as handle:
            assert handle.read() == b"abc"


def test_with_default_strategy_reads_files(tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"abc")
    manager = FileManager.with_default_strategy()
    assert manager.exists(target)
    with manager.open_for_read(target) as handle:
        assert handle.read() == b"abc"
    with pytest.raises(FileError, match="File not found"):
        manager.validate_file_path(tmp_path / "missing.mp3")


def test_default_file_manager_is_shared(tmp_path):
    target = tmp_path / "a.mp3"
    target.write_bytes(b"abc")
    first = default_file_manager()
    second = default_file_manager()
    assert first is second
    assert first.metadata(target).st_size == 3
    with second.open_for_read(target) as handle:
        assert handle.read() == b"abc"


def test_strategy_interface_is_abstract():
    with pytest.raises(TypeError):
        FileAccessStrategy()