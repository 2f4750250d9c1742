"""Pluggable ways of opening and inspecting files."""

from __future__ import annotations

import errno
import functools
import os
import stat
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import FileError


@contextmanager
def _file_errors() -> Iterator[None]:
    try:
        yield
    except FileError:
        raise
    except OSError as exc:
        if exc.errno is None:
            raise FileError(str(exc)) from exc
        raise FileError(exc.errno, exc.strerror, exc.filename) from exc


class FileAccessStrategy(ABC):
    """How files are opened and inspected."""

    @abstractmethod
    def open_for_read(self, path: str | os.PathLike[str]) -> BinaryIO:
        """Open a file for binary reading."""

    @abstractmethod
    def open_for_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        """Open a file for binary writing, creating or truncating it."""

    @abstractmethod
    def open_for_read_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        """Open an existing file for binary reading and writing."""

    @abstractmethod
    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Whether something exists at *path*."""

    @abstractmethod
    def metadata(self, path: str | os.PathLike[str]) -> os.stat_result:
        """Return the file's status information."""


class StandardFileAccess(FileAccessStrategy):
    """Direct access to the local file system."""

    def open_for_read(self, path: str | os.PathLike[str]) -> BinaryIO:
        with _file_errors():
            return open(path, "rb")

    def open_for_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        with _file_errors():
            return open(path, "wb")

    def open_for_read_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        with _file_errors():
            return open(path, "r+b")

    def exists(self, path: str | os.PathLike[str]) -> bool:
        return Path(path).exists()

    def metadata(self, path: str | os.PathLike[str]) -> os.stat_result:
        with _file_errors():
            return os.stat(path)


class FileAccessFactory:
    """Builds file access strategies."""

    @staticmethod
    def create_standard() -> FileAccessStrategy:
        """Return a strategy that uses the file system directly."""
        return StandardFileAccess()

    @staticmethod
    def create_default() -> FileAccessStrategy:
        """Return the default strategy."""
        return FileAccessFactory.create_standard()


class FileManager:
    """Performs file operations through a chosen strategy."""

    def __init__(self, strategy: FileAccessStrategy) -> None:
        self.strategy = strategy

    @classmethod
    def with_default_strategy(cls) -> FileManager:
        """Return a manager using the default strategy."""
        return cls(FileAccessFactory.create_default())

    def open_for_read(self, path: str | os.PathLike[str]) -> BinaryIO:
        return self.strategy.open_for_read(path)

    def open_for_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        return self.strategy.open_for_write(path)

    def open_for_read_write(self, path: str | os.PathLike[str]) -> BinaryIO:
        return self.strategy.open_for_read_write(path)

    def exists(self, path: str | os.PathLike[str]) -> bool:
        return self.strategy.exists(path)

    def metadata(self, path: str | os.PathLike[str]) -> os.stat_result:
        return self.strategy.metadata(path)

    def validate_file_path(self, path: str | os.PathLike[str]) -> None:
        """Raise FileError unless *path* exists and is a regular file."""
        if not self.exists(path):
            raise FileError(errno.ENOENT, f"File not found: {os.fspath(path)}")
        if not stat.S_ISREG(self.metadata(path).st_mode):
            raise FileError(errno.EINVAL, f"Path is not a file: {os.fspath(path)}")


@functools.lru_cache(maxsize=None)
def default_file_manager() -> FileManager:
    """Return the shared manager that uses the default strategy."""
    return FileManager.with_default_strategy()