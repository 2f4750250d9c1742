"""File and byte-buffer helpers shared by the tag formats."""

from __future__ import annotations

import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import FileError, FileRenameError, InvalidTagSizeError, TagError

MODIFIED_ENDING = ".mod"

_CHUNK_SIZE = 8192

PathLike = "str | os.PathLike[str]"


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


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole content of a file."""
    with _file_errors():
        return Path(path).read_bytes()


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Create or truncate a file and write *data* to it."""
    with _file_errors():
        Path(path).write_bytes(data)


def rename_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Rename *source* to *target*, replacing *target* if it exists."""
    try:
        os.replace(source, target)
    except OSError as exc:
        raise FileRenameError(str(exc)) from exc


def get_temp_path(path: str | os.PathLike[str]) -> Path:
    """Return the path with ``.tmp`` appended after its extension."""
    path = Path(path)
    if not path.name:
        return path
    return path.with_name(path.name + ".tmp")


def copy_file_range(source: BinaryIO, target: BinaryIO) -> None:
    """Copy everything left in *source* to *target*."""
    with _file_errors():
        shutil.copyfileobj(source, target, _CHUNK_SIZE)


def absolute_path(path: str | os.PathLike[str]) -> Path:
    """Return *path* made absolute against the current directory."""
    path = Path(path)
    if path.is_absolute():
        return path
    with _file_errors():
        return Path.cwd() / path


def _check_range(buffer: bytes | bytearray, start: int, length: int) -> bool:
    return start >= 0 and length >= 0 and start + length <= len(buffer)


def extract_string(buffer: bytes | bytearray, start: int, length: int) -> str:
    """Return the printable ASCII characters of ``buffer[start:start+length]``."""
    if not _check_range(buffer, start, length):
        raise TagError(
            f"Buffer size {len(buffer)} < requested length: {start + length}"
        )
    printable = bytes(b for b in buffer[start:start + length] if 32 <= b <= 126)
    return printable.decode("ascii")


def get_tag_size(
    buffer: bytes | bytearray, start: int, length: int, big_endian: bool
) -> int:
    """Read an unsigned size field of *length* bytes at *start*."""
    if not _check_range(buffer, start, length):
        raise InvalidTagSizeError("size field lies outside the buffer")
    order = "big" if big_endian else "little"
    return int.from_bytes(bytes(buffer[start:start + length]), order)


def update_size_field(
    buffer: bytearray, start: int, length: int, extra_size: int, big_endian: bool
) -> None:
    """Add *extra_size* to the size field at *start*, in place."""
    if not _check_range(buffer, start, length):
        raise InvalidTagSizeError("size field lies outside the buffer")
    size = get_tag_size(buffer, start, length, big_endian) + extra_size
    if not 0 <= size <= 0xFFFFFFFF:
        raise InvalidTagSizeError(f"size {size} does not fit in 32 bits")
    stored = size & ((1 << (8 * length)) - 1)
    order = "big" if big_endian else "little"
    buffer[start:start + length] = stored.to_bytes(length, order)


def search_pattern(haystack: bytes | bytearray, needle: bytes | bytearray) -> int | None:
    """Return the first offset of *needle* in *haystack*, or None."""
    if not needle or len(haystack) < len(needle):
        return None
    position = haystack.find(needle)
    return None if position < 0 else position


def create_temp_path(path: str | os.PathLike[str]) -> Path:
    """Return a hidden ``.<name>.tmp`` path next to *path*."""
    path = Path(path)
    if not path.name:
        raise FileError("Invalid file path")
    return path.with_name(f".{path.name}.tmp")


def replace_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> None:
    """Move *source* over *target*."""
    with _file_errors():
        os.replace(source, target)


def copy_data(source: BinaryIO, target: BinaryIO, size: int) -> None:
    """Copy up to *size* bytes from *source* to *target*, stopping at end of file."""
    remaining = size
    with _file_errors():
        while remaining > 0:
            chunk = source.read(min(_CHUNK_SIZE, remaining))
            if not chunk:
                break
            target.write(chunk)
            remaining -= len(chunk)