"""Reading and writing ID3v2 tags at the start of a file."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator

from ..errors import (
    EntryNotFoundError,
    FileError,
    InvalidHeaderError,
    TagError,
    TagNotFoundError,
)
from ..meta_entry import MetaEntry
from ..strategy import TagReaderStrategy, TagType, TagWriterStrategy
from .common import FRAME_HEADER_SIZE, HEADER_SIZE, has_id3v2_tag
from .frame import Frame
from .frame_mapping import (
    frame_id_for_version,
    is_supported_frame_v2_0,
    is_supported_frame_v3_v4,
)
from .header import Header, Version

_log = logging.getLogger(__name__)

_FRAME_ID_SIZE = 4


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


def _read_exact(handle: BinaryIO, size: int) -> bytes:
    data = handle.read(size)
    if len(data) < size:
        raise FileError("unexpected end of file")
    return data


@dataclass
class Id3v2Tag:
    """An ID3v2 tag: version, header flags and frames grouped by id."""

    version: Version
    flags: int = 0
    frames: dict[str, list[Frame]] = field(default_factory=dict)


def _is_supported_frame(frame_id: str, version: Version) -> bool:
    if version == Version.V2:
        return is_supported_frame_v2_0(frame_id)
    return is_supported_frame_v3_v4(frame_id)


class _TagParser:
    """Parses a whole tag; subclasses adjust frame checks and collection."""

    check_empty_frame_id = True
    validate_frame_ids = True

    def parse_tag(self, path: str | os.PathLike[str]) -> Id3v2Tag:
        with _file_errors(), open(path, "rb") as handle:
            header = Header.parse(_read_exact(handle, HEADER_SIZE))
            if not header.is_valid():
                raise InvalidHeaderError("invalid ID3v2 header")
            data = _read_exact(handle, header.size)
        frames: dict[str, list[Frame]] = {}
        for frame in self._frames(data, header):
            self.collect_frame(frames, frame)
        return Id3v2Tag(Version.from_byte(header.version), header.flags, frames)

    def _frames(self, data: bytes, header: Header) -> Iterator[Frame]:
        view = memoryview(data)
        version = Version.from_byte(header.version)
        offset = 0
        while offset + FRAME_HEADER_SIZE <= len(data):
            size = int.from_bytes(data[offset + 4:offset + 8], "big")
            if offset + FRAME_HEADER_SIZE + size > len(data):
                _log.warning("Invalid frame size at offset %d", offset)
                return
            if self.check_empty_frame_id and not any(
                data[offset:offset + _FRAME_ID_SIZE]
            ):
                _log.warning("Empty zeroed frame found at offset %d", offset)
                return
            frame = Frame.parse(view[offset:], header.version)
            if frame.is_empty():
                _log.warning("Empty frame found at offset %d", offset)
                return
            if self.validate_frame_ids and not _is_supported_frame(
                frame.frame_id, version
            ):
                _log.warning(
                    "Unsupported frame ID %r found at offset %d",
                    frame.frame_id,
                    offset,
                )
                return
            offset += frame.total_size()
            yield frame

    def collect_frame(self, frames: dict[str, list[Frame]], frame: Frame) -> None:
        frames.setdefault(frame.frame_id, []).append(frame)


class _ExistingTagParser(_TagParser):
    """Parser used before rewriting a tag: keeps the last frame of each id."""

    check_empty_frame_id = False

    def collect_frame(self, frames: dict[str, list[Frame]], frame: Frame) -> None:
        frames[frame.frame_id] = [frame]


def read_tag(path: str | os.PathLike[str]) -> Id3v2Tag:
    """Read the ID3v2 tag at the start of the file."""
    return _TagParser().parse_tag(path)


def _probe(path: str | os.PathLike[str]) -> bool:
    try:
        return has_id3v2_tag(path)
    except TagError:
        return False


class Id3v2Reader(TagReaderStrategy):
    """Reads entries from an ID3v2 tag, cached when the reader is initialised."""

    def __init__(self) -> None:
        self.tag: Id3v2Tag | None = None

    def init(self, path: str | os.PathLike[str]) -> None:
        self.tag = read_tag(path) if _probe(path) else None

    def get_meta_entry(self, path: str | os.PathLike[str], entry: MetaEntry) -> str:
        if self.tag is None:
            raise TagNotFoundError("no ID3v2 tag")
        frame_id = frame_id_for_version(entry, self.tag.version)
        frames = self.tag.frames.get(frame_id) if frame_id is not None else None
        if not frames:
            raise EntryNotFoundError(f"no frame for {entry}")
        return frames[0].content

    def tag_type(self) -> TagType:
        return TagType.ID3V2


class Id3v2Writer(TagWriterStrategy):
    """Writes entries straight into the file's ID3v2 tag."""

    def __init__(self) -> None:
        self.path: Path | None = None

    def init(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _require_path(self) -> Path:
        if self.path is None:
            raise FileError("writer has not been initialised with a file")
        return self.path

    def set_meta_entry(self, entry: MetaEntry, value: str) -> None:
        """Replace the entry's frame, keeping the other frames, and write the tag."""
        path = self._require_path()
        existing = _ExistingTagParser().parse_tag(path) if _probe(path) else None
        version = existing.version if existing is not None else Version.V3
        frame_id = frame_id_for_version(entry, version)
        if frame_id is None:
            raise TagError(f"No frame mapping for entry: {entry}")
        tag = existing if existing is not None else Id3v2Tag(version)
        tag.frames[frame_id] = [Frame.text(frame_id, value)]
        self._write_tag(path, tag)

    @staticmethod
    def _write_tag(path: Path, tag: Id3v2Tag) -> None:
        frame_data = b"".join(
            frame.to_bytes() for frames in tag.frames.values() for frame in frames
        )
        header = Header(int(tag.version), flags=tag.flags, size=len(frame_data))
        with _file_errors(), open(path, "r+b") as handle:
            handle.seek(0)
            handle.write(header.to_bytes())
            handle.write(frame_data)

    def save(self) -> None:
        """Changes are written immediately, so there is nothing left to store."""

    def tag_type(self) -> TagType:
        return TagType.ID3V2