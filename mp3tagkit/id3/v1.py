"""Reading and writing the fixed 128-byte ID3v1 tag at the end of a file."""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..errors import FileError, InvalidTagSizeError, TagError, TagNotFoundError
from ..meta_entry import MetaEntry
from ..strategy import TagReaderStrategy, TagType, TagWriterStrategy
from .common import (
    ALBUM_LENGTH,
    ARTIST_LENGTH,
    COMMENT_LENGTH,
    ID3V1_IDENTIFIER,
    ID3V1_TAG_SIZE,
    TITLE_LENGTH,
    YEAR_LENGTH,
    has_id3v1_tag,
)

_GENRE_LENGTH = 1

# Field attribute and width, in the order the fields appear in the tag.
_LAYOUT = (
    ("title", TITLE_LENGTH),
    ("artist", ARTIST_LENGTH),
    ("album", ALBUM_LENGTH),
    ("year", YEAR_LENGTH),
    ("comment", COMMENT_LENGTH),
    ("genre", _GENRE_LENGTH),
)

_ENTRY_FIELDS = {
    MetaEntry.TITLE: ("title", TITLE_LENGTH),
    MetaEntry.ARTIST: ("artist", ARTIST_LENGTH),
    MetaEntry.ALBUM: ("album", ALBUM_LENGTH),
    MetaEntry.YEAR: ("year", YEAR_LENGTH),
    MetaEntry.COMMENT: ("comment", COMMENT_LENGTH),
}


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


@dataclass
class Id3v1Tag:
    """The raw fields of an ID3v1 tag."""

    title: bytes = bytes(TITLE_LENGTH)
    artist: bytes = bytes(ARTIST_LENGTH)
    album: bytes = bytes(ALBUM_LENGTH)
    year: bytes = bytes(YEAR_LENGTH)
    comment: bytes = bytes(COMMENT_LENGTH)
    genre: bytes = bytes(_GENRE_LENGTH)

    @classmethod
    def read_from_file(cls, path: str | os.PathLike[str]) -> Id3v1Tag:
        """Read the tag from the last 128 bytes of the file."""
        with _file_errors(), open(path, "rb") as handle:
            if handle.seek(0, os.SEEK_END) < ID3V1_TAG_SIZE:
                raise TagNotFoundError("file is too short for an ID3v1 tag")
            handle.seek(-ID3V1_TAG_SIZE, os.SEEK_END)
            block = handle.read(ID3V1_TAG_SIZE)
        if block[:len(ID3V1_IDENTIFIER)] != ID3V1_IDENTIFIER:
            raise TagNotFoundError("no ID3v1 identifier at the end of the file")
        fields = {}
        offset = len(ID3V1_IDENTIFIER)
        for name, length in _LAYOUT:
            fields[name] = block[offset:offset + length]
            offset += length
        return cls(**fields)

    def write_to_file(self, path: str | os.PathLike[str]) -> None:
        """Overwrite the last 128 bytes of the file with this tag."""
        block = ID3V1_IDENTIFIER + b"".join(
            getattr(self, name) for name, _ in _LAYOUT
        )
        with _file_errors(), open(path, "r+b") as handle:
            if handle.seek(0, os.SEEK_END) < ID3V1_TAG_SIZE:
                raise TagNotFoundError("file is too short for an ID3v1 tag")
            handle.seek(-ID3V1_TAG_SIZE, os.SEEK_END)
            handle.write(block)


def _probe(path: str | os.PathLike[str]) -> bool:
    try:
        return has_id3v1_tag(path)
    except TagError:
        return False


class Id3v1Reader(TagReaderStrategy):
    """Reads entries from an ID3v1 tag."""

    def __init__(self) -> None:
        self.path: Path | None = None
        self.tag: Id3v1Tag | None = None

    def init(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        if _probe(path):
            self.tag = Id3v1Tag.read_from_file(path)

    def get_meta_entry(self, path: str | os.PathLike[str], entry: MetaEntry) -> str:
        if self.tag is None:
            raise TagNotFoundError("no ID3v1 tag")
        field = _ENTRY_FIELDS.get(entry)
        if field is None:
            raise EntryNotFoundError_(entry)
        raw = getattr(self.tag, field[0])
        return raw.decode("utf-8", errors="replace").rstrip()

    def tag_type(self) -> TagType:
        return TagType.ID3V1


def EntryNotFoundError_(entry: MetaEntry) -> Exception:  # noqa: N802
    from ..errors import EntryNotFoundError

    return EntryNotFoundError(f"ID3v1 has no field for {entry}")


class Id3v1Writer(TagWriterStrategy):
    """Writes entries into an ID3v1 tag."""

    def __init__(self) -> None:
        self.path: Path | None = None
        self.tag: Id3v1Tag | None = None

    def init(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.tag = Id3v1Tag.read_from_file(path) if _probe(path) else Id3v1Tag()

    def set_meta_entry(self, entry: MetaEntry, value: str) -> None:
        """Write *value* over the start of the field; unsupported entries are ignored."""
        if self.tag is None:
            self.tag = Id3v1Tag()
        field = _ENTRY_FIELDS.get(entry)
        if field is None:
            return
        name, length = field
        raw = value.encode("utf-8")
        if len(raw) > length:
            raise InvalidTagSizeError(
                f"{len(raw)} bytes do not fit the {length}-byte {entry} field"
            )
        current = getattr(self.tag, name)
        setattr(self.tag, name, raw + current[len(raw):])

    def save(self) -> None:
        if self.tag is None:
            return
        if self.path is None:
            raise FileError("writer has not been initialised with a file")
        self.tag.write_to_file(self.path)

    def tag_type(self) -> TagType:
        return TagType.ID3V1