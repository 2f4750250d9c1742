"""Constants and low-level helpers shared by the ID3 tag formats."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from ..errors import FileError

ID3V1_TAG_SIZE = 128
ID3V1_IDENTIFIER = b"TAG"

ID3V2_IDENTIFIER = b"ID3"
HEADER_SIZE = 10
FOOTER_SIZE = 10
FRAME_HEADER_SIZE = 10
PADDING_SIZE = 2048
FLAG_EXTENDED_HEADER = 0x40

# ID3v1 field layout
TITLE_LENGTH = 30
ARTIST_LENGTH = 30
ALBUM_LENGTH = 30
YEAR_LENGTH = 4
COMMENT_LENGTH = 30

TITLE_OFFSET = 3
ARTIST_OFFSET = TITLE_OFFSET + TITLE_LENGTH
ALBUM_OFFSET = ARTIST_OFFSET + ARTIST_LENGTH
YEAR_OFFSET = ALBUM_OFFSET + ALBUM_LENGTH
COMMENT_OFFSET = YEAR_OFFSET + YEAR_LENGTH
GENRE_OFFSET = COMMENT_OFFSET + COMMENT_LENGTH


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


def has_id3v1_tag(path: str | os.PathLike[str]) -> bool:
    """Whether the file ends with an ID3v1 tag."""
    with _file_errors(), open(path, "rb") as handle:
        size = handle.seek(0, os.SEEK_END)
        if size < ID3V1_TAG_SIZE:
            return False
        handle.seek(-ID3V1_TAG_SIZE, os.SEEK_END)
        return handle.read(len(ID3V1_IDENTIFIER)) == ID3V1_IDENTIFIER


def has_id3v2_tag(path: str | os.PathLike[str]) -> bool:
    """Whether the file starts with a complete ID3v2 header identifier."""
    with _file_errors(), open(path, "rb") as handle:
        header = handle.read(HEADER_SIZE)
    if len(header) < HEADER_SIZE:
        return False
    return header[:len(ID3V2_IDENTIFIER)] == ID3V2_IDENTIFIER


def synchsafe_to_int(data: bytes | bytearray) -> int:
    """Decode a synchsafe integer: seven significant bits per byte."""
    result = 0
    for byte in data:
        result = (result << 7) | (byte & 0x7F)
    return result


def int_to_synchsafe(value: int) -> bytes:
    """Encode the low 28 bits of *value* as a four-byte synchsafe integer."""
    return bytes((value >> shift) & 0x7F for shift in (21, 14, 7, 0))