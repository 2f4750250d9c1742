"""ID3v2 versions and tag headers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..errors import InvalidHeaderError
from .common import HEADER_SIZE, ID3V2_IDENTIFIER, int_to_synchsafe, synchsafe_to_int


class Version(IntEnum):
    """Major version of an ID3v2 tag."""

    V2 = 2
    V3 = 3
    V4 = 4

    @classmethod
    def from_byte(cls, value: int) -> Version:
        """Map a header version byte to a version; unknown values mean v2.3."""
        if value == 2:
            return cls.V2
        if value == 4:
            return cls.V4
        return cls.V3


@dataclass
class ExtendedHeader:
    """ID3v2 extended header fields."""

    size: int = 0
    flags: int = 0
    padding_size: int = 0


@dataclass
class Header:
    """The ten-byte header at the start of an ID3v2 tag."""

    version: int
    revision: int = 0
    flags: int = 0
    size: int = 0

    @classmethod
    def parse(cls, buffer: bytes | bytearray) -> Header:
        """Parse a header from the first ten bytes of *buffer*."""
        if len(buffer) < HEADER_SIZE:
            raise InvalidHeaderError("ID3v2 header is shorter than 10 bytes")
        if bytes(buffer[:3]) != ID3V2_IDENTIFIER:
            raise InvalidHeaderError("missing ID3v2 identifier")
        return cls(
            version=buffer[3],
            revision=buffer[4],
            flags=buffer[5],
            size=synchsafe_to_int(buffer[6:10]),
        )

    def to_bytes(self) -> bytes:
        """Serialise the header to its ten-byte wire form."""
        return (
            ID3V2_IDENTIFIER
            + bytes((self.version, self.revision, self.flags))
            + int_to_synchsafe(self.size)
        )

    def is_valid(self) -> bool:
        """Whether the version is known and the tag has content."""
        return self.version <= 4 and self.size > 0