"""ID3v2 frames."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidHeaderError
from .common import FRAME_HEADER_SIZE

_FRAME_ID_SIZE = 4
_ENCODING_LATIN1 = b"\x00"


@dataclass(frozen=True)
class FrameFlags:
    """Status and format flags of an ID3v2 frame."""

    tag_alter_preservation: bool = False
    file_alter_preservation: bool = False
    read_only: bool = False
    compression: bool = False
    encryption: bool = False
    grouping_identity: bool = False


@dataclass
class Frame:
    """An ID3v2 frame: its identifier, decoded text and raw payload."""

    frame_id: str
    content: str
    data: bytes

    @classmethod
    def parse(cls, data: bytes | bytearray, version: int) -> Frame:
        """Parse the frame that starts at the beginning of *data*."""
        if len(data) < FRAME_HEADER_SIZE:
            raise InvalidHeaderError("frame header is shorter than 10 bytes")
        frame_id = bytes(data[:_FRAME_ID_SIZE]).decode("utf-8", errors="replace")
        size = int.from_bytes(bytes(data[4:8]), "big")
        end = FRAME_HEADER_SIZE + size
        if end > len(data):
            raise InvalidHeaderError(f"frame {frame_id!r} extends past the buffer")
        payload = bytes(data[FRAME_HEADER_SIZE:end])
        # The first payload byte of a text frame names its encoding.
        content = payload[1:].decode("utf-8", errors="replace") if payload else ""
        return cls(frame_id, content, payload)

    @classmethod
    def text(cls, frame_id: str, content: str) -> Frame:
        """Build a text frame holding *content*."""
        return cls(frame_id, content, _ENCODING_LATIN1 + content.encode("utf-8"))

    def to_bytes(self) -> bytes:
        """Serialise the frame: header with zero flags, then the payload."""
        raw_id = self.frame_id.encode("utf-8")
        if len(raw_id) != _FRAME_ID_SIZE:
            raise InvalidHeaderError(f"frame id {self.frame_id!r} is not four bytes")
        return raw_id + len(self.data).to_bytes(4, "big") + b"\x00\x00" + self.data

    def is_empty(self) -> bool:
        """Whether the frame carries no payload."""
        return not self.data

    def total_size(self) -> int:
        """Size of the frame on the wire, header included."""
        return FRAME_HEADER_SIZE + len(self.data)