import pytest

from mp3tagkit.errors import InvalidHeaderError
from mp3tagkit.id3.frame import Frame, FrameFlags


def test_text_frame_payload():
    frame = Frame.text("TIT2", "Hello")
    assert frame.frame_id == "TIT2"
    assert frame.content == "Hello"
    assert frame.data == b"\x00Hello"


def test_text_frame_wire_header():
    raw = Frame.text("TIT2", "Hello").to_bytes()
    assert raw[:4] == b"TIT2"
    assert raw[4:8] == b"\x00\x00\x00\x06"
    assert raw[8:10] == b"\x00\x00"
    assert raw[10:] == b"\x00Hello"


@pytest.mark.parametrize("text", ["Test Title", "", "Test 测试 🎵"])
def test_frame_round_trip(text):
    frame = Frame.text("TPE1", text)
    parsed = Frame.parse(frame.to_bytes(), 3)
    assert parsed == frame


def test_total_size_matches_wire_length():
    frame = Frame.text("TALB", "Test Album")
    assert frame.total_size() == len(frame.to_bytes())


def test_parse_ignores_following_frames():
    first = Frame.text("TIT2", "One")
    second = Frame.text("TPE1", "Two")
    parsed = Frame.parse(first.to_bytes() + second.to_bytes(), 3)
    assert parsed == first


def test_parse_empty_payload():
    frame = Frame.parse(b"TIT2\x00\x00\x00\x00\x00\x00", 3)
    assert frame.is_empty()
    assert frame.content == ""


def test_text_frame_is_not_empty():
    assert not Frame.text("TIT2", "").is_empty()


def test_parse_too_short():
    with pytest.raises(InvalidHeaderError):
        Frame.parse(b"TIT2", 3)


def test_parse_size_past_buffer():
    with pytest.raises(InvalidHeaderError):
        Frame.parse(b"TIT2\x00\x00\x01\x00\x00\x00abc", 3)


def test_to_bytes_rejects_short_id():
    with pytest.raises(InvalidHeaderError):
        Frame.text("TIT", "x").to_bytes()


def test_frame_flags_default_to_false():
    flags = FrameFlags()
    values = [
        flags.tag_alter_preservation,
        flags.file_alter_preservation,
        flags.read_only,
        flags.compression,
        flags.encryption,
        flags.grouping_identity,
    ]
    assert values == [False] * 6