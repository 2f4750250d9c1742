import pytest

from mp3tagkit.id3.frame_mapping import (
    frame_id_for_version,
    frame_id_v2_0,
    frame_id_v3_v4,
    id3v1_is_supported,
    id3v1_supported_entries,
    id3v2_is_supported,
    id3v2_supported_entries,
    is_supported_frame_v2_0,
    is_supported_frame_v3_v4,
)
from mp3tagkit.id3.header import Version
from mp3tagkit.meta_entry import MetaEntry, all_standard_entries


@pytest.mark.parametrize(
    "entry, frame_id",
    [
        (MetaEntry.TITLE, "TIT2"),
        (MetaEntry.ARTIST, "TPE1"),
        (MetaEntry.ALBUM, "TALB"),
        (MetaEntry.YEAR, "TYER"),
        (MetaEntry.GENRE, "TCON"),
        (MetaEntry.COMMENT, "COMM"),
        (MetaEntry.COMPOSER, "TCOM"),
        (MetaEntry.TRACK, "TRCK"),
        (MetaEntry.BAND_ORCHESTRA, "TPE2"),
    ],
)
def test_frame_id_v3_v4(entry, frame_id):
    assert frame_id_v3_v4(entry) == frame_id


@pytest.mark.parametrize(
    "entry, frame_id",
    [
        (MetaEntry.TITLE, "TIT"),
        (MetaEntry.ARTIST, "TP1"),
        (MetaEntry.YEAR, "TYE"),
        (MetaEntry.ORIGINAL_FILENAME, "TOF"),
        (MetaEntry.COMMENT, None),
        (MetaEntry.TRACK, None),
    ],
)
def test_frame_id_v2_0(entry, frame_id):
    assert frame_id_v2_0(entry) == frame_id


def test_custom_entries_have_no_frame_id():
    entry = MetaEntry.custom("AttachedPicture")
    assert frame_id_v3_v4(entry) is None
    assert frame_id_v2_0(entry) is None


def test_every_standard_entry_maps_in_v3_v4():
    for entry in all_standard_entries():
        frame_id = frame_id_v3_v4(entry)
        assert frame_id is not None and len(frame_id) == 4
        assert is_supported_frame_v3_v4(frame_id)


def test_v2_0_ids_are_three_characters():
    for entry in all_standard_entries():
        frame_id = frame_id_v2_0(entry)
        if frame_id is not None:
            assert len(frame_id) == 3
            assert is_supported_frame_v2_0(frame_id)


@pytest.mark.parametrize(
    "frame_id, v34, v20",
    [("APIC", True, False), ("TIT2", True, False), ("TIT", False, True), ("XXXX", False, False)],
)
def test_is_supported_frame(frame_id, v34, v20):
    assert is_supported_frame_v3_v4(frame_id) is v34
    assert is_supported_frame_v2_0(frame_id) is v20


@pytest.mark.parametrize(
    "version, frame_id",
    [(Version.V2, "TIT"), (Version.V3, "TIT2"), (Version.V4, "TIT2")],
)
def test_frame_id_for_version(version, frame_id):
    assert frame_id_for_version(MetaEntry.TITLE, version) == frame_id


def test_id3v1_supported_entries():
    assert id3v1_supported_entries() == [
        MetaEntry.TITLE,
        MetaEntry.ARTIST,
        MetaEntry.ALBUM,
        MetaEntry.YEAR,
        MetaEntry.COMMENT,
    ]


def test_id3v1_is_supported():
    assert id3v1_is_supported(MetaEntry.TITLE)
    assert not id3v1_is_supported(MetaEntry.GENRE)
    assert not id3v1_is_supported(MetaEntry.custom("Title2"))


def test_id3v2_supported_entries_are_standard_entries():
    assert id3v2_supported_entries() == all_standard_entries()


def test_id3v2_is_supported():
    assert all(id3v2_is_supported(entry) for entry in all_standard_entries())
    assert id3v2_is_supported(MetaEntry.custom("Mood"))