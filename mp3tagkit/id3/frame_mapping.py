"""Mapping of metadata entries to ID3 frame identifiers."""

from __future__ import annotations

from ..meta_entry import MetaEntry, all_standard_entries
from .header import Version

_V3_V4_FRAMES = {
    "Title": "TIT2",
    "Artist": "TPE1",
    "Album": "TALB",
    "Year": "TYER",
    "Genre": "TCON",
    "Comment": "COMM",
    "Composer": "TCOM",
    "Track": "TRCK",
    "Date": "TDAT",
    "TextWriter": "TEXT",
    "AudioEncryption": "AENC",
    "Language": "TLAN",
    "Time": "TIME",
    "OriginalFilename": "TOFN",
    "FileType": "TFLT",
    "BandOrchestra": "TPE2",
    "AttachedPicture": "APIC",
    "AudioSeekPointIndex": "ASPI",
    "CommercialFrame": "COMR",
    "EncryptionMethodRegistration": "ENCR",
    "Equalisation2": "EQU2",
    "EventTimingCodes": "ETCO",
    "GeneralEncapsulatedObject": "GEOB",
    "GroupIdentificationRegistration": "GRID",
    "LinkedInformation": "LINK",
    "MusicCDIdentifier": "MCDI",
    "MPEGLocationLookupTable": "MLLT",
    "OwnershipFrame": "OWNE",
    "PrivateFrame": "PRIV",
    "PlayCounter": "PCNT",
    "Popularimeter": "POPM",
    "PositionSynchronisationFrame": "POSS",
    "RecommendedBufferSize": "RBUF",
    "RelativeVolumeAdjustment2": "RVA2",
    "Reverb": "RVRB",
    "SeekFrame": "SEEK",
    "SignatureFrame": "SIGN",
    "SynchronisedLyricText": "SYLT",
    "SynchronisedTempoCodes": "SYTC",
    "BeatsPerMinute": "TBPM",
    "CopyrightMessage": "TCOP",
    "EncodingTime": "TDEN",
    "PlaylistDelay": "TDLY",
    "OriginalReleaseTime": "TDOR",
    "RecordingTime": "TDRC",
    "ReleaseTime": "TDRL",
    "TaggingTime": "TDTG",
    "EncodedBy": "TENC",
    "InvolvedPeopleList": "TIPL",
    "ContentGroupDescription": "TIT1",
    "SubtitleDescriptionRefinement": "TIT3",
    "InitialKey": "TKEY",
    "Length": "TLEN",
    "MusicianCreditsList": "TMCL",
    "MediaType": "TMED",
    "Mood": "TMOO",
    "OriginalAlbumMovieShowTitle": "TOAL",
    "OriginalLyricistTextWriter": "TOLY",
    "OriginalArtistPerformer": "TOPE",
    "FileOwnerLicensee": "TOWN",
    "ConductorPerformerRefinement": "TPE3",
    "InterpretedRemixedModifiedBy": "TPE4",
    "PartOfSet": "TPOS",
    "ProducedNotice": "TPRO",
    "Publisher": "TPUB",
    "InternetRadioStationName": "TRSN",
    "InternetRadioStationOwner": "TRSO",
    "AlbumSortOrder": "TSOA",
    "PerformerSortOrder": "TSOP",
    "TitleSortOrder": "TSOT",
    "ISRC": "TSRC",
    "SoftwareHardwareSettings": "TSSE",
    "SetSubtitle": "TSST",
    "UserDefinedTextInformation": "TXXX",
    "UniqueFileIdentifier": "UFID",
    "TermsOfUse": "USER",
    "UnsynchronisedLyricTextTranscription": "USLT",
    "CommercialInformation": "WCOM",
    "CopyrightLegalInformation": "WCOP",
    "OfficialAudioFileWebpage": "WOAF",
    "OfficialArtistPerformerWebpage": "WOAR",
    "OfficialAudioSourceWebpage": "WOAS",
    "OfficialInternetRadioStationHomepage": "WORS",
    "Payment": "WPAY",
    "PublishersOfficialWebpage": "WPUB",
    "UserDefinedURLLink": "WXXX",
}

_V2_0_FRAMES = {
    "Title": "TIT",
    "Artist": "TP1",
    "Album": "TAL",
    "Date": "TDA",
    "Genre": "TCO",
    "TextWriter": "TXT",
    "AudioEncryption": "CRA",
    "Language": "TLA",
    "Time": "TIM",
    "Composer": "TCM",
    "FileType": "TFT",
    "BandOrchestra": "TP2",
    "RecommendedBufferSize": "BUF",
    "PlayCounter": "CNT",
    "Comments": "COM",
    "EncryptedMetaFrame": "CRM",
    "EventTimingCodes": "ETC",
    "Equalization": "EQU",
    "GeneralEncapsulatedObject": "GEO",
    "InvolvedPeopleList": "IPL",
    "LinkedInformation": "LNK",
    "MusicCDIdentifier": "MCI",
    "MPEGLocationLookupTable": "MLL",
    "AttachedPicture": "PIC",
    "Popularimeter": "POP",
    "Reverb": "REV",
    "RelativeVolumeAdjustment": "RVA",
    "SynchronizedLyricText": "SLT",
    "SyncedTempoCodes": "STC",
    "BeatsPerMinute": "TBP",
    "CopyrightMessage": "TCR",
    "PlaylistDelay": "TDY",
    "EncodedBy": "TEN",
    "InitialKey": "TKE",
    "Length": "TLE",
    "MediaType": "TMT",
    "OriginalArtistPerformer": "TOA",
    "OriginalFilename": "TOF",
    "OriginalLyricistTextWriter": "TOL",
    "OriginalReleaseYear": "TOR",
    "OriginalAlbumMovieShowTitle": "TOT",
    "ConductorPerformerRefinement": "TP3",
    "InterpretedRemixedModifiedBy": "TP4",
    "PartOfSet": "TPA",
    "Publisher": "TPB",
    "ISRC": "TRC",
    "RecordingDates": "TRD",
    "TrackNumberPositionInSet": "TRK",
    "Size": "TSI",
    "SoftwareHardwareSettings": "TSS",
    "ContentGroupDescription": "TT1",
    "TitleSongnameContentDescription": "TT2",
    "SubtitleDescriptionRefinement": "TT3",
    "UserDefinedTextInformation": "TXX",
    "Year": "TYE",
    "UniqueFileIdentifier": "UFI",
    "UnsynchronizedLyricTextTranscription": "ULT",
    "OfficialAudioFileWebpage": "WAF",
    "OfficialArtistPerformerWebpage": "WAR",
    "OfficialAudioSourceWebpage": "WAS",
    "CommercialInformation": "WCM",
    "CopyrightLegalInformation": "WCP",
    "PublishersOfficialWebpage": "WPB",
    "UserDefinedURLLink": "WXX",
}

_V3_V4_IDS = frozenset(_V3_V4_FRAMES.values())
_V2_0_IDS = frozenset(_V2_0_FRAMES.values())

_ID3V1_ENTRIES = (
    MetaEntry.TITLE,
    MetaEntry.ARTIST,
    MetaEntry.ALBUM,
    MetaEntry.YEAR,
    MetaEntry.COMMENT,
)


def _lookup(table: dict[str, str], entry: MetaEntry) -> str | None:
    if entry.is_custom():
        return None
    return table.get(str(entry))


def frame_id_v3_v4(entry: MetaEntry) -> str | None:
    """Return the ID3v2.3/v2.4 frame id for *entry*, or None."""
    return _lookup(_V3_V4_FRAMES, entry)


def is_supported_frame_v3_v4(frame_id: str) -> bool:
    """Whether *frame_id* is a known ID3v2.3/v2.4 frame."""
    return frame_id in _V3_V4_IDS


def frame_id_v2_0(entry: MetaEntry) -> str | None:
    """Return the ID3v2.2 three-character frame id for *entry*, or None."""
    return _lookup(_V2_0_FRAMES, entry)


def is_supported_frame_v2_0(frame_id: str) -> bool:
    """Whether *frame_id* is a known ID3v2.2 frame."""
    return frame_id in _V2_0_IDS


def frame_id_for_version(entry: MetaEntry, version: Version) -> str | None:
    """Return the frame id for *entry* in the given tag version, or None."""
    if version == Version.V2:
        return frame_id_v2_0(entry)
    return frame_id_v3_v4(entry)


def id3v1_supported_entries() -> list[MetaEntry]:
    """Entries an ID3v1 tag can hold."""
    return list(_ID3V1_ENTRIES)


def id3v1_is_supported(entry: MetaEntry) -> bool:
    """Whether an ID3v1 tag can hold *entry*."""
    return entry in _ID3V1_ENTRIES


def id3v2_supported_entries() -> list[MetaEntry]:
    """Standard entries an ID3v2 tag can hold; custom entries are also allowed."""
    return all_standard_entries()


def id3v2_is_supported(entry: MetaEntry) -> bool:
    """Whether an ID3v2 tag can hold *entry*."""
    return entry.is_custom() or entry in all_standard_entries()