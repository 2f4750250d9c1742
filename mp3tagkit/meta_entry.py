"""Metadata fields that can be stored in audio tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, repr=False)
class MetaEntry:
    """A metadata field: one of the standard fields or a custom key.

    Not every tag format supports every field: ID3v1 knows only the core
    fields, while ID3v2 and APE support all of them.
    """

    name: str
    user_defined: bool = False

    TITLE: ClassVar[MetaEntry]
    ARTIST: ClassVar[MetaEntry]
    ALBUM: ClassVar[MetaEntry]
    YEAR: ClassVar[MetaEntry]
    GENRE: ClassVar[MetaEntry]
    COMMENT: ClassVar[MetaEntry]
    COMPOSER: ClassVar[MetaEntry]
    TRACK: ClassVar[MetaEntry]
    DATE: ClassVar[MetaEntry]
    TEXT_WRITER: ClassVar[MetaEntry]
    AUDIO_ENCRYPTION: ClassVar[MetaEntry]
    LANGUAGE: ClassVar[MetaEntry]
    TIME: ClassVar[MetaEntry]
    ORIGINAL_FILENAME: ClassVar[MetaEntry]
    FILE_TYPE: ClassVar[MetaEntry]
    BAND_ORCHESTRA: ClassVar[MetaEntry]

    @classmethod
    def custom(cls, key: str) -> MetaEntry:
        """Return a custom entry with a user-defined key."""
        return cls(key, user_defined=True)

    def is_custom(self) -> bool:
        """Whether this entry carries a user-defined key."""
        return self.user_defined

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        if self.user_defined:
            return f"MetaEntry.custom({self.name!r})"
        return f"MetaEntry({self.name!r})"


MetaEntry.TITLE = MetaEntry("Title")
MetaEntry.ARTIST = MetaEntry("Artist")
MetaEntry.ALBUM = MetaEntry("Album")
MetaEntry.YEAR = MetaEntry("Year")
MetaEntry.GENRE = MetaEntry("Genre")
MetaEntry.COMMENT = MetaEntry("Comment")
MetaEntry.COMPOSER = MetaEntry("Composer")
MetaEntry.TRACK = MetaEntry("Track")
MetaEntry.DATE = MetaEntry("Date")
MetaEntry.TEXT_WRITER = MetaEntry("TextWriter")
MetaEntry.AUDIO_ENCRYPTION = MetaEntry("AudioEncryption")
MetaEntry.LANGUAGE = MetaEntry("Language")
MetaEntry.TIME = MetaEntry("Time")
MetaEntry.ORIGINAL_FILENAME = MetaEntry("OriginalFilename")
MetaEntry.FILE_TYPE = MetaEntry("FileType")
MetaEntry.BAND_ORCHESTRA = MetaEntry("BandOrchestra")

_STANDARD_ENTRIES = (
    MetaEntry.TITLE,
    MetaEntry.ARTIST,
    MetaEntry.ALBUM,
    MetaEntry.YEAR,
    MetaEntry.GENRE,
    MetaEntry.COMMENT,
    MetaEntry.COMPOSER,
    MetaEntry.TRACK,
    MetaEntry.DATE,
    MetaEntry.TEXT_WRITER,
    MetaEntry.AUDIO_ENCRYPTION,
    MetaEntry.LANGUAGE,
    MetaEntry.TIME,
    MetaEntry.ORIGINAL_FILENAME,
    MetaEntry.FILE_TYPE,
    MetaEntry.BAND_ORCHESTRA,
)


def all_standard_entries() -> list[MetaEntry]:
    """Return every standard entry (no custom ones), in a fixed order."""
    return list(_STANDARD_ENTRIES)