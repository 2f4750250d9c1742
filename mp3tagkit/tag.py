"""Reading and writing metadata through whichever tag a file carries."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from .errors import EntryNotFoundError, TagError
from .file_access import FileManager
from .id3.v1 import Id3v1Reader, Id3v1Writer
from .id3.v2 import Id3v2Reader, Id3v2Writer
from .meta_entry import MetaEntry, all_standard_entries
from .strategy import TagReaderStrategy, TagType, TagWriterStrategy

_S = TypeVar("_S", TagReaderStrategy, TagWriterStrategy)


@dataclass
class _Slot(Generic[_S]):
    strategy: _S
    initialized: bool = False


def _initialise(strategies: Iterable[_S], path: Path) -> list[_Slot[_S]]:
    slots = []
    for strategy in strategies:
        try:
            strategy.init(path)
        except TagError:
            slots.append(_Slot(strategy, False))
        else:
            slots.append(_Slot(strategy, True))
    return slots


def _validated(path: str | os.PathLike[str]) -> Path:
    path = Path(path)
    FileManager.with_default_strategy().validate_file_path(path)
    return path


class TagReader:
    """Reads metadata from a file, trying ID3v2 first and then ID3v1."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = _validated(path)
        self._slots = _initialise((Id3v2Reader(), Id3v1Reader()), self.path)

    def get_meta_entry(self, entry: MetaEntry) -> str:
        """Return the first value any usable tag holds for *entry*."""
        for slot in self._slots:
            if not slot.initialized:
                continue
            try:
                return slot.strategy.get_meta_entry(self.path, entry)
            except TagError:
                continue
        raise EntryNotFoundError(f"{entry} not found in any tag")

    def get_all_meta_entries(self) -> dict[MetaEntry, str]:
        """Return every standard entry that has a value."""
        entries = {}
        for entry in all_standard_entries():
            try:
                entries[entry] = self.get_meta_entry(entry)
            except EntryNotFoundError:
                continue
        return entries


class TagWriter:
    """Writes metadata to a file, preferring one kind of tag."""

    def __init__(
        self, path: str | os.PathLike[str], preferred_tag_type: TagType
    ) -> None:
        self.path = _validated(path)
        self.preferred_tag_type = preferred_tag_type
        self._slots = _initialise((Id3v2Writer(), Id3v1Writer()), self.path)

    def set_meta_entry(self, entry: MetaEntry, value: str) -> None:
        """Set *entry* with the preferred tag, or with the first tag that accepts it.

        Errors from the preferred tag are raised as they are.
        """
        usable = [slot for slot in self._slots if slot.initialized]
        for slot in usable:
            if slot.strategy.tag_type() == self.preferred_tag_type:
                slot.strategy.set_meta_entry(entry, value)
                return
        for slot in usable:
            try:
                slot.strategy.set_meta_entry(entry, value)
            except TagError:
                continue
            return
        raise TagError("Failed to set meta entry with any available strategy")

    def remove_meta_entry(self, entry: MetaEntry) -> None:
        """Clear *entry* by setting it to an empty value."""
        self.set_meta_entry(entry, "")

    def remove_meta_entries(self, entries: Iterable[MetaEntry]) -> None:
        """Clear each of *entries*, stopping at the first failure."""
        for entry in entries:
            self.remove_meta_entry(entry)

    def remove_all_meta_entries(self) -> None:
        """Clear every standard entry."""
        self.remove_meta_entries(all_standard_entries())


def _read_one(path: str | os.PathLike[str], entry: MetaEntry) -> str:
    return TagReader(path).get_meta_entry(entry)


def get_title(path: str | os.PathLike[str]) -> str:
    """Return the title stored in the file."""
    return _read_one(path, MetaEntry.TITLE)


def get_artist(path: str | os.PathLike[str]) -> str:
    """Return the artist stored in the file."""
    return _read_one(path, MetaEntry.ARTIST)


def get_album(path: str | os.PathLike[str]) -> str:
    """Return the album stored in the file."""
    return _read_one(path, MetaEntry.ALBUM)


def get_year(path: str | os.PathLike[str]) -> str:
    """Return the year stored in the file."""
    return _read_one(path, MetaEntry.YEAR)


def get_genre(path: str | os.PathLike[str]) -> str:
    """Return the genre stored in the file."""
    return _read_one(path, MetaEntry.GENRE)


def get_comment(path: str | os.PathLike[str]) -> str:
    """Return the comment stored in the file."""
    return _read_one(path, MetaEntry.COMMENT)


def get_composer(path: str | os.PathLike[str]) -> str:
    """Return the composer stored in the file."""
    return _read_one(path, MetaEntry.COMPOSER)


def get_all_meta_entries(path: str | os.PathLike[str]) -> dict[MetaEntry, str]:
    """Return every standard entry stored in the file."""
    return TagReader(path).get_all_meta_entries()