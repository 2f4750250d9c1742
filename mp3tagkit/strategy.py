"""Tag kinds and the interfaces that per-format readers and writers follow."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum

from .meta_entry import MetaEntry


class TagType(Enum):
    """The kind of tag a reader or writer handles."""

    ID3V1 = "id3v1"
    ID3V2 = "id3v2"
    APE = "ape"


class TagReaderStrategy(ABC):
    """Reads metadata entries from one kind of tag."""

    @abstractmethod
    def init(self, path: str | os.PathLike[str]) -> None:
        """Prepare the reader for the file at *path*."""

    @abstractmethod
    def get_meta_entry(self, path: str | os.PathLike[str], entry: MetaEntry) -> str:
        """Return the value of *entry*, raising a TagError if it is missing."""

    @abstractmethod
    def tag_type(self) -> TagType:
        """The kind of tag this reader handles."""


class TagWriterStrategy(ABC):
    """Writes metadata entries into one kind of tag."""

    @abstractmethod
    def init(self, path: str | os.PathLike[str]) -> None:
        """Prepare the writer for the file at *path*."""

    @abstractmethod
    def set_meta_entry(self, entry: MetaEntry, value: str) -> None:
        """Set *entry* to *value*."""

    @abstractmethod
    def save(self) -> None:
        """Store pending changes in the file."""

    @abstractmethod
    def tag_type(self) -> TagType:
        """The kind of tag this writer handles."""