"""Exceptions raised while reading and writing audio tags."""


class TagError(Exception):
    """Base class for every error raised by this package."""


class FileError(TagError, OSError):
    """A file could not be opened, read, written or inspected."""


class FileRenameError(TagError):
    """A file could not be renamed."""


class EntryNotFoundError(TagError):
    """The requested metadata entry is not present in any tag."""


class TagNotFoundError(TagError):
    """The file does not carry the requested kind of tag."""


class InvalidHeaderError(TagError):
    """A tag or frame header is malformed."""


class InvalidTagSizeError(TagError):
    """A size field is out of range or does not fit the buffer."""


class NonPrintableContentError(TagError):
    """A field holds content that cannot be turned into text."""