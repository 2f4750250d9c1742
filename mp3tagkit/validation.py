"""Length and character checks for tag values."""

from __future__ import annotations

from .meta_entry import MetaEntry


class ValidationError(ValueError):
    """A value is not acceptable for a tag field."""


class MaxLengthExceededError(ValidationError):
    """A value is longer than its field allows."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Value exceeds max length: {field}")
        self.field = field


class InvalidCharactersError(ValidationError):
    """A value holds characters its field does not allow."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid characters in {field}")
        self.field = field


class InvalidYearError(ValidationError):
    """A year value is badly formed."""

    def __init__(self) -> None:
        super().__init__("Invalid year format")


_MAX_LENGTHS = {
    MetaEntry.TITLE: 256,
    MetaEntry.ARTIST: 256,
    MetaEntry.ALBUM: 256,
    MetaEntry.COMMENT: 512,
    MetaEntry.YEAR: 4,
}

_ID3V2_FRAMES = {
    "TIT2": MetaEntry.TITLE,
    "TPE1": MetaEntry.ARTIST,
    "TALB": MetaEntry.ALBUM,
    "TYER": MetaEntry.YEAR,
    "COMM": MetaEntry.COMMENT,
    "TCOM": MetaEntry.COMPOSER,
}

_APE_KEYS = {
    "TITLE": MetaEntry.TITLE,
    "ARTIST": MetaEntry.ARTIST,
    "ALBUM": MetaEntry.ALBUM,
    "YEAR": MetaEntry.YEAR,
    "COMMENT": MetaEntry.COMMENT,
    "COMPOSER": MetaEntry.COMPOSER,
}

_DIGITS = frozenset("0123456789")


class StandardValidator:
    """Checks values against the limits of the common tag fields."""

    def validate_length(self, entry: MetaEntry, value: str) -> None:
        """Raise MaxLengthExceededError if *value* is too long in UTF-8 bytes."""
        limit = _MAX_LENGTHS.get(entry)
        if limit is not None and len(value.encode("utf-8")) > limit:
            raise MaxLengthExceededError(str(entry))

    def validate_chars(self, entry: MetaEntry, value: str) -> None:
        """Raise InvalidCharactersError if a year holds anything but ASCII digits."""
        if entry == MetaEntry.YEAR and not set(value) <= _DIGITS:
            raise InvalidCharactersError(str(entry))

    def validate_frame(self, frame_id: str, value: str) -> None:
        """Validate *value* for an ID3v2 frame; unknown frames are accepted."""
        entry = _ID3V2_FRAMES.get(frame_id)
        if entry is not None:
            self._validate(entry, value)

    def validate_item(self, key: str, value: str) -> None:
        """Validate *value* for an APE item key; unknown keys are accepted."""
        entry = _APE_KEYS.get(key.upper())
        if entry is not None:
            self._validate(entry, value)

    def _validate(self, entry: MetaEntry, value: str) -> None:
        self.validate_length(entry, value)
        self.validate_chars(entry, value)