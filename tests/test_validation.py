import pytest

from mp3tagkit.meta_entry import MetaEntry
from mp3tagkit.validation import (
    InvalidCharactersError,
    InvalidYearError,
    MaxLengthExceededError,
    StandardValidator,
    ValidationError,
)


@pytest.fixture
def validator():
    return StandardValidator()


@pytest.mark.parametrize(
    "entry, limit",
    [
        (MetaEntry.TITLE, 256),
        (MetaEntry.ARTIST, 256),
        (MetaEntry.ALBUM, 256),
        (MetaEntry.COMMENT, 512),
        (MetaEntry.YEAR, 4),
    ],
)
def test_length_limit_boundary(validator, entry, limit):
    validator.validate_length(entry, "1" * limit)
    with pytest.raises(MaxLengthExceededError):
        validator.validate_length(entry, "1" * (limit + 1))


def test_length_counts_utf8_bytes(validator):
    value = "é" * 129
    assert len(value) < 256
    with pytest.raises(MaxLengthExceededError):
        validator.validate_length(MetaEntry.TITLE, value)


def test_length_message_names_field(validator):
    with pytest.raises(MaxLengthExceededError) as info:
        validator.validate_length(MetaEntry.TITLE, "x" * 300)
    assert str(info.value) == "Value exceeds max length: Title"
    assert isinstance(info.value, ValidationError)


def test_unlimited_fields_accept_long_values(validator):
    validator.validate_length(MetaEntry.COMPOSER, "x" * 10000)
    validator.validate_length(MetaEntry.custom("X"), "x" * 10000)
    with pytest.raises(MaxLengthExceededError):
        validator.validate_length(MetaEntry.ARTIST, "x" * 10000)


def test_year_must_be_digits(validator):
    validator.validate_chars(MetaEntry.YEAR, "2023")
    validator.validate_chars(MetaEntry.YEAR, "")
    with pytest.raises(InvalidCharactersError) as info:
        validator.validate_chars(MetaEntry.YEAR, "20a3")
    assert str(info.value) == "Invalid characters in Year"


def test_year_rejects_non_ascii_digits(validator):
    with pytest.raises(InvalidCharactersError):
        validator.validate_chars(MetaEntry.YEAR, "٢٠٢٣")


def test_other_fields_accept_any_characters(validator):
    validator.validate_chars(MetaEntry.TITLE, "abc\x00!")
    with pytest.raises(InvalidCharactersError):
        validator.validate_chars(MetaEntry.YEAR, "abc\x00!")


def test_validate_frame_maps_known_ids(validator):
    with pytest.raises(MaxLengthExceededError):
        validator.validate_frame("TIT2", "x" * 257)
    with pytest.raises(InvalidCharactersError):
        validator.validate_frame("TYER", "19x9")


def test_validate_frame_accepts_unknown_ids(validator):
    validator.validate_frame("ZZZZ", "x" * 5000)
    with pytest.raises(MaxLengthExceededError):
        validator.validate_frame("COMM", "x" * 5000)


def test_validate_item_is_case_insensitive(validator):
    with pytest.raises(MaxLengthExceededError):
        validator.validate_item("title", "x" * 257)
    with pytest.raises(InvalidCharactersError):
        validator.validate_item("Year", "abcd")


def test_validate_item_accepts_unknown_keys(validator):
    validator.validate_item("CUSTOMKEY", "x" * 5000)
    with pytest.raises(MaxLengthExceededError):
        validator.validate_item("ALBUM", "x" * 5000)


def test_invalid_year_error_message():
    error = InvalidYearError()
    assert str(error) == "Invalid year format"
    assert isinstance(error, ValidationError)