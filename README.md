# mp3tagkit

A small library for reading and writing metadata tags in MP3 files. It
understands ID3v1 tags (the fixed 128-byte block at the end of a file) and
ID3v2 tags (the frame-based block at the start of a file, major versions 2,
3 and 4).

The package uses nothing outside the Python standard library.

## Reading tags

`mp3tagkit.tag.TagReader` checks the path, then prepares one reader per tag
format: ID3v2 first, then ID3v1. `get_meta_entry` returns the value from the
first format that holds the entry.

```python
from mp3tagkit.tag import TagReader
from mp3tagkit.meta_entry import MetaEntry

reader = TagReader("song.mp3")
print(reader.get_meta_entry(MetaEntry.TITLE))

for entry, value in reader.get_all_meta_entries().items():
    print(entry, value)
```

If no format holds the entry, `get_meta_entry` raises
`mp3tagkit.errors.EntryNotFoundError`. A path that does not exist, or that
is not a regular file, raises `mp3tagkit.errors.FileError` when the reader
is created. `get_all_meta_entries` returns a dict of every standard entry
that has a value.

Helper functions in `mp3tagkit.tag` read one field at a time: `get_title`,
`get_artist`, `get_album`, `get_year`, `get_genre`, `get_comment` and
`get_composer`. `get_all_meta_entries(path)` returns the whole dict.

```python
from mp3tagkit.tag import get_title, get_all_meta_entries

print(get_title("song.mp3"))
print(get_all_meta_entries("song.mp3"))
```

ID3v2 frames are read until the first frame that is malformed, empty, zeroed
or has an id that is not known for the tag's version; parsing stops there.
Text frames are decoded as UTF-8 after their encoding byte.

## Writing tags

`mp3tagkit.tag.TagWriter` takes the path and a preferred
`mp3tagkit.strategy.TagType`. If a writer of the preferred type is available
it is used, and its errors are raised as they are. Otherwise each available
writer is tried in turn (ID3v2, then ID3v1) until one accepts the value; if
none does, `mp3tagkit.errors.TagError` is raised.

```python
from mp3tagkit.tag import TagWriter
from mp3tagkit.strategy import TagType
from mp3tagkit.meta_entry import MetaEntry

writer = TagWriter("song.mp3", TagType.ID3V2)
writer.set_meta_entry(MetaEntry.TITLE, "New Title")
writer.set_meta_entry(MetaEntry.ARTIST, "New Artist")
```

ID3v2 writes go to the file at once. The existing tag is read, the frame for
the entry is replaced, the other frames are kept, and the tag keeps its
version; a file without an ID3v2 tag gets a version 2.3 tag. The new tag is
written in place over the start of the file, without padding, and the rest of
the file is not moved: a tag that is larger than the one before it (or a tag
added to a file that had none) overwrites the bytes that follow. An entry
with no frame id for the tag's version raises `TagError`.

Entries are cleared by writing an empty value:

```python
writer.remove_meta_entry(MetaEntry.COMMENT)
writer.remove_meta_entries([MetaEntry.TITLE, MetaEntry.ARTIST])
writer.remove_all_meta_entries()
```

`remove_meta_entries` stops at the first entry that fails.

## Metadata entries

`mp3tagkit.meta_entry.MetaEntry` has one constant per standard field:
`TITLE`, `ARTIST`, `ALBUM`, `YEAR`, `GENRE`, `COMMENT`, `COMPOSER`, `TRACK`,
`DATE`, `TEXT_WRITER`, `AUDIO_ENCRYPTION`, `LANGUAGE`, `TIME`,
`ORIGINAL_FILENAME`, `FILE_TYPE` and `BAND_ORCHESTRA`.
`all_standard_entries()` lists them in that order. `MetaEntry.custom(key)`
builds a custom entry; custom entries have no ID3v2 frame id.

## Lower-level pieces

- `mp3tagkit.id3.v1`: `Id3v1Tag` reads and writes the raw 128-byte block;
  `Id3v1Reader` and `Id3v1Writer` handle Title, Artist, Album, Year and
  Comment only. `Id3v1Writer.set_meta_entry` writes the value over the start
  of the field, raises `InvalidTagSizeError` when the value is wider than the
  field, ignores unsupported entries, and keeps the change in memory until
  `save()` is called. `TagWriter` does not call `save()`.
- `mp3tagkit.id3.v2`: `Id3v2Tag`, `Id3v2Reader`, `Id3v2Writer` and
  `read_tag(path)`.
- `mp3tagkit.id3.header`: `Version`, `Header` and `ExtendedHeader`.
- `mp3tagkit.id3.frame`: `Frame` (parse, build text frames, serialise) and
  `FrameFlags`.
- `mp3tagkit.id3.frame_mapping`: entry-to-frame-id lookups per version
  (`frame_id_v3_v4`, `frame_id_v2_0`, `frame_id_for_version`), frame id
  checks, and the entries each format supports.
- `mp3tagkit.id3.common`: `has_id3v1_tag`, `has_id3v2_tag`,
  `synchsafe_to_int`, `int_to_synchsafe` and layout constants.
- `mp3tagkit.validation.StandardValidator`: length limits for Title, Artist,
  Album (256 bytes), Comment (512) and Year (4), and a digits-only check for
  Year, by entry, ID3v2 frame id or APE item key.
- `mp3tagkit.file_access`: `FileManager` opens and validates files through a
  replaceable `FileAccessStrategy`; `default_file_manager()` returns a shared
  instance.
- `mp3tagkit.util`: file and byte-buffer helpers.
- `mp3tagkit.errors`: `TagError` and its subclasses.

## What it does not do

- APE tags are not read or written. `TagType.APE` exists, but no reader or
  writer handles it; a `TagWriter` that prefers it falls back to the other
  formats.
- There is no command-line tool; the package is a library only.