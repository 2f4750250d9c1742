"""Read and write ID3v1 and ID3v2 metadata tags in MP3 files."""

__version__ = "0.1.0"