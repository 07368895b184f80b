"""Building and compressing the recording archive."""

from __future__ import annotations

from .archive import ArchiveWriter, build_archive, entry_name, spooled_buffer
from .compress import CODECS, Compressor

__all__ = [
    "ArchiveWriter",
    "build_archive",
    "entry_name",
    "spooled_buffer",
    "CODECS",
    "Compressor",
]
