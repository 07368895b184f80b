"""
mission_record: packs one mission's recorded artifacts into a compressed archive.

Public API (stable):
- RecordingSpec            (what to record, where it goes)
- RecordingSession         (owns the working directory; archives it on close)
- DirectoryScanner         (working-directory file lister)
- ArchiveWriter            (tar container writer)
- Compressor               (gzip / zstd delivery to the destination)
- DTOs: ArchiveReport, SkippedFile
- Errors: MissionRecordError, WorkingDirectoryNotFoundError
"""

from __future__ import annotations

# Configuration
from .config import Config, get_config
from .spec import RecordingSpec

# Session
from .session import RecordingSession

# Building blocks
from .intake import DirectoryScanner
from .packing import ArchiveWriter, Compressor, entry_name

# DTOs / errors
from .dto import ArchiveReport, SkippedFile
from .errors import MissionRecordError, WorkingDirectoryNotFoundError

__all__ = [
    "Config",
    "get_config",
    "RecordingSpec",
    "RecordingSession",
    "DirectoryScanner",
    "ArchiveWriter",
    "Compressor",
    "entry_name",
    "ArchiveReport",
    "SkippedFile",
    "MissionRecordError",
    "WorkingDirectoryNotFoundError",
]
