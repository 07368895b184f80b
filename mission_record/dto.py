"""
Data Transfer Objects (DTOs) produced while closing a recording session.

These are small and immutable, and independent of any I/O libraries.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


# === Per-file diagnostics ===
@dataclass(frozen=True)
class SkippedFile:
    """One working-directory file that could not be put into the archive."""
    path: Path
    entry_name: str          # name it would have had inside the archive
    reason: str              # str() of the error that was caught


# === Outcome of one close() ===
@dataclass(frozen=True)
class ArchiveReport:
    destination: Path
    codec: str
    entries: Tuple[str, ...] = ()              # archive entry names, in write order
    skipped: Tuple[SkippedFile, ...] = ()
    delivered: bool = False                    # compressed archive written to destination
    error: Optional[str] = None                # why the archive could not be built

    @property
    def is_empty(self) -> bool:
        return not self.entries and not self.skipped and self.error is None
