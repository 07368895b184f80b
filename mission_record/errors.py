"""
Exception types raised by the mission-record core.

Only the fatal classes surface to callers of `RecordingSession.close()`.
Per-file and destination problems are logged and reported, not raised.
"""

from __future__ import annotations


class MissionRecordError(Exception):
    """Base class for mission-record failures."""


class WorkingDirectoryNotFoundError(MissionRecordError, FileNotFoundError):
    """The working directory was missing when the session tried to scan it."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Attempt to archive non-existent directory: {directory}")
        self.directory = directory
