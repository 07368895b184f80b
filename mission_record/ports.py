"""
Interfaces (Ports) for the two steps a session delegates.

Keep them small and implementation-agnostic so they're easy to swap in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, List, Protocol


class DirectoryScannerPort(Protocol):
    """Lists the regular files under a working directory."""

    def scan(self, root: Path) -> List[Path]:
        """
        Return every file below *root*, in no particular order.
        Implementations MUST raise WorkingDirectoryNotFoundError when *root*
        does not exist.
        """
        ...


class CompressorPort(Protocol):
    """Writes a finished archive stream to its destination."""

    codec: str

    def compress(self, source: IO[bytes], destination: Path) -> bool:
        """
        Compress *source* (read from its current position) into *destination*.
        Return False, without raising, when the destination cannot be written.
        """
        ...
