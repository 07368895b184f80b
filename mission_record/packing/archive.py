"""
Tar container writer for a session's working directory.

One entry per file: a header (name, size, mtime) followed by the raw bytes.
Entry names are relative to the working-directory root and always use
forward slashes, so any tar reader on any platform unpacks the same tree.

A file that cannot be read (vanished mid-scan, permission denied) is logged
and left out; the rest of the archive is still written.
"""

from __future__ import annotations

import io
import logging
import os
import tarfile
import tempfile
from pathlib import Path, PurePath
from typing import IO, Iterable, List, Optional, Tuple

from ..dto import SkippedFile

_LOG = logging.getLogger("mission_record")


def entry_name(path: str | os.PathLike | PurePath, root: str | os.PathLike | PurePath) -> str:
    """
    Name of *path* inside the archive: relative to *root*, ``/``-separated.

    Backslashes are treated as separators too, so a Windows-style path
    produces the same name as its POSIX equivalent.
    """
    pure = path if isinstance(path, PurePath) else PurePath(path)
    rel = pure.relative_to(root)
    return "/".join(rel.parts).replace("\\", "/")


def spooled_buffer(max_size: int) -> IO[bytes]:
    """Binary scratch buffer that stays in memory up to *max_size* bytes."""
    return tempfile.SpooledTemporaryFile(max_size=max_size, mode="w+b")


class ArchiveWriter:
    """
    Appends files to an uncompressed tar stream.

    Parameters
    ----------
    root : path
        Working-directory root; entry names are computed relative to it.
    sink : binary file-like
        Receives the container bytes. Left open by `finish()`.
    logger : logging.Logger
        Receives one warning per file that could not be archived.
    """

    def __init__(
        self,
        root: str | os.PathLike,
        sink: IO[bytes],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._root = Path(root)
        self._logger = logger or _LOG
        self._sink = sink
        self._tar = tarfile.open(fileobj=sink, mode="w", format=tarfile.PAX_FORMAT)
        self._entries: List[str] = []
        self._skipped: List[SkippedFile] = []
        self._finished = False

    # --- writing ---

    def put(self, path: str | os.PathLike) -> bool:
        """Append one file. Returns False (after logging) if it was skipped."""
        if self._finished:
            raise RuntimeError("archive already finished")

        file_path = Path(path)
        name = entry_name(file_path, self._root)
        try:
            st = file_path.stat()
            data = file_path.read_bytes()
        except OSError as exc:
            return self._skip(file_path, name, exc)

        info = tarfile.TarInfo(name)
        info.size = len(data)
        info.mtime = int(st.st_mtime)
        info.mode = 0o644
        start, offset = self._sink.tell(), self._tar.offset
        try:
            self._tar.addfile(info, io.BytesIO(data))
        except OSError as exc:
            # Drop the partial entry so later entries stay block-aligned.
            # A failing rewind propagates: the stream can no longer be trusted.
            self._sink.seek(start)
            self._sink.truncate()
            self._tar.offset = offset
            return self._skip(file_path, name, exc)

        self._entries.append(name)
        return True

    def _skip(self, file_path: Path, name: str, exc: OSError) -> bool:
        self._logger.warning("Unable to archive %s: %s", file_path, exc)
        self._skipped.append(SkippedFile(path=file_path, entry_name=name, reason=str(exc)))
        return False

    def finish(self) -> None:
        """Write the end-of-archive trailer. Safe to call more than once."""
        if self._finished:
            return
        self._tar.close()
        self._finished = True

    # --- results ---

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    @property
    def skipped(self) -> Tuple[SkippedFile, ...]:
        return tuple(self._skipped)


def build_archive(
    root: str | os.PathLike,
    files: Iterable[str | os.PathLike],
    sink: IO[bytes],
    *,
    logger: Optional[logging.Logger] = None,
) -> ArchiveWriter:
    """Put every file into a tar stream on *sink* and finish it."""
    writer = ArchiveWriter(root, sink, logger=logger)
    for f in files:
        writer.put(f)
    writer.finish()
    return writer
