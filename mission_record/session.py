"""
Recording session: owns one mission's working directory from creation to
archive delivery.

Lifecycle
---------
- ``RecordingSession(spec)`` creates ``spec.working_dir`` (recording specs only).
- ``close()`` runs exactly once per owner:
    1. scan the working directory (a missing directory raises and leaves the
       session open, nothing else happens),
    2. tar + compress the files to ``spec.destination`` when there are any,
    3. remove the working directory, even if delivery failed,
    4. mark the session closed.
- A session that is garbage collected while still open closes itself; any
  error from that implicit close is written to stderr and dropped.

Ownership
---------
Sessions cannot be copied. ``move()`` / ``take_from()`` hand the spec and
closed flag to another session and leave the source with the inert spec, so
only one object ever archives or deletes a given working directory.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import Any, Optional

from .config import get_config
from .dto import ArchiveReport
from .intake import DirectoryScanner
from .packing import Compressor, build_archive, spooled_buffer
from .ports import CompressorPort, DirectoryScannerPort
from .spec import RecordingSpec


class RecordingSession:
    """
    Parameters
    ----------
    spec : RecordingSpec
        What to record. Defaults to the inert spec.
    scanner : DirectoryScannerPort
        Lists working-directory files on close.
    compressor : CompressorPort
        Writes the archive; by default one is built for ``spec.codec``.
    logger : logging.Logger
        Receives archive/delivery warnings and lifecycle messages.
    spool_max_bytes : int
        Archive bytes kept in memory before spilling to a temporary file.
    """

    def __init__(
        self,
        spec: Optional[RecordingSpec] = None,
        *,
        scanner: Optional[DirectoryScannerPort] = None,
        compressor: Optional[CompressorPort] = None,
        logger: Optional[logging.Logger] = None,
        spool_max_bytes: Optional[int] = None,
    ) -> None:
        self._spec = spec if spec is not None else RecordingSpec()
        self._closed = False
        self._scanner = scanner or DirectoryScanner()
        self._compressor = compressor
        self._logger = logger or logging.getLogger("mission_record")
        self._spool_max_bytes = (
            get_config().SPOOL_MAX_BYTES if spool_max_bytes is None else int(spool_max_bytes)
        )

        if self._spec.is_recording:
            working_dir = self._spec.working_dir
            try:
                working_dir.mkdir(parents=True, exist_ok=True)
            except OSError:
                # A session that never opened has nothing to close.
                self._spec = RecordingSpec()
                raise
            self._logger.debug("Recording session opened in %s", working_dir)

    # ------------------------------ Ownership ------------------------------ #

    def __copy__(self) -> "RecordingSession":
        raise TypeError("RecordingSession cannot be copied; use move()")

    def __deepcopy__(self, memo: Any) -> "RecordingSession":
        raise TypeError("RecordingSession cannot be copied; use move()")

    def take_from(self, source: "RecordingSession") -> "RecordingSession":
        """
        Move-assign: adopt *source*'s spec and closed flag, leave *source* inert.

        Whatever this session owned before is dropped without being closed.
        """
        if source is self:
            return self
        self._spec = source._spec
        self._closed = source._closed
        source._spec = RecordingSpec()
        return self

    def move(self) -> "RecordingSession":
        """Return a new session owning this one's recording; this one becomes inert."""
        moved = type(self)(
            scanner=self._scanner,
            compressor=self._compressor,
            logger=self._logger,
            spool_max_bytes=self._spool_max_bytes,
        )
        return moved.take_from(self)

    # ------------------------------- Closing ------------------------------- #

    def close(self) -> Optional[ArchiveReport]:
        """
        Archive the working directory to the destination and remove it.

        Returns None when there was nothing to do (inert spec or already
        closed). Raises WorkingDirectoryNotFoundError if the working directory
        disappeared; the session then stays open and nothing is cleaned up.
        """
        spec = self._spec
        if not spec.is_recording or self._closed:
            return None

        files = self._scanner.scan(spec.working_dir)

        if files:
            report = self._deliver(files)
        else:
            self._logger.info("Nothing recorded in %s; no archive written", spec.working_dir)
            report = ArchiveReport(destination=spec.destination, codec=spec.codec)

        shutil.rmtree(spec.working_dir, ignore_errors=True)

        self._closed = True
        return report

    def _deliver(self, files: list[Path]) -> ArchiveReport:
        spec = self._spec
        compressor = self._compressor or Compressor(spec.codec, logger=self._logger)

        with spooled_buffer(self._spool_max_bytes) as buf:
            try:
                writer = build_archive(spec.working_dir, files, buf, logger=self._logger)
                buf.seek(0)
            except OSError as exc:
                self._logger.warning(
                    "Unable to build recording archive from %s: %s", spec.working_dir, exc
                )
                return ArchiveReport(
                    destination=spec.destination, codec=compressor.codec, error=str(exc)
                )
            delivered = compressor.compress(buf, spec.destination)

        if delivered:
            self._logger.info(
                "Archived %d file(s) from %s to %s",
                len(writer.entries), spec.working_dir, spec.destination,
            )
        return ArchiveReport(
            destination=spec.destination,
            codec=compressor.codec,
            entries=writer.entries,
            skipped=writer.skipped,
            delivered=delivered,
        )

    def __enter__(self) -> "RecordingSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        self._teardown()

    def _teardown(self) -> None:
        """Implicit close. Never raises."""
        if getattr(self, "_spec", None) is None or getattr(self, "_closed", True):
            return
        try:
            self.close()
        except Exception as exc:  # noqa: BLE001
            # logging may already be shut down; stderr is the only safe sink
            _write_stderr(f"Exception in closing of RecordingSession: {exc}")

    # ------------------------------ Accessors ------------------------------ #

    @property
    def spec(self) -> RecordingSpec:
        return self._spec

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_recording(self) -> bool:
        return self._spec.is_recording

    @property
    def is_recording_mp4(self) -> bool:
        return self._spec.is_recording_mp4

    @property
    def is_recording_observations(self) -> bool:
        return self._spec.is_recording_observations

    @property
    def is_recording_rewards(self) -> bool:
        return self._spec.is_recording_rewards

    @property
    def is_recording_commands(self) -> bool:
        return self._spec.is_recording_commands

    @property
    def mp4_path(self) -> Optional[Path]:
        return self._spec.mp4_path

    @property
    def mp4_bit_rate(self) -> int:
        return self._spec.mp4_bit_rate

    @property
    def mp4_fps(self) -> int:
        return self._spec.mp4_fps

    @property
    def observations_path(self) -> Optional[Path]:
        return self._spec.observations_path

    @property
    def rewards_path(self) -> Optional[Path]:
        return self._spec.rewards_path

    @property
    def commands_path(self) -> Optional[Path]:
        return self._spec.commands_path

    @property
    def mission_init_path(self) -> Optional[Path]:
        return self._spec.mission_init_path

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        if not self._spec.is_recording:
            return f"<RecordingSession inert {state}>"
        return f"<RecordingSession {self._spec.working_dir} -> {self._spec.destination} {state}>"


def _write_stderr(message: str) -> None:
    stream = sys.stderr
    if stream is None:
        return
    try:
        stream.write(message + "\n")
        stream.flush()
    except (OSError, ValueError):
        pass
