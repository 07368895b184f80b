"""
Archive compressor.

Streams a finished tar container through a compression filter straight
into the destination file, in a single pass:

- codec == "gzip": gzip.GzipFile over the destination (``.tar.gz``)
- codec == "zstd": zstandard frame written to the destination (``.tar.zst``)

A destination that cannot be opened or written is reported as a warning
and a False return; it never raises.
"""

from __future__ import annotations

import gzip
import logging
import os
import shutil
from pathlib import Path
from typing import IO, Dict, Optional

import zstandard  # type: ignore

from ..ports import CompressorPort

_LOG = logging.getLogger("mission_record")

# codec -> default compression level
CODECS: Dict[str, int] = {
    "gzip": 6,
    "zstd": 3,
}


class Compressor(CompressorPort):
    """
    Parameters
    ----------
    codec : "gzip" | "zstd"
        Compression filter.
    level : Optional[int]
        Codec-specific level; None picks the codec default from CODECS.
    logger : logging.Logger
        Receives the warning when the destination is not writable.
    """

    def __init__(
        self,
        codec: str = "gzip",
        *,
        level: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if codec not in CODECS:
            raise ValueError(f"unknown codec {codec!r}; expected one of {sorted(CODECS)}")
        self.codec = codec
        self.level = CODECS[codec] if level is None else int(level)
        self._logger = logger or _LOG

    def compress(self, source: IO[bytes], destination: str | os.PathLike) -> bool:
        dest = Path(destination)
        try:
            out = open(dest, "wb")
        except OSError as exc:
            self._logger.warning("Unable to write recording to output file %s: %s", dest, exc)
            return False

        try:
            with out:
                if self.codec == "gzip":
                    with gzip.GzipFile(filename="", fileobj=out, mode="wb", compresslevel=self.level) as gz:
                        shutil.copyfileobj(source, gz)
                else:
                    cctx = zstandard.ZstdCompressor(level=self.level)
                    cctx.copy_stream(source, out)
        except OSError as exc:
            # Destination may now hold a truncated stream.
            self._logger.warning("Failed writing recording to %s: %s", dest, exc)
            return False

        self._logger.debug("Wrote %s archive to %s", self.codec, dest)
        return True
