"""
Command-line entry point.

    mission-record pack WORKDIR DESTINATION [--codec gzip|zstd]

Packs an existing working directory the same way a recording session does
on close: tar + compress to DESTINATION, then delete WORKDIR.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_config
from .errors import WorkingDirectoryNotFoundError
from .packing import CODECS
from .session import RecordingSession
from .spec import RecordingSpec
from .utils import init_logging


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mission-record",
        description="Archive mission recording directories.",
    )
    ap.add_argument("--log-level", default=None, help="Override MISSION_RECORD_LOG_LEVEL.")
    sub = ap.add_subparsers(dest="command", required=True)

    pack = sub.add_parser("pack", help="Archive WORKDIR to DESTINATION and remove WORKDIR.")
    pack.add_argument("workdir", type=Path)
    pack.add_argument("destination", type=Path)
    pack.add_argument("--codec", choices=sorted(CODECS), default=None)
    return ap


def _pack(args: argparse.Namespace, cfg) -> int:
    logger = init_logging(cfg, level=args.log_level)

    if not args.workdir.is_dir():
        logger.error("Working directory not found: %s", args.workdir)
        return 1

    spec = RecordingSpec(
        is_recording=True,
        working_dir=args.workdir,
        destination=args.destination,
        codec=args.codec or cfg.CODEC,
    )
    session = RecordingSession(spec, logger=logger)
    try:
        report = session.close()
    except WorkingDirectoryNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    if report is None or report.is_empty:
        logger.info("Nothing to pack in %s", args.workdir)
        return 0
    if not report.delivered:
        return 1
    if report.skipped:
        logger.warning("%d file(s) left out of %s", len(report.skipped), args.destination)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = get_config()
    if args.command == "pack":
        return _pack(args, cfg)
    return 2


if __name__ == "__main__":
    sys.exit(main())
