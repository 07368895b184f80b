"""
Utility helpers: directory setup and logging config.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Type

from .config import Config

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def ensure_dirs(*paths: Path) -> None:
    """Ensure each directory exists."""
    for p in paths:
        p.mkdir(parents=True, exist_ok=True)


def init_logging(config: Type[Config], level: str | None = None) -> logging.Logger:
    """Configure the package logger: console + optional rotating file handler."""
    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    logger = logging.getLogger("mission_record")
    logger.setLevel(log_level)
    logger.propagate = False  # avoid duplicate logs if root has handlers

    # Re-initialising replaces our handlers instead of stacking new ones
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(ch)

    # File (rotating)
    if config.LOG_FILE:
        log_file = Path(config.LOG_FILE)
        ensure_dirs(log_file.parent)
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
        fh.setLevel(log_level)
        fh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(fh)

    return logger
