"""
Configuration objects for mission recording.

Override via environment variables (prefix ``MISSION_RECORD_``).
"""

from __future__ import annotations

import os
import tempfile
from typing import Type


class Config:
    """Base configuration (safe defaults)."""

    # Storage
    TEMP_ROOT = os.getenv("MISSION_RECORD_TEMP_ROOT", tempfile.gettempdir())

    # Archive
    CODEC = os.getenv("MISSION_RECORD_CODEC", "gzip")
    SPOOL_MAX_BYTES = int(
        os.getenv("MISSION_RECORD_SPOOL_MAX_BYTES", str(64 * 1024 * 1024))
    )  # 64 MiB held in memory before spilling to disk

    # Logging
    LOG_FILE = os.getenv("MISSION_RECORD_LOG_FILE", "")
    LOG_LEVEL = os.getenv("MISSION_RECORD_LOG_LEVEL", "INFO")


class ProductionConfig(Config):
    """Production overrides."""
    LOG_LEVEL = os.getenv("MISSION_RECORD_LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development overrides."""
    LOG_LEVEL = os.getenv("MISSION_RECORD_LOG_LEVEL", "DEBUG")


def get_config(env: str | None = None) -> Type[Config]:
    """Pick a config class from *env* or ``MISSION_RECORD_ENV``."""
    env = (env or os.getenv("MISSION_RECORD_ENV", "production")).lower()
    if env.startswith("dev"):
        return DevelopmentConfig
    return ProductionConfig
