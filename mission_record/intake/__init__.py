"""Collecting the files a session left in its working directory."""

from __future__ import annotations

from .scanner import DirectoryScanner, scan

__all__ = ["DirectoryScanner", "scan"]
