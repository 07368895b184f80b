"""
Filesystem-backed DirectoryScanner.

Enumerates every regular file below a session's working directory, however
deeply nested. Traversal uses an explicit work list, so nesting depth is not
limited by the interpreter's recursion limit.

Symbolic links get no special handling:
- a link to a file is listed like a file,
- a link to a directory is followed,
- a dangling link is skipped.
FIFOs, sockets and device nodes are skipped; only regular files are archived.
There is no cycle detection; a directory link pointing at one of its own
ancestors makes the scan run forever.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..errors import WorkingDirectoryNotFoundError
from ..ports import DirectoryScannerPort


@dataclass(frozen=True)
class DirectoryScanner(DirectoryScannerPort):
    """Recursive file lister. Result order follows the filesystem, not sorted."""

    def scan(self, root: str | os.PathLike) -> List[Path]:
        root_path = Path(root)
        if not root_path.exists():
            raise WorkingDirectoryNotFoundError(str(root_path))

        files: List[Path] = []
        pending: List[Path] = [root_path]
        while pending:
            directory = pending.pop()
            for entry in directory.iterdir():
                if not entry.exists():
                    continue
                if entry.is_dir():
                    pending.append(entry)
                elif entry.is_file():
                    files.append(entry)
        return files


def scan(root: str | os.PathLike) -> List[Path]:
    """Shortcut for ``DirectoryScanner().scan(root)``."""
    return DirectoryScanner().scan(root)
