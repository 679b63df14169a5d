from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional

from git_ignore.core.interfaces.fs import DirectoryScannerProtocol
from git_ignore.core.models import DirEntry, extension_of
from git_ignore.logging.helpers import get_logger, trace_io


class DirectoryScanner(DirectoryScannerProtocol):
    """One-level `os.scandir` listing, symlinks followed for the kind checks."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.scanner')

    def scan(self, root: Path) -> List[DirEntry]:
        entries: List[DirEntry] = []
        with os.scandir(root) as it:
            for de in it:
                try:
                    is_file = de.is_file()
                    is_dir = de.is_dir()
                except OSError as exc:
                    self._log.warning('⚠  could not stat %s: %s', de.path, exc)
                    continue
                entries.append(DirEntry(
                    name=de.name,
                    extension=extension_of(de.name),
                    is_file=is_file,
                    is_dir=is_dir,
                ))
        entries.sort(key=lambda e: e.name)
        trace_io(self._log, 'scanned directory', root=str(root), entries=len(entries))
        return entries
