from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from git_ignore.core.models import DirEntry


@runtime_checkable
class DirEntryProtocol(Protocol):
    """What the detector needs to know about one directory entry."""

    @property
    def name(self) -> str: ...

    @property
    def extension(self) -> Optional[str]: ...

    @property
    def is_file(self) -> bool: ...

    @property
    def is_dir(self) -> bool: ...


@runtime_checkable
class DirectoryScannerProtocol(Protocol):
    def scan(self, root: Path) -> List[DirEntry]:
        """Return the entries of *root*, one level deep."""
        ...
