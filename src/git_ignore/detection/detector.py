from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from git_ignore.core.interfaces.fs import DirectoryScannerProtocol, DirEntryProtocol
from git_ignore.detection.rules import DEFAULT_RULES, DetectorRule
from git_ignore.io.scanner import DirectoryScanner
from git_ignore.logging.helpers import get_logger


class Detector:
    """Runs a rule table against one directory listing."""

    def __init__(self, rules: Sequence[DetectorRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> Sequence[DetectorRule]:
        return self._rules

    def detect(self, entries: Sequence[DirEntryProtocol]) -> List[str]:
        """Template names of matching rules, in table order, each at most once."""
        entries = list(entries)
        out: List[str] = []
        for r in self._rules:
            if r.template not in out and r.matches(entries):
                out.append(r.template)
        return out


def detect_directory(
    root: Path,
    *,
    detector: Optional[Detector] = None,
    scanner: Optional[DirectoryScannerProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> List[str]:
    log = logger or get_logger('detection')
    entries = (scanner or DirectoryScanner()).scan(root)
    found = (detector or Detector()).detect(entries)
    if found:
        log.info('🔎 detected %s in %s', ', '.join(found), root)
    else:
        log.info('🔎 nothing detected in %s', root)
    return found


def merge_names(requested: Iterable[str], detected: Iterable[str]) -> List[str]:
    """Union of both lists: requested order first, then new detected names."""
    out: List[str] = []
    seen: set[str] = set()
    for name in list(requested) + list(detected):
        if name not in seen:
            seen.add(name)
            out.append(name)
    return out
