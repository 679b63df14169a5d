from __future__ import annotations

"""
Application façade wiring the collaborators together.

`GitIgnore` owns the project paths and builds a fresh NamespaceStore for each
call. When the template cache is missing or unreadable it refreshes the cache
once and retries; every other failure propagates to the caller.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from git_ignore.constants import DEFAULT_SERVER
from git_ignore.core.errors import CacheUnavailable
from git_ignore.core.interfaces.fs import DirectoryScannerProtocol
from git_ignore.core.interfaces.net import HTTPTransportProtocol
from git_ignore.core.models import Entry
from git_ignore.core.report import ResolutionReport
from git_ignore.detection.detector import Detector, detect_directory, merge_names
from git_ignore.io.cache_manager import TemplateCache
from git_ignore.io.user_config import UserConfigStore, UserData
from git_ignore.logging.helpers import get_logger
from git_ignore.resolution.engine import ResolutionEngine
from git_ignore.store.namespace import NamespaceStore
from git_ignore.utils.paths import ProjectPaths


@dataclass
class GitIgnore:
    paths: ProjectPaths
    transport: Optional[HTTPTransportProtocol] = None
    server: str = DEFAULT_SERVER
    detector: Detector = field(default_factory=Detector)
    scanner: Optional[DirectoryScannerProtocol] = None
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self._log = self.logger or get_logger('app')
        self.cache = TemplateCache(self.paths, transport=self.transport, server=self.server)
        self.user_config = UserConfigStore(self.paths)
        self.engine = ResolutionEngine()
        self.last_report: Optional[ResolutionReport] = None

    # -------- Cache --------

    def update(self) -> None:
        self.cache.update()

    def load_store(self, *, simple: bool = False) -> NamespaceStore:
        try:
            return NamespaceStore.load(self.paths, simple=simple, cache=self.cache, user_config=self.user_config)
        except CacheUnavailable as exc:
            self._log.info('%s; fetching templates', exc)
            self.cache.update()
            return NamespaceStore.load(self.paths, simple=simple, cache=self.cache, user_config=self.user_config)

    # -------- Templates --------

    def list_entries(self, fragments: Sequence[str] = (), *, simple: bool = False) -> List[Entry]:
        return self.load_store(simple=simple).search(fragments)

    def detect(self, root: Path) -> List[str]:
        return detect_directory(root, detector=self.detector, scanner=self.scanner, logger=self._log)

    def get(self, names: Sequence[str], *, simple: bool = False, auto: bool = False, cwd: Optional[Path] = None) -> str:
        requested = list(names)
        if auto:
            requested = merge_names(requested, self.detect(cwd or Path.cwd()))
        store = self.load_store(simple=simple)
        text, report = self.engine.resolve_with_report(store, requested)
        self.last_report = report
        return text

    def write(self, text: str, target: Path, *, force: bool = False) -> Path:
        """Append *text* to *target*, or replace its contents when *force* is set."""
        if force:
            target.write_text(text, encoding='utf-8')
            self._log.info('✔ wrote %s', target)
            return target
        prefix = ''
        if target.exists():
            current = target.read_text(encoding='utf-8')
            if current and not current.endswith('\n'):
                prefix = '\n'
        with target.open('a', encoding='utf-8') as fh:
            fh.write(prefix + text)
        self._log.info('✔ appended to %s', target)
        return target

    # -------- User data --------

    def user_data(self) -> UserData:
        return self.user_config.load()

    def list_aliases(self) -> Dict[str, List[str]]:
        return dict(sorted(self.user_data().aliases.items()))

    def list_templates(self) -> Dict[str, str]:
        return dict(sorted(self.user_data().templates.items()))
