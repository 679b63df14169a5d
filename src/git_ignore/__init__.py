from __future__ import annotations

__version__ = '1.4.0'

from git_ignore.constants import HEADER_LINE
from git_ignore.cli import GitIgnoreCli, main
from git_ignore.core.errors import (
    AliasTargetMissing,
    CacheRefreshFailed,
    CacheUnavailable,
    GitIgnoreError,
    UserConfigCorrupt,
    UserTemplateUnreadable,
)
from git_ignore.core.models import Alias, DirEntry, EntryKind, RemoteTemplate, UserTemplate
from git_ignore.detection.detector import Detector, detect_directory, merge_names
from git_ignore.io.user_config import UserConfigStore, UserData
from git_ignore.resolution.engine import ResolutionEngine
from git_ignore.runtime.app import GitIgnore
from git_ignore.store.namespace import NamespaceStore
from git_ignore.utils.paths import ProjectPaths

__all__ = [
    'GitIgnore',
    'GitIgnoreCli',
    'HEADER_LINE',
    'main',
    'NamespaceStore',
    'ResolutionEngine',
    'Detector',
    'detect_directory',
    'merge_names',
    'ProjectPaths',
    'UserConfigStore',
    'UserData',
    'Alias',
    'DirEntry',
    'EntryKind',
    'RemoteTemplate',
    'UserTemplate',
    'GitIgnoreError',
    'AliasTargetMissing',
    'CacheRefreshFailed',
    'CacheUnavailable',
    'UserConfigCorrupt',
    'UserTemplateUnreadable',
]
