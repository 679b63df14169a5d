"""
Error taxonomy for git_ignore.

Every failure the core can surface derives from `GitIgnoreError` so the CLI
can map it to a logged message and a non-zero exit code. Only
`AliasTargetMissing` is non-fatal: the resolution engine records it and keeps
going, it is never raised out of `resolve`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class GitIgnoreError(Exception):
    """Base class for all git_ignore failures."""


class CacheUnavailable(GitIgnoreError):
    """The remote template cache is missing or cannot be parsed.

    Callers are expected to trigger a refresh rather than abort.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'template cache {path} unavailable: {reason}')
        self.path = path
        self.reason = reason


class CacheRefreshFailed(GitIgnoreError):
    """Downloading the remote template listing failed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f'could not refresh templates from {url}: {reason}')
        self.url = url
        self.reason = reason


class UserConfigCorrupt(GitIgnoreError):
    """The user config file exists but could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'user config {path} is corrupt: {reason}')
        self.path = path
        self.reason = reason


class UserTemplateUnreadable(GitIgnoreError):
    """A template registered in the user config has no readable file."""

    def __init__(self, name: str, path: Path, reason: Optional[str] = None) -> None:
        msg = f'user template {name!r} could not be read from {path}'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)
        self.name = name
        self.path = path


class AliasTargetMissing(GitIgnoreError):
    """An alias points at a name found in neither template namespace."""

    def __init__(self, alias: str, target: str) -> None:
        super().__init__(f'alias {alias!r} refers to unknown template {target!r}')
        self.alias = alias
        self.target = target
