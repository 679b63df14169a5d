"""
paths – Where git-ignore keeps its cache and user configuration.

`ProjectPaths` is a plain value handed to every loader. Nothing below the CLI
looks up platform directories on its own, so tests build a `ProjectPaths`
rooted in a temporary directory.

Default locations:
  • Linux/other : $XDG_CACHE_HOME/git-ignore, $XDG_CONFIG_HOME/git-ignore
  • macOS       : ~/Library/Caches/git-ignore, ~/Library/Application Support/git-ignore
  • Windows     : %LOCALAPPDATA%\\git-ignore\\cache, %APPDATA%\\git-ignore\\config

GIT_IGNORE_CACHE_DIR and GIT_IGNORE_CONFIG_DIR override either directory.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from git_ignore.constants import (
    APP_NAME,
    CACHE_FILE_NAME,
    CONFIG_FILE_NAME,
    TEMPLATES_DIR_NAME,
)


@dataclass(frozen=True)
class ProjectPaths:
    cache_dir: Path
    config_dir: Path

    @property
    def cache_file(self) -> Path:
        return self.cache_dir / CACHE_FILE_NAME

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def templates_dir(self) -> Path:
        return self.config_dir / TEMPLATES_DIR_NAME

    @classmethod
    def under(cls, root: Path) -> 'ProjectPaths':
        """Both directories below a single root (handy for tests and portable setups)."""
        root = Path(root)
        return cls(cache_dir=root / 'cache', config_dir=root / 'config')

    @classmethod
    def default(cls, env: Optional[Mapping[str, str]] = None, *, platform: Optional[str] = None) -> 'ProjectPaths':
        env = os.environ if env is None else env
        platform = platform or sys.platform
        home = Path(env.get('HOME') or Path.home())

        if platform.startswith('win'):
            local = Path(env.get('LOCALAPPDATA') or home / 'AppData' / 'Local')
            roaming = Path(env.get('APPDATA') or home / 'AppData' / 'Roaming')
            cache_dir = local / APP_NAME / 'cache'
            config_dir = roaming / APP_NAME / 'config'
        elif platform == 'darwin':
            cache_dir = home / 'Library' / 'Caches' / APP_NAME
            config_dir = home / 'Library' / 'Application Support' / APP_NAME
        else:
            cache_dir = Path(env.get('XDG_CACHE_HOME') or home / '.cache') / APP_NAME
            config_dir = Path(env.get('XDG_CONFIG_HOME') or home / '.config') / APP_NAME

        if env.get('GIT_IGNORE_CACHE_DIR'):
            cache_dir = Path(env['GIT_IGNORE_CACHE_DIR'])
        if env.get('GIT_IGNORE_CONFIG_DIR'):
            config_dir = Path(env['GIT_IGNORE_CONFIG_DIR'])

        return cls(cache_dir=cache_dir, config_dir=config_dir)
