from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

APP_NAME: str = 'git-ignore'

# Provenance line prepended to every non-empty resolution result.
HEADER_LINE: str = '### Created by https://www.gitignore.io'

DEFAULT_SERVER: str = 'https://www.toptal.com/developers/gitignore/api/list?format=json'
USER_AGENT: str = 'git-ignore/1.4 (+https://github.com/sondr3/git-ignore)'

CACHE_FILE_NAME: str = 'ignore.json'
CONFIG_FILE_NAME: str = 'config.toml'
TEMPLATES_DIR_NAME: str = 'templates'

IGNORE_FILE_NAME: str = '.gitignore'
