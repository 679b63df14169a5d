"""
git_ignore.utils – Small shared helpers (platform paths).
"""
from .paths import ProjectPaths

__all__ = ["ProjectPaths"]
