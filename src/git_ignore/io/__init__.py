"""
git_ignore.io – Filesystem and cache collaborators (template cache, user config, scanner).
"""
from .cache_manager import TemplateCache
from .scanner import DirectoryScanner
from .user_config import UserConfigStore, UserData

__all__ = ["DirectoryScanner", "TemplateCache", "UserConfigStore", "UserData"]
