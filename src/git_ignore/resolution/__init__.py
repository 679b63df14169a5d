"""
git_ignore.resolution – Turn requested names into concatenated template text.
"""
from .engine import ResolutionEngine

__all__ = ["ResolutionEngine"]
