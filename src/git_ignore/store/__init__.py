"""
git_ignore.store – The merged namespace of remote templates, aliases and user templates.
"""
from .namespace import NamespaceStore

__all__ = ["NamespaceStore"]
