from __future__ import annotations

"""Public surface for git_ignore.core.

Stable import location for the data model, the error taxonomy and the
protocol types:

    from git_ignore.core import Alias, CacheUnavailable, HTTPTransportProtocol
"""

from git_ignore.core.errors import (
    AliasTargetMissing,
    CacheRefreshFailed,
    CacheUnavailable,
    GitIgnoreError,
    UserConfigCorrupt,
    UserTemplateUnreadable,
)
from git_ignore.core.models import (
    Alias,
    DirEntry,
    Entry,
    EntryKind,
    FetchRequest,
    FetchResponse,
    RemoteTemplate,
    TemplateRecord,
    UserTemplate,
)
from git_ignore.core.interfaces import (
    DirectoryScannerProtocol,
    HTTPTransportProtocol,
    TemplateCacheProtocol,
    UserConfigStoreProtocol,
)

__all__ = [
    # Errors
    "AliasTargetMissing",
    "CacheRefreshFailed",
    "CacheUnavailable",
    "GitIgnoreError",
    "UserConfigCorrupt",
    "UserTemplateUnreadable",
    # Model
    "Alias",
    "DirEntry",
    "Entry",
    "EntryKind",
    "FetchRequest",
    "FetchResponse",
    "RemoteTemplate",
    "TemplateRecord",
    "UserTemplate",
    # Protocols
    "DirectoryScannerProtocol",
    "HTTPTransportProtocol",
    "TemplateCacheProtocol",
    "UserConfigStoreProtocol",
]
