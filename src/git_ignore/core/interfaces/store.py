"""
Storage interfaces for git_ignore.

These protocols describe the two backing sources of the namespace store so
the store and the application façade can be exercised with in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, runtime_checkable


@runtime_checkable
class TemplateCacheProtocol(Protocol):
    """Contract for the remote template cache."""

    def exists(self) -> bool:
        """Return True when a cached listing is present."""

    def read(self) -> Dict[str, Any]:
        """Return the raw listing; raise CacheUnavailable when it cannot."""

    def update(self) -> None:
        """Download a fresh listing and persist it."""


@runtime_checkable
class UserConfigStoreProtocol(Protocol):
    """Contract for the user config (aliases and local templates)."""

    def load(self) -> Any:
        """Return the parsed UserData; raise UserConfigCorrupt when it cannot."""

    def read_template(self, file_name: str) -> str:
        """Return the content of a user template file."""

    def read_named_template(self, name: str, file_name: str) -> str:
        """Content of the template registered as *name*; raise UserTemplateUnreadable when it cannot."""

    def add_alias(self, name: str, targets: List[str]) -> None:
        ...

    def remove_alias(self, name: str) -> bool:
        ...

    def add_template(self, name: str, file_name: str) -> Any:
        ...

    def remove_template(self, name: str) -> bool:
        ...
