from __future__ import annotations

"""
Namespace store: remote templates, aliases and user templates in one place.

The three namespaces keep their own key spaces. The same key may exist as a
remote template, an alias and a user template at once; lookups do not reject
that, precedence decides which one wins (user > alias > remote).

`entries()` returns every entry sorted by (namespace rank, key), which is the
listing order used by the CLI. The store is built once per invocation and
never mutated afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from git_ignore.core.errors import CacheUnavailable
from git_ignore.core.interfaces.store import TemplateCacheProtocol, UserConfigStoreProtocol
from git_ignore.core.models import Alias, Entry, RemoteTemplate, TemplateRecord, UserTemplate
from git_ignore.io.cache_manager import TemplateCache
from git_ignore.io.user_config import UserConfigStore, UserData
from git_ignore.logging.helpers import get_logger
from git_ignore.utils.paths import ProjectPaths


@dataclass(frozen=True)
class NamespaceStore:
    remote: Mapping[str, TemplateRecord] = field(default_factory=dict)
    aliases: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    user: Mapping[str, str] = field(default_factory=dict)

    # -------- Construction --------

    @classmethod
    def from_sources(
        cls,
        cache_blob: Mapping[str, Any],
        user_data: Optional[UserData] = None,
        read_template: Optional[Callable[[str, str], str]] = None,
        *,
        cache_path: Any = '<memory>',
    ) -> 'NamespaceStore':
        """Build a store from an already-deserialized cache blob and user data.

        Args:
            cache_blob: name -> record mapping as found in the cached listing.
            user_data: aliases and template file references.
            read_template: callable (name, file_name) -> content for user templates.
            cache_path: only used in error messages.
        """
        remote: Dict[str, TemplateRecord] = {}
        for key, raw in cache_blob.items():
            if not isinstance(raw, Mapping) or not isinstance(raw.get('contents'), str):
                raise CacheUnavailable(cache_path, f'record {key!r} has no string "contents"')
            remote[key] = TemplateRecord.from_json(key, raw)

        data = user_data or UserData()
        aliases = {name: tuple(targets) for name, targets in data.aliases.items()}

        user: Dict[str, str] = {}
        if data.templates:
            if read_template is None:
                raise ValueError('read_template is required when user templates are present')
            for name, file_name in data.templates.items():
                user[name] = read_template(name, file_name)

        return cls(remote=remote, aliases=aliases, user=user)

    @classmethod
    def load(
        cls,
        paths: ProjectPaths,
        *,
        simple: bool = False,
        cache: Optional[TemplateCacheProtocol] = None,
        user_config: Optional[UserConfigStoreProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> 'NamespaceStore':
        """Load both backing sources for *paths*.

        Raises:
            CacheUnavailable: the cached listing is missing or unparsable.
            UserConfigCorrupt: the config file exists but cannot be parsed.
            UserTemplateUnreadable: a registered template file is missing.
        """
        log = logger or get_logger('store.namespace')
        cache = cache or TemplateCache(paths)
        blob = cache.read()

        if simple:
            store = cls.from_sources(blob, cache_path=paths.cache_file)
        else:
            cfg = user_config or UserConfigStore(paths)
            store = cls.from_sources(
                blob,
                cfg.load(),
                cfg.read_named_template,
                cache_path=paths.cache_file,
            )
        log.debug(
            'namespace loaded: %d remote, %d aliases, %d user templates',
            len(store.remote), len(store.aliases), len(store.user),
        )
        return store

    # -------- Lookups --------

    def get_remote(self, name: str) -> Optional[str]:
        rec = self.remote.get(name)
        return rec.contents if rec is not None else None

    def get_alias(self, name: str) -> Optional[Tuple[str, ...]]:
        return self.aliases.get(name)

    def get_user(self, name: str) -> Optional[str]:
        return self.user.get(name)

    def lookup(self, name: str) -> Optional[Entry]:
        """Highest-precedence entry for *name*, or None."""
        content = self.get_user(name)
        if content is not None:
            return UserTemplate(key=name, content=content)
        targets = self.get_alias(name)
        if targets is not None:
            return Alias(key=name, targets=targets)
        content = self.get_remote(name)
        if content is not None:
            return RemoteTemplate(key=name, content=content)
        return None

    def entries(self) -> List[Entry]:
        out: List[Entry] = []
        out.extend(RemoteTemplate(key=k, content=r.contents) for k, r in self.remote.items())
        out.extend(Alias(key=k, targets=t) for k, t in self.aliases.items())
        out.extend(UserTemplate(key=k, content=c) for k, c in self.user.items())
        return sorted(out)

    def visible_entries(self) -> List[Entry]:
        """Sorted entries with shadowed duplicates dropped."""
        return [e for e in self.entries() if self.lookup(e.key) == e]

    def names(self) -> List[str]:
        return [e.key for e in self.visible_entries()]

    def search(self, fragments: Sequence[str] = ()) -> List[Entry]:
        """Visible entries whose key contains any fragment; all when none given."""
        entries = self.visible_entries()
        frags = [f for f in fragments if f]
        if not frags:
            return entries
        return [e for e in entries if any(f in e.key for f in frags)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self.names())
