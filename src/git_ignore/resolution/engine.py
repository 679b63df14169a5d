from __future__ import annotations

"""
Resolution engine: requested names -> ignore file text.

Names are processed in the order they were requested, never sorted, so
`git ignore rust node` and `git ignore node rust` produce their sections in
the order typed. For each name:

    1. a user template with that key wins outright;
    2. otherwise an alias expands to its targets, in declared order, each
       looked up as user template, then remote template;
    3. otherwise a remote template is used;
    4. otherwise the name contributes nothing.

Alias targets are looked up one level deep only. A target that is itself an
alias is not expanded again; it resolves only if a template of the same name
exists. A target found nowhere is logged as a warning and skipped. Unknown
requested names are dropped without a warning.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from git_ignore.constants import HEADER_LINE
from git_ignore.core.errors import AliasTargetMissing
from git_ignore.core.models import EntryKind
from git_ignore.core.report import ResolutionReport
from git_ignore.logging.helpers import get_logger
from git_ignore.store.namespace import NamespaceStore


def _terminated(content: str) -> str:
    if content and not content.endswith('\n'):
        return content + '\n'
    return content


class ResolutionEngine:
    def __init__(self, *, header: str = HEADER_LINE, logger: Optional[logging.Logger] = None) -> None:
        self._header = header
        self._log = logger or get_logger('resolution')

    def resolve(self, store: NamespaceStore, requested: Sequence[str]) -> str:
        text, _ = self.resolve_with_report(store, requested)
        return text

    def resolve_with_report(self, store: NamespaceStore, requested: Sequence[str]) -> Tuple[str, ResolutionReport]:
        report = ResolutionReport(requested=list(requested))
        parts: List[str] = []

        for name in requested:
            content = store.get_user(name)
            if content is not None:
                parts.append(_terminated(content))
                report.add_resolved(name, EntryKind.USER, content)
                continue

            targets = store.get_alias(name)
            if targets is not None:
                self._expand_alias(store, name, targets, parts, report)
                continue

            content = store.get_remote(name)
            if content is not None:
                parts.append(_terminated(content))
                report.add_resolved(name, EntryKind.REMOTE, content)
                continue

            self._log.debug('no template named %r, skipped', name)
            report.add_unknown(name)

        report.finish()
        if not parts:
            return '', report
        return f'{self._header}\n' + ''.join(parts), report

    def _expand_alias(
        self,
        store: NamespaceStore,
        alias: str,
        targets: Sequence[str],
        parts: List[str],
        report: ResolutionReport,
    ) -> None:
        for target in targets:
            content = store.get_user(target)
            kind = EntryKind.USER
            if content is None:
                content = store.get_remote(target)
                kind = EntryKind.REMOTE
            if content is None:
                miss = AliasTargetMissing(alias, target)
                self._log.warning('⚠  %s, skipped', miss)
                report.add_missing_target(alias, target)
                continue
            parts.append(_terminated(content))
            report.add_resolved(target, kind, content)
