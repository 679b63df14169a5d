from __future__ import annotations

"""
Resolution report.

Collects what happened while turning requested names into ignore text:
which names contributed content, which were unknown (silently dropped from
the output), and which alias targets could not be found. The CLI only logs
alias misses; the rest is available for programmatic callers and tests.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from git_ignore.core.models import EntryKind


@dataclass
class ResolutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    requested: List[str] = field(default_factory=list)
    resolved: List[Tuple[str, str]] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    missing_alias_targets: List[Tuple[str, str]] = field(default_factory=list)

    bytes_total: int = 0

    def add_resolved(self, name: str, kind: EntryKind, content: str) -> None:
        self.resolved.append((name, kind.name.lower()))
        self.bytes_total += len(content.encode('utf-8'))

    def add_unknown(self, name: str) -> None:
        self.unknown.append(name)

    def add_missing_target(self, alias: str, target: str) -> None:
        self.missing_alias_targets.append((alias, target))

    @property
    def has_output(self) -> bool:
        return bool(self.resolved)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = (
            self.finished_at - self.started_at if self.finished_at else None
        )

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "requested": self.requested,
                "resolved": [{"name": n, "kind": k} for n, k in self.resolved],
                "unknown": self.unknown,
                "missing_alias_targets": [
                    {"alias": a, "target": t} for a, t in self.missing_alias_targets
                ],
                "bytes_total": self.bytes_total,
            },
            indent=indent,
        )
