from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union


class EntryKind(enum.IntEnum):
    """Namespace tag of an Entry; the value is its precedence rank."""

    REMOTE = 0
    ALIAS = 1
    USER = 2


@dataclass(frozen=True)
class _EntryBase:
    key: str

    kind = EntryKind.REMOTE

    def sort_key(self) -> Tuple[int, str]:
        return (int(self.kind), self.key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _EntryBase):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class RemoteTemplate(_EntryBase):
    content: str = ''

    kind = EntryKind.REMOTE


@dataclass(frozen=True)
class Alias(_EntryBase):
    targets: Tuple[str, ...] = ()

    kind = EntryKind.ALIAS


@dataclass(frozen=True)
class UserTemplate(_EntryBase):
    content: str = ''

    kind = EntryKind.USER


Entry = Union[RemoteTemplate, Alias, UserTemplate]


@dataclass(frozen=True)
class TemplateRecord:
    """One record of the remote listing; only `contents` feeds resolution."""

    key: str
    contents: str
    name: Optional[str] = None
    file_name: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, key: str, raw: Mapping[str, Any]) -> 'TemplateRecord':
        known = {'key', 'name', 'fileName', 'contents'}
        return cls(
            key=str(raw.get('key') or key),
            contents=raw['contents'],
            name=raw.get('name'),
            file_name=raw.get('fileName'),
            extra={k: v for k, v in raw.items() if k not in known},
        )


@dataclass(frozen=True)
class DirEntry:
    name: str
    extension: Optional[str]
    is_file: bool
    is_dir: bool

    @classmethod
    def file(cls, name: str) -> 'DirEntry':
        return cls(name=name, extension=extension_of(name), is_file=True, is_dir=False)

    @classmethod
    def directory(cls, name: str) -> 'DirEntry':
        return cls(name=name, extension=extension_of(name), is_file=False, is_dir=True)


def extension_of(name: str) -> Optional[str]:
    """Suffix after the last dot, or None for dotfiles and extension-less names."""
    stem, dot, ext = name.rpartition('.')
    if not dot or not stem or not ext:
        return None
    return ext


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str
