from __future__ import annotations

"""
User configuration: aliases and local templates.

The config lives in `<config_dir>/config.toml`:

    [aliases]
    web = ["node", "yarn"]

    [templates]
    mine = "mine.gitignore"

Template values are file names relative to `<config_dir>/templates`. A config
that exists but fails to parse is reported as UserConfigCorrupt and left on
disk untouched; only `init(force=True)` replaces it.
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli_w

from git_ignore.core.errors import UserConfigCorrupt, UserTemplateUnreadable
from git_ignore.core.interfaces.store import UserConfigStoreProtocol
from git_ignore.logging.helpers import get_logger, trace_io
from git_ignore.utils.paths import ProjectPaths


@dataclass
class UserData:
    aliases: Dict[str, List[str]] = field(default_factory=dict)
    templates: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any], *, source: Path) -> 'UserData':
        aliases = raw.get('aliases', {})
        templates = raw.get('templates', {})
        if not isinstance(aliases, dict) or not isinstance(templates, dict):
            raise UserConfigCorrupt(source, "'aliases' and 'templates' must be tables")

        for name, targets in aliases.items():
            if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
                raise UserConfigCorrupt(source, f'alias {name!r} must be a list of names')
        for name, file_name in templates.items():
            if not isinstance(file_name, str):
                raise UserConfigCorrupt(source, f'template {name!r} must map to a file name')

        return cls(
            aliases={k: list(v) for k, v in aliases.items()},
            templates=dict(templates),
        )

    def to_mapping(self) -> Dict[str, Any]:
        return {'aliases': dict(self.aliases), 'templates': dict(self.templates)}


class UserConfigStore(UserConfigStoreProtocol):
    """Reads and writes the user config file and the template directory."""

    def __init__(self, paths: ProjectPaths, *, logger: Optional[logging.Logger] = None) -> None:
        self._paths = paths
        self._log = logger or get_logger('io.user_config')

    @property
    def path(self) -> Path:
        return self._paths.config_file

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> UserData:
        if not self.path.exists():
            return UserData()
        trace_io(self._log, 'reading user config', path=str(self.path))
        try:
            with self.path.open('rb') as fh:
                raw = tomllib.load(fh)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise UserConfigCorrupt(self.path, f'could not parse config ({exc})') from exc
        except OSError as exc:
            raise UserConfigCorrupt(self.path, f'could not read config file ({exc})') from exc
        return UserData.from_mapping(raw, source=self.path)

    def save(self, data: UserData) -> None:
        self._ensure_dirs()
        self.path.write_bytes(tomli_w.dumps(data.to_mapping()).encode('utf-8'))
        trace_io(self._log, 'user config written', path=str(self.path))

    def init(self, *, force: bool = False) -> bool:
        """Create the config directories and an empty config.

        Returns True when a config file was written.
        """
        self._ensure_dirs()
        if self.path.exists() and not force:
            self._log.info('config already exists at %s', self.path)
            return False
        if self.path.exists():
            self._log.warning('⚠  overwriting existing config file %s', self.path)
        self.save(UserData())
        self._log.info('✔ created config at %s', self.path)
        return True

    def add_alias(self, name: str, targets: List[str]) -> None:
        data = self.load()
        data.aliases[name] = list(targets)
        self.save(data)
        self._log.info('Created alias %s for %s', name, ', '.join(targets))

    def remove_alias(self, name: str) -> bool:
        data = self.load()
        if data.aliases.pop(name, None) is None:
            self._log.info('No alias named %s found', name)
            return False
        self.save(data)
        self._log.info('Removed alias %s', name)
        return True

    def add_template(self, name: str, file_name: str) -> Path:
        """Register *name* and create its file with a `### name ###` header.

        An existing file is kept as is, so users can register templates they
        already wrote.
        """
        data = self.load()
        self._ensure_dirs()
        target = self.template_path(file_name)
        if not target.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f'### {name} ###\n', encoding='utf-8')
        data.templates[name] = file_name
        self.save(data)
        self._log.info('Created template %s at %s', name, target)
        return target

    def remove_template(self, name: str) -> bool:
        data = self.load()
        if data.templates.pop(name, None) is None:
            self._log.info('No template named %s found', name)
            return False
        self.save(data)
        self._log.info('Removed template %s', name)
        return True

    def template_path(self, file_name: str) -> Path:
        return self._paths.templates_dir / file_name

    def read_template(self, file_name: str) -> str:
        path = self.template_path(file_name)
        trace_io(self._log, 'reading user template', path=str(path))
        return path.read_text(encoding='utf-8')

    def read_named_template(self, name: str, file_name: str) -> str:
        try:
            return self.read_template(file_name)
        except OSError as exc:
            raise UserTemplateUnreadable(name, self.template_path(file_name), exc.strerror) from exc
        except UnicodeDecodeError as exc:
            raise UserTemplateUnreadable(name, self.template_path(file_name), str(exc)) from exc

    def _ensure_dirs(self) -> None:
        self._paths.config_dir.mkdir(parents=True, exist_ok=True)
        self._paths.templates_dir.mkdir(parents=True, exist_ok=True)
