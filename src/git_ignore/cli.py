from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from git_ignore.constants import DEFAULT_SERVER, IGNORE_FILE_NAME
from git_ignore.core.errors import GitIgnoreError
from git_ignore.core.interfaces.net import HTTPTransportProtocol
from git_ignore.core.models import Entry, EntryKind
from git_ignore.logging.factory import DefaultLoggerFactory
from git_ignore.logging.helpers import get_logger
from git_ignore.parsing.parser import COMMANDS, _build_command_parser, _build_parser
from git_ignore.runtime.app import GitIgnore
from git_ignore.utils.paths import ProjectPaths


logger = get_logger('git_ignore')

_ACTION_ALIASES = {'ls': 'list', 'rm': 'remove'}


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO)
    lg = factory.get_logger('git_ignore')
    global logger
    logger = lg


def _format_entry(entry: Entry) -> str:
    if entry.kind is EntryKind.ALIAS:
        return f'{entry.key} (alias: {", ".join(entry.targets)})'
    if entry.kind is EntryKind.USER:
        return f'{entry.key} (user template)'
    return entry.key


class GitIgnoreCli:
    """Top-level façade for command-style execution."""

    def __init__(
        self,
        *,
        paths: Optional[ProjectPaths] = None,
        transport: Optional[HTTPTransportProtocol] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self._paths = paths or ProjectPaths.default()
        self._transport = transport
        self._cwd = cwd

    def _app(self) -> GitIgnore:
        server = os.getenv('GIT_IGNORE_SERVER') or DEFAULT_SERVER
        return GitIgnore(self._paths, transport=self._transport, server=server)

    def run(self, argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the text for stdout."""
        argv = list(argv)
        json_logs = '--json-logs' in argv or os.getenv('GIT_IGNORE_JSON_LOGS') == '1'
        _configure_logging(json_logs)

        rest = [a for a in argv if a != '--json-logs']
        if rest and rest[0] in COMMANDS:
            ns = _build_command_parser().parse_args(rest)
            return self._run_command(ns)

        ns = _build_parser().parse_args(argv)
        return self._run_default(ns)

    # -------- Default form --------

    def _run_default(self, ns: argparse.Namespace) -> str:
        app = self._app()
        cwd = self._cwd or Path.cwd()

        if ns.update:
            app.update()
            if not ns.list and not ns.templates and not ns.auto:
                return ''

        if ns.list:
            entries = app.list_entries(ns.templates, simple=ns.simple)
            return ''.join(f'{_format_entry(e)}\n' for e in entries)

        if not ns.templates and not ns.auto:
            _build_parser().print_usage(sys.stderr)
            return ''

        text = app.get(ns.templates, simple=ns.simple, auto=ns.auto, cwd=cwd)
        if not text:
            logger.warning('⚠  no templates matched %s', ', '.join(ns.templates) or 'this directory')
            return ''
        if ns.write:
            app.write(text, cwd / IGNORE_FILE_NAME, force=ns.force)
            return ''
        return text

    # -------- Management commands --------

    def _run_command(self, ns: argparse.Namespace) -> str:
        app = self._app()
        cfg = app.user_config
        action = _ACTION_ALIASES.get(getattr(ns, 'action', ''), getattr(ns, 'action', ''))

        if ns.command == 'init':
            cfg.init(force=ns.force)
            return ''

        if ns.command == 'alias':
            if action == 'list':
                return ''.join(f'{name} => {", ".join(targets)}\n' for name, targets in app.list_aliases().items())
            if action == 'add':
                cfg.add_alias(ns.name, ns.aliases)
            elif action == 'remove':
                cfg.remove_alias(ns.name)
            return ''

        if action == 'list':
            return ''.join(f'{name} => {file_name}\n' for name, file_name in app.list_templates().items())
        if action == 'add':
            cfg.add_template(ns.name, ns.file_name)
        elif action == 'remove':
            cfg.remove_template(ns.name)
        return ''


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Entry point for `git-ignore` and `python -m git_ignore`."""
    try:
        out = GitIgnoreCli().run(sys.argv[1:] if argv is None else argv)
        if out:
            sys.stdout.write(out)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except GitIgnoreError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
