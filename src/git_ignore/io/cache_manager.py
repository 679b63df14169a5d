from __future__ import annotations

"""
Local cache of the remote template listing.

The listing is a single JSON object keyed by template name, downloaded from
the gitignore.io API and stored verbatim as `<cache_dir>/ignore.json`.
"""

import http.client
import json
import logging
import zlib
from pathlib import Path
from typing import Any, Dict, Optional

from git_ignore.constants import DEFAULT_SERVER, USER_AGENT
from git_ignore.core.errors import CacheRefreshFailed, CacheUnavailable
from git_ignore.core.interfaces.net import HTTPTransportProtocol
from git_ignore.core.interfaces.store import TemplateCacheProtocol
from git_ignore.core.models import FetchRequest
from git_ignore.logging.helpers import get_logger, trace_io
from git_ignore.net.urllib_transport import UrllibHTTPTransport
from git_ignore.utils.paths import ProjectPaths


class TemplateCache(TemplateCacheProtocol):
    def __init__(
        self,
        paths: ProjectPaths,
        *,
        transport: Optional[HTTPTransportProtocol] = None,
        server: str = DEFAULT_SERVER,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._paths = paths
        self._server = server
        self._http: HTTPTransportProtocol = transport or UrllibHTTPTransport(user_agent=USER_AGENT)
        self._log = logger or get_logger('io.cache')

    @property
    def path(self) -> Path:
        return self._paths.cache_file

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Dict[str, Any]:
        trace_io(self._log, 'reading template cache', path=str(self.path))
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            raise CacheUnavailable(self.path, 'no cached templates, run with --update') from None
        except OSError as exc:
            raise CacheUnavailable(self.path, str(exc)) from exc

        try:
            blob = json.loads(raw.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CacheUnavailable(self.path, f'invalid JSON ({exc})') from exc
        if not isinstance(blob, dict):
            raise CacheUnavailable(self.path, 'expected a JSON object of templates')
        return blob

    def update(self) -> None:
        """Download the listing and replace the cached copy."""
        self._paths.cache_dir.mkdir(parents=True, exist_ok=True)
        try:
            resp = self._http.request(FetchRequest(method='GET', url=self._server, timeout=60.0))
        except (OSError, http.client.HTTPException, EOFError, zlib.error) as exc:
            raise CacheRefreshFailed(self._server, str(exc)) from exc

        if not 200 <= resp.status < 300:
            raise CacheRefreshFailed(self._server, f'HTTP {resp.status}')
        try:
            blob = json.loads(resp.body.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CacheRefreshFailed(self._server, f'unexpected response body ({exc})') from exc
        if not isinstance(blob, dict):
            raise CacheRefreshFailed(self._server, 'expected a JSON object of templates')

        self.path.write_bytes(resp.body)
        trace_io(self._log, 'template cache written', path=str(self.path), bytes=len(resp.body))
        self._log.info('✔ Update successful (%d templates)', len(blob))

    def purge(self) -> bool:
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
            self._log.info('🗑  cache removed → %s', self.path)
        except OSError as exc:
            self._log.warning('⚠  could not delete %s: %s', self.path, exc)
            return False
        return True
