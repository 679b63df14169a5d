from __future__ import annotations

"""HTTP transport implementation using urllib.

The transport is minimal and synchronous. It supports:
- Custom User-Agent via constructor.
- gzip-compressed responses (the template listing is a few MB of text).
- HTTP error statuses returned as responses instead of exceptions, so the
  caller decides what a non-2xx status means.
"""

import gzip
import urllib.error
import urllib.request
from typing import Mapping, Optional

from git_ignore.core.interfaces.net import HTTPTransportProtocol
from git_ignore.core.models import FetchRequest, FetchResponse


def _decode_body(body: bytes, headers: Mapping[str, str]) -> bytes:
    encoding = ''
    for key, value in headers.items():
        if key.lower() == 'content-encoding':
            encoding = (value or '').strip().lower()
    if encoding == 'gzip':
        return gzip.decompress(body)
    return body


class UrllibHTTPTransport(HTTPTransportProtocol):
    """urllib-based HTTP transport that satisfies HTTPTransportProtocol."""

    def __init__(self, *, user_agent: Optional[str] = None, default_timeout: float = 30.0) -> None:
        self._ua = user_agent
        self._timeout = float(default_timeout)

    def request(self, req: FetchRequest) -> FetchResponse:
        """Perform an HTTP request and return a FetchResponse.

        Network failures (DNS, refused connections, timeouts) propagate as
        `urllib.error.URLError` / `OSError`.
        """
        headers = dict(req.headers or {})
        if self._ua and 'User-Agent' not in headers:
            headers['User-Agent'] = self._ua
        headers.setdefault('Accept-Encoding', 'gzip')

        url_req = urllib.request.Request(req.url, data=req.body, headers=headers, method=req.method or 'GET')
        timeout = float(req.timeout) if req.timeout is not None else self._timeout

        try:
            with urllib.request.urlopen(url_req, timeout=timeout) as resp:  # nosec B310 (intended usage)
                raw = resp.read()
                status = getattr(resp, 'status', None) or int(resp.getcode())
                headers_map = dict(resp.headers.items())
                final_url = resp.geturl()
        except urllib.error.HTTPError as exc:
            raw = exc.read() or b''
            status = exc.code
            headers_map = dict(exc.headers.items()) if exc.headers else {}
            final_url = exc.geturl() or req.url

        return FetchResponse(
            status=status,
            headers=headers_map,
            body=_decode_body(raw, headers_map),
            final_url=final_url,
        )
