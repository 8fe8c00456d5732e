"""Redirect decisions for the HTTP exchange.

Pure functions, independent of any transport: given a 3xx response's
status code and Location header plus the request that produced it,
decide whether and how to issue the next request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import httpx


REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

# These become GET; 307/308 keep the original method.
_METHOD_REWRITE_STATUSES = frozenset({301, 302, 303})

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class RedirectRequest:
    method: str
    url: str
    host: str
    port: int
    ssl: bool
    target: str  # path + optional "?query"


def default_port(scheme: str) -> int:
    return _DEFAULT_PORTS.get((scheme or "").lower(), 80)


def split_target(url: str) -> Tuple[str, str, int]:
    """Return (scheme, host, port) for `url`, filling in the scheme's default port."""
    parsed = httpx.URL(url)
    port = parsed.port if parsed.port is not None else default_port(parsed.scheme)
    return parsed.scheme, parsed.host, port


def next_redirect(
    status_code: int,
    location: Optional[str],
    request: httpx.Request,
) -> Optional[RedirectRequest]:
    """Decide the follow-up request for a redirect response, or None to stop."""
    if not location or status_code not in REDIRECT_STATUSES:
        return None

    method = "GET" if status_code in _METHOD_REWRITE_STATUSES else request.method

    uri = request.url.join(location)
    scheme = uri.scheme or ""
    if scheme.endswith("p"):
        ssl, fallback_port = False, 80
    elif scheme.endswith("s"):
        ssl, fallback_port = True, 443
    else:
        # Neither http-like nor https-like
        return None

    port = uri.port if uri.port is not None else fallback_port
    host = uri.host
    target = uri.raw_path.decode("ascii")

    # Next hop is always plain http(s), whatever the Location scheme was
    netloc = f"[{host}]" if ":" in host else host
    url = httpx.URL(f"{'https' if ssl else 'http'}://{netloc}:{port}{target}")

    return RedirectRequest(
        method=method,
        url=str(url),
        host=host,
        port=port,
        ssl=ssl,
        target=target,
    )
