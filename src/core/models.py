"""Immutable dataclasses shared by the fetcher, the HTTP exchange and the tools.

Includes the per-request FetchConfiguration, proxy and HTTP client
defaults, and the FetchResult returned for a single file.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional


ProxyType = Literal["HTTP", "SOCKS5"]


@dataclass(frozen=True)
class ProxySettings:
    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None
    proxy_type: ProxyType = "HTTP"


@dataclass(frozen=True)
class HttpClientSettings:
    """Process-wide HTTP defaults; read-only while a fetch runs."""

    timeout_ms: int = 10_000
    http_proxy: Optional[ProxySettings] = None
    https_proxy: Optional[ProxySettings] = None
    verify: bool = False
    max_redirects: int = 5


@dataclass(frozen=True)
class FetchConfiguration:
    """Where to fetch from and how.

    Field groups:
    - Required: base_api_url, owner, repository, filepath ("/"-prefixed)
    - Ref: branch_or_tag (required for tree listings)
    - Auth: username + personal_access_token (basic auth when both set)
    - HTTP: use_system_proxy, http_proxy, https_proxy, timeout_ms
      (None falls back to HttpClientSettings)
    """

    base_api_url: str
    owner: str
    repository: str
    filepath: str

    branch_or_tag: Optional[str] = None

    username: Optional[str] = None
    personal_access_token: Optional[str] = None

    use_system_proxy: bool = False
    http_proxy: Optional[ProxySettings] = None
    https_proxy: Optional[ProxySettings] = None
    timeout_ms: Optional[int] = None


@dataclass(frozen=True)
class FetchResult:
    content: Optional[io.BytesIO] = None
    metadata: Optional[Dict[str, Any]] = None
