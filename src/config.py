"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
GITHUB_API_URL, GITHUB_TOKEN, LOG_LEVEL). HTTP client defaults (timeout,
proxies, TLS verification) are read through default_http_client_settings().
"""

from __future__ import annotations

import os
import urllib.request
from typing import Optional, Tuple
from urllib.parse import urlsplit

from core.models import HttpClientSettings, ProxySettings


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _system_proxy(scheme: str) -> Tuple[Optional[str], Optional[int]]:
    # Host/port of the OS or environment proxy for `scheme`, if any
    url = urllib.request.getproxies().get(scheme)
    if not url:
        return None, None
    parts = urlsplit(url if "://" in url else f"http://{url}")
    try:
        port = parts.port
    except ValueError:
        port = None
    return parts.hostname, port


def _proxy_from_env(scheme: str, proxy_type: str) -> ProxySettings:
    prefix = f"HTTP_CLIENT_PROXY_{scheme.upper()}"
    sys_host, sys_port = _system_proxy(scheme)
    return ProxySettings(
        host=_env_str(f"{prefix}_HOST", sys_host or "localhost"),
        port=_env_int(f"{prefix}_PORT", sys_port or 3128),
        username=_env_str(f"{prefix}_USERNAME"),
        password=_env_str(f"{prefix}_PASSWORD"),
        proxy_type=proxy_type,
    )


# GitHub
GITHUB_API_URL = (_env_str("GITHUB_API_URL", "https://api.github.com") or "").rstrip("/")
GITHUB_USERNAME = _env_str("GITHUB_USERNAME")
GITHUB_TOKEN = _env_str("GITHUB_TOKEN")

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO") or "INFO"


def default_http_client_settings() -> HttpClientSettings:
    """Process-wide HTTP defaults, re-read from the environment on each call."""
    proxy_type = (_env_str("HTTP_CLIENT_PROXY_TYPE", "HTTP") or "HTTP").upper()
    return HttpClientSettings(
        timeout_ms=_env_int("HTTP_CLIENT_TIMEOUT", 10_000),
        http_proxy=_proxy_from_env("http", proxy_type),
        https_proxy=_proxy_from_env("https", proxy_type),
        verify=_env_bool("HTTP_VERIFY", False),
        max_redirects=_env_int("HTTP_CLIENT_MAX_REDIRECTS", 5),
    )
