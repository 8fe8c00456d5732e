"""HTTP exchange core shared by the GitHub content and tree fetchers.

One `fetch()` call performs a single logical GET: it builds the request
headers (GitHub v3 Accept, User-Agent, optional basic auth), applies the
per-scheme proxy and timeout, follows redirects manually through
`redirects.next_redirect`, and resolves exactly once with either the
buffered 200 body, an `HttpStatusError`, or a `TransportError`.

Every hop opens its own single-connection `httpx.AsyncClient` (no pooling,
no keep-alive) which is closed on every exit path.
"""

from __future__ import annotations

import base64
import logging
from typing import Dict, Optional

import httpx

from core.errors import ConfigurationError, HttpStatusError, TransportError
from core.models import FetchConfiguration, HttpClientSettings, ProxySettings

from .redirects import next_redirect, split_target

logger = logging.getLogger(__name__)


class HttpxExchanger:
    """`HttpExchanger` implementation backed by httpx."""

    VERSION_ACCEPT = "application/vnd.github.v3+json"
    HTTPS_SCHEME = "https"

    _PROXY_SCHEMES = {"HTTP": "http", "SOCKS5": "socks5"}

    def __init__(self, *, settings: Optional[HttpClientSettings] = None) -> None:
        self._settings = settings or HttpClientSettings()

    async def fetch(self, url: str, config: FetchConfiguration) -> bytes:
        headers = self._build_headers(config)
        origin_host = split_target(url)[1]

        method = "GET"
        request_url = url
        max_redirects = max(0, int(self._settings.max_redirects))

        for hop in range(max_redirects + 1):
            response = await self._send(method, request_url, headers, config)

            if response.status_code == 200:
                return response.content

            redirect = next_redirect(
                response.status_code,
                response.headers.get("Location"),
                response.request,
            )
            if redirect is None:
                break
            if hop == max_redirects:
                logger.warning("Giving up on '%s' after %d redirects", url, max_redirects)
                break

            logger.debug(
                "Following %d redirect: %s %s:%d%s",
                response.status_code,
                redirect.method,
                redirect.host,
                redirect.port,
                redirect.target,
            )
            if redirect.host != origin_host:
                headers.pop("Authorization", None)
            method = redirect.method
            request_url = redirect.url

        raise HttpStatusError(
            status_code=response.status_code,
            status_message=response.reason_phrase,
            request_url=url,
        )

    # --- HTTP helpers ---

    def _build_headers(self, config: FetchConfiguration) -> Dict[str, str]:
        headers = {
            "Accept": self.VERSION_ACCEPT,
            "User-Agent": config.owner,
        }
        username = (config.username or "").strip()
        token = (config.personal_access_token or "").strip()
        if username and token:
            raw = f"{config.username}:{config.personal_access_token}".encode("utf-8")
            headers["Authorization"] = "Basic " + base64.b64encode(raw).decode("ascii")
        return headers

    def _timeout_seconds(self, config: FetchConfiguration) -> float:
        timeout_ms = config.timeout_ms or self._settings.timeout_ms or 10_000
        return timeout_ms / 1000.0

    def _proxy_for(self, scheme: str, config: FetchConfiguration) -> Optional[httpx.Proxy]:
        if not config.use_system_proxy:
            return None

        if scheme == self.HTTPS_SCHEME:
            settings: Optional[ProxySettings] = config.https_proxy or self._settings.https_proxy
        else:
            settings = config.http_proxy or self._settings.http_proxy
        if settings is None:
            return None

        proxy_scheme = self._PROXY_SCHEMES.get((settings.proxy_type or "HTTP").upper())
        if proxy_scheme is None:
            raise ConfigurationError(f"Unsupported proxy type: {settings.proxy_type}")

        proxy_url = f"{proxy_scheme}://{settings.host}:{settings.port}"
        if settings.username:
            return httpx.Proxy(proxy_url, auth=(settings.username, settings.password or ""))
        return httpx.Proxy(proxy_url)

    def _create_client(self, scheme: str, config: FetchConfiguration) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout_seconds(config)),
            verify=self._settings.verify,
            proxy=self._proxy_for(scheme, config),
            limits=httpx.Limits(max_connections=1, max_keepalive_connections=0),
            follow_redirects=False,
            trust_env=False,
        )

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        config: FetchConfiguration,
    ) -> httpx.Response:
        scheme, host, port = split_target(url)
        logger.debug("%s %s (host=%s, port=%d)", method, url, host, port)
        try:
            # Non-streaming send buffers the body before the client closes
            async with self._create_client(scheme, config) as client:
                request = client.build_request(method, url, headers=headers)
                return await client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"Unable to fetch '{url}': {type(e).__name__}: {e}", cause=e) from e
