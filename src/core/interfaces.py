"""Core protocol and interface definitions.

Defines the capabilities the GitHub fetcher depends on: an HTTP exchange
that turns a URL into a response body, and a JSON codec. Concrete adapters
are wired in by the server.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from core.models import FetchConfiguration


class HttpExchanger(Protocol):
    """Contract for a single GET exchange (redirects followed, 200 only)."""
    async def fetch(self, url: str, config: FetchConfiguration) -> bytes:
        ...


class JsonCodec(Protocol):
    """Contract for the JSON operations the fetcher needs."""
    def parse(self, data: bytes) -> Any:
        ...

    def to_mapping(self, node: Any) -> Dict[str, Any]:
        ...
