"""Decoding of GitHub Contents API and Git Trees API payloads.

- `decode_contents` turns a contents object into a FetchResult: base64
  `content` becomes a byte stream, the rest is metadata with `edit_url`
  and `provider` added.
- `filter_tree` keeps blob paths under a directory prefix.
"""

from __future__ import annotations

import base64
import binascii
import io
from typing import Any, Dict, Iterable, List, Mapping

from core.errors import DecodeError
from core.models import FetchResult


PROVIDER_NAME = "GitHub"

CONTENT_KEY = "content"
HTML_URL_KEY = "html_url"
EDIT_URL_KEY = "edit_url"
PROVIDER_KEY = "provider"


def decode_base64_content(raw: Any) -> bytes:
    # GitHub wraps base64 content at 60 columns
    text = str(raw).replace("\n", "")
    # Trailing "=" padding is optional
    text += "=" * (-len(text) % 4)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Content is not valid base64: {e}") from e


def decode_contents(metadata: Dict[str, Any]) -> FetchResult:
    """Build a FetchResult from a contents mapping. Mutates `metadata` in place."""
    content = metadata.pop(CONTENT_KEY, None)
    stream = io.BytesIO(decode_base64_content(content)) if content else None

    html_url = metadata.get(HTML_URL_KEY)
    if html_url is not None:
        metadata[EDIT_URL_KEY] = str(html_url).replace("blob", "edit")

    metadata[PROVIDER_KEY] = PROVIDER_NAME
    return FetchResult(content=stream, metadata=metadata)


def filter_tree(entries: Iterable[Mapping[str, Any]], filepath: str) -> List[str]:
    """Return "/"-prefixed blob paths that start with `filepath`, in input order."""
    out: List[str] = []
    for entry in entries:
        if entry.get("type") != "blob":
            continue
        path = entry.get("path")
        if not isinstance(path, str):
            continue
        absolute = "/" + path
        if absolute.startswith(filepath):
            out.append(absolute)
    return out
