from __future__ import annotations

import json
from typing import Any, Dict


class StdJsonCodec:
    """`JsonCodec` backed by the standard `json` module (what httpx's Response.json() uses)."""

    def parse(self, data: bytes) -> Any:
        if not data or not data.strip():
            return None
        return json.loads(data)

    def to_mapping(self, node: Any) -> Dict[str, Any]:
        if not isinstance(node, dict):
            raise TypeError(f"Expected a JSON object, got {type(node).__name__}")
        # dict keeps document order
        return dict(node)
