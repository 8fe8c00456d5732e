"""Factory for the FetchConfiguration used by the MCP tools.

Combines tool arguments with credentials taken from the environment
(GITHUB_USERNAME / GITHUB_TOKEN) so secrets never travel as tool input.
"""

from __future__ import annotations

from typing import Optional

import config
from core.models import FetchConfiguration


def build_fetch_configuration(
    *,
    owner: str,
    repository: str,
    filepath: str,
    branch_or_tag: Optional[str] = None,
    api_url: Optional[str] = None,
    use_system_proxy: bool = False,
) -> FetchConfiguration:
    # Tools accept "path/to/file" as well as "/path/to/file"
    path = (filepath or "").strip()
    if path and not path.startswith("/"):
        path = "/" + path

    return FetchConfiguration(
        base_api_url=(api_url or config.GITHUB_API_URL or "").strip().rstrip("/"),
        owner=(owner or "").strip(),
        repository=(repository or "").strip(),
        filepath=path,
        branch_or_tag=(branch_or_tag or "").strip() or None,
        username=config.GITHUB_USERNAME,
        personal_access_token=config.GITHUB_TOKEN,
        use_system_proxy=bool(use_system_proxy),
    )
