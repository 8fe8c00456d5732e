"""MCP tool that fetches a single file from a GitHub repository.

Registers the 'fetch_file' tool which delegates to GitHubFetcher and
returns the decoded text together with the normalized metadata.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubFetcher
from tools.fetch_config import build_fetch_configuration


def register(mcp: FastMCP, *, fetcher: GitHubFetcher) -> None:
    @mcp.tool(name="fetch_file")
    async def fetch_file(
        owner: str,
        repository: str,
        filepath: str,
        branch_or_tag: str = "",
        api_url: Optional[str] = None,
        use_system_proxy: bool = False,
    ) -> Dict[str, Any]:
        """Fetch a file through the GitHub Contents API.

        Parameters:
          - owner: repository owner (user or organization).
          - repository: repository name.
          - filepath: file path inside the repository (e.g. "/docs/swagger.yml").
          - branch_or_tag: optional ref; the default branch is used when empty.
          - api_url: GitHub API base URL (default from config).
          - use_system_proxy: route the request through the configured proxy.

        Returns:
          {"content": <UTF-8 text or None>, "metadata": <dict or None>}.
          metadata always carries provider="GitHub" and, when GitHub
          returns html_url, an edit_url.

        Raises:
          ConfigurationError, TransportError, HttpStatusError, DecodeError
          or FetchError.
        """
        cfg = build_fetch_configuration(
            owner=owner,
            repository=repository,
            filepath=filepath,
            branch_or_tag=branch_or_tag,
            api_url=api_url,
            use_system_proxy=use_system_proxy,
        )
        result = await fetcher.fetch_file_content(cfg)

        text = None
        if result.content is not None:
            text = result.content.read().decode("utf-8", errors="replace")
        return {"content": text, "metadata": result.metadata}
