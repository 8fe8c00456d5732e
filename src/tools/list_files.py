"""MCP tool that lists files under a directory of a GitHub repository.

Registers the 'list_files' tool which adapts GitHubFetcher's tree listing
to the MCP tool interface used by prompts and agents.
"""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubFetcher
from tools.fetch_config import build_fetch_configuration


def register(mcp: FastMCP, *, fetcher: GitHubFetcher) -> None:
    @mcp.tool(name="list_files")
    async def list_files(
        owner: str,
        repository: str,
        filepath: str,
        branch_or_tag: str,
        api_url: Optional[str] = None,
        use_system_proxy: bool = False,
    ) -> List[str]:
        """List file paths under `filepath` via the Git Trees API (recursive).

        Params:
          - owner / repository: the GitHub repository.
          - filepath: directory prefix, e.g. "/path/to/file".
          - branch_or_tag: branch, tag or tree SHA (required).
          - api_url: GitHub API base URL (default from config).
          - use_system_proxy: route the request through the configured proxy.

        Returns:
          "/"-prefixed blob paths in the order GitHub returns them.

        Raises:
          ConfigurationError for missing inputs; TransportError,
          HttpStatusError or FetchError when the tree cannot be fetched.
        """
        cfg = build_fetch_configuration(
            owner=owner,
            repository=repository,
            filepath=filepath,
            branch_or_tag=branch_or_tag,
            api_url=api_url,
            use_system_proxy=use_system_proxy,
        )
        return await fetcher.list_files_under_path(cfg)
