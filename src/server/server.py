"""Server bootstrap for the GitHub fetcher MCP service.

Creates the FastMCP instance, wires the HTTP exchange, JSON codec and
fetcher into the tools, and starts the MCP server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubFetcher
from clients.http import HttpxExchanger
from clients.json_codec import StdJsonCodec
from config import LOG_LEVEL, default_http_client_settings

from tools.fetch_file import register as register_fetch_file
from tools.list_files import register as register_list_files

mcp = FastMCP("github-fetcher-mcp")


def register_tools() -> None:
    exchanger = HttpxExchanger(settings=default_http_client_settings())
    fetcher = GitHubFetcher(exchanger=exchanger, codec=StdJsonCodec())

    register_fetch_file(mcp, fetcher=fetcher)
    register_list_files(mcp, fetcher=fetcher)


register_tools()


def main() -> None:
    # stdout carries the MCP stdio protocol; basicConfig logs to stderr
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
