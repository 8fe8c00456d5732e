"""GitHub fetcher: read one file (Contents API) or list files under a path (Git Trees API).

Both operations validate the configuration before any network call, run a
single HTTP exchange, and decode the JSON payload. Errors are logged where
they happen; anything outside the FetchError family is wrapped into a
FetchError that carries the original message.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from core.errors import ConfigurationError, FetchError
from core.interfaces import HttpExchanger, JsonCodec
from core.models import FetchConfiguration, FetchResult

from .payloads import decode_contents, filter_tree
from .urls import contents_url, trees_url

logger = logging.getLogger(__name__)


class GitHubFetcher:
    """Fetch file content and tree listings from the GitHub REST API.

    Purpose:
      - fetch_file_content(config) -> FetchResult
      - list_files_under_path(config) -> List[str]

    Key behavior:
      - An empty 200 body is an empty result, not an error.
      - No caching and no retries; each call is one exchange.
    """

    def __init__(self, *, exchanger: HttpExchanger, codec: JsonCodec) -> None:
        self._exchanger = exchanger
        self._codec = codec

    async def fetch_file_content(self, config: FetchConfiguration) -> FetchResult:
        """Fetch the file at `config.filepath` and decode its base64 content."""
        url = self._build_url(contents_url, config)
        try:
            body = await self._exchanger.fetch(url, config)
            if not body:
                logger.warning(
                    "GitHub responded with status 200 but the content of '%s' is empty.", url
                )
                return FetchResult()

            document = self._codec.parse(body)
            if document is None:
                return FetchResult()

            return decode_contents(self._codec.to_mapping(document))
        except FetchError as e:
            self._log_failure(url, e)
            raise
        except Exception as e:
            self._log_failure(url, e)
            raise FetchError(f"Unable to fetch GitHub content ({e})") from e

    async def list_files_under_path(self, config: FetchConfiguration) -> List[str]:
        """List blob paths under `config.filepath` at `config.branch_or_tag`."""
        url = self._build_url(trees_url, config)
        try:
            body = await self._exchanger.fetch(url, config)
            if not body:
                logger.warning(
                    "GitHub responded with status 200 but the tree of '%s' is empty.", url
                )
                return []

            document = self._codec.parse(body)
            if document is None:
                return []

            tree = self._codec.to_mapping(document).get("tree") or []
            return filter_tree(tree, config.filepath)
        except FetchError as e:
            self._log_failure(url, e)
            raise
        except Exception as e:
            self._log_failure(url, e)
            raise FetchError(f"Unable to fetch GitHub content ({e})") from e

    def _log_failure(self, url: str, err: Exception) -> None:
        logger.error("GitHub fetch of '%s' failed: %s", url, err, exc_info=err)

    def _build_url(self, builder: Callable[[FetchConfiguration], str], config: FetchConfiguration) -> str:
        try:
            return builder(config)
        except ConfigurationError as e:
            logger.error("Invalid GitHub fetcher configuration: %s", e)
            raise
