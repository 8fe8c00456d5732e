from __future__ import annotations

from core.errors import ConfigurationError
from core.models import FetchConfiguration


# Segments are concatenated as given; callers supply already-safe paths.


def check_required_fields(config: FetchConfiguration) -> None:
    required = (config.base_api_url, config.owner, config.repository, config.filepath)
    if any(not value for value in required):
        raise ConfigurationError("Some required configuration attributes are missing.")


def _repo_base(config: FetchConfiguration) -> str:
    return f"{config.base_api_url}/repos/{config.owner}/{config.repository}"


def contents_url(config: FetchConfiguration) -> str:
    check_required_fields(config)
    url = f"{_repo_base(config)}/contents{config.filepath}"
    if config.branch_or_tag:
        url += f"?ref={config.branch_or_tag}"
    return url


def trees_url(config: FetchConfiguration) -> str:
    check_required_fields(config)
    if not config.branch_or_tag:
        raise ConfigurationError("branch_or_tag is required to list repository files")
    return f"{_repo_base(config)}/git/trees/{config.branch_or_tag}?recursive=1"
