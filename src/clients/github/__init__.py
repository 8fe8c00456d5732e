from .fetcher import GitHubFetcher

__all__ = ["GitHubFetcher"]
