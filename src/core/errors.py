from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """Base error for GitHub fetch operations; also used to wrap unexpected failures."""


class ConfigurationError(FetchError):
    """Raised when required fetch configuration is missing or invalid."""


class TransportError(FetchError):
    """Raised when the connection fails (connect error, timeout, TLS)."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class HttpStatusError(FetchError):
    """Raised when the remote answers with a status other than 200."""

    def __init__(self, *, status_code: int, status_message: str, request_url: str) -> None:
        super().__init__(
            f"Unable to fetch '{request_url}'. Status code: {status_code}. Message: {status_message}"
        )
        self.status_code = status_code
        self.status_message = status_message
        self.request_url = request_url


class DecodeError(FetchError):
    """Raised when the `content` field is not valid base64."""
