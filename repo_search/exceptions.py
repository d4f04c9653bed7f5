"""Custom exceptions for the repository search tool."""

from typing import Optional


class RepoSearchError(Exception):
    """Base exception for repository search errors."""
    pass


class ConfigurationError(RepoSearchError):
    """Exception for missing or invalid configuration."""
    pass


class RequestError(RepoSearchError):
    """Exception for a failed search request."""
    pass


class HTTPStatusError(RequestError):
    """Exception for non-success HTTP responses."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        detail = f"GitHub API returned HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class ResponseDecodeError(RequestError):
    """Exception for response bodies that cannot be decoded."""
    pass
