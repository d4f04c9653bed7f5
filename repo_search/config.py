"""Configuration settings for the repository search tool."""

import os
from importlib.metadata import PackageNotFoundError, version
from typing import Dict, Optional

from .exceptions import ConfigurationError

# Package identity, used for the User-Agent header
APP_NAME = "repo-search"
try:
    APP_VERSION = version(APP_NAME)
except PackageNotFoundError:
    # Running from a source checkout without an install
    APP_VERSION = "0.0.0+unknown"
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# GitHub REST API
GITHUB_API_URL = "https://api.github.com"
SEARCH_REPOSITORIES_URL = f"{GITHUB_API_URL}/search/repositories"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"

# Search responses are capped at 100 items per page; only the first page is fetched
SEARCH_PER_PAGE = 100

# Credentials
ACCESS_TOKEN_ENV_VAR = "GITHUB_ACCESS_TOKEN"

# Default headers for requests (Authorization is added per client)
DEFAULT_HEADERS = {
    "Accept": GITHUB_MEDIA_TYPE,
    "User-Agent": USER_AGENT,
    "X-GitHub-Api-Version": GITHUB_API_VERSION,
}

# Logging configuration
# stdout is reserved for search results, so diagnostics stay quiet by default
LOG_LEVEL = "WARNING"
LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def get_access_token(environ: Optional[Dict[str, str]] = None) -> str:
    """Read the GitHub access token from the environment."""
    if environ is None:
        environ = os.environ

    token = environ.get(ACCESS_TOKEN_ENV_VAR)
    # An empty value counts as unset
    if not token:
        raise ConfigurationError(
            f"{ACCESS_TOKEN_ENV_VAR} must be set to a GitHub personal access token"
        )
    return token
