"""HTTP client for the GitHub repository search endpoint."""

from typing import Optional

import requests
from loguru import logger

from .config import DEFAULT_HEADERS, SEARCH_PER_PAGE, SEARCH_REPOSITORIES_URL
from .exceptions import HTTPStatusError, RequestError, ResponseDecodeError
from .models import SearchResult


def build_search_query(username: str) -> str:
    """Scope a repository search to one account."""
    return f"user:{username}"


class GitHubSearchClient:
    """Authenticated client for GitHub's repository search API.

    Issues a single request per search: the first page only, no retries,
    and the transport's default timeout.
    """

    def __init__(self, access_token: str, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.session.headers["Authorization"] = f"Bearer {access_token}"

    def search_repositories(self, query: str) -> SearchResult:
        """Run one search query and decode the response."""
        params = {"q": query, "per_page": SEARCH_PER_PAGE}
        logger.debug(f"Making GET request to: {SEARCH_REPOSITORIES_URL} (q={query!r})")

        try:
            response = self.session.get(SEARCH_REPOSITORIES_URL, params=params)
        except requests.RequestException as e:
            logger.warning(f"Request failed for {SEARCH_REPOSITORIES_URL}: {e}")
            raise RequestError(f"Request to GitHub failed: {e}") from e

        if not response.ok:
            message = self._error_message(response)
            if response.status_code in (401, 403):
                logger.warning(f"Access denied ({response.status_code}): {response.url}")
            else:
                logger.warning(f"HTTP error ({response.status_code}): {response.url}")
            raise HTTPStatusError(response.status_code, message)

        logger.debug(f"Successfully fetched: {response.url} (status: {response.status_code})")

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Invalid JSON in search response: {e}") from e

        result = SearchResult.from_response(payload)
        logger.info(f"Search returned {len(result.items)} repositories")
        return result

    def search_user_repositories(self, username: str) -> SearchResult:
        """Search the repositories owned by ``username``."""
        return self.search_repositories(build_search_query(username))

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        # GitHub error bodies look like {"message": "...", "documentation_url": "..."}
        try:
            body = response.json()
        except ValueError:
            return response.reason or None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return response.reason or None

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
