"""Command line interface for the repository search tool."""

import sys
from typing import Optional

import click
from loguru import logger

from .config import APP_NAME, APP_VERSION, LOG_FORMAT, LOG_LEVEL, get_access_token
from .exceptions import ConfigurationError, RequestError
from .http_client import GitHubSearchClient, build_search_query
from .models import FilterCriteria
from .output import print_repositories
from .repository_filter import filter_repositories


def setup_logging(log_level: str = LOG_LEVEL, log_file: Optional[str] = None):
    """Setup logging configuration."""
    # Remove default logger
    logger.remove()

    # Console logger goes to stderr; stdout carries the results
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=log_level,
        colorize=True
    )

    if log_file:
        logger.add(
            log_file,
            format=LOG_FORMAT,
            level=log_level,
            rotation="10 MB",
            retention="7 days"
        )


@click.command()
@click.option(
    '--username', '-u',
    required=True,
    help='GitHub username whose repositories are searched'
)
@click.option(
    '--repositories', '-r',
    help='Filter by the specified repository name (currently not applied)'
)
@click.option(
    '--title', '-t',
    help='Filter by repository names containing this text'
)
@click.option(
    '--description', '-d',
    help='Filter by repository descriptions containing this text'
)
@click.option(
    '--language', '-l',
    help='Filter by programming language (exact match)'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
    default=LOG_LEVEL,
    help=f'Logging level (default: {LOG_LEVEL})'
)
@click.option(
    '--log-file',
    default=None,
    help='Also write logs to this file'
)
@click.version_option(version=APP_VERSION, prog_name=APP_NAME)
def main(username: str, repositories: Optional[str], title: Optional[str],
         description: Optional[str], language: Optional[str],
         log_level: str, log_file: Optional[str]):
    """
    GitHub Repository Search

    Lists the repositories owned by a GitHub user, optionally filtered by
    name, description or language. Requires GITHUB_ACCESS_TOKEN to be set.

    Example usage:

        python main.py -u octocat

        python main.py -u octocat -l python -d tool
    """
    setup_logging(log_level, log_file)

    criteria = FilterCriteria(title=title, description=description, language=language)
    query = build_search_query(username)

    logger.info(f"Search query: {query}")
    logger.info(f"Filters: {criteria}")
    if repositories is not None:
        logger.debug(f"--repositories given ({repositories!r}); it does not affect filtering")

    try:
        access_token = get_access_token()

        with GitHubSearchClient(access_token) as client:
            result = client.search_user_repositories(username)

        print_repositories(filter_repositories(result, criteria))

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except RequestError as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Search interrupted by user")
        sys.exit(1)


if __name__ == '__main__':
    main()
