"""Plain-text rendering of repository search results."""

from typing import Iterable

import click

from .models import RepositorySummary

NO_DESCRIPTION = "No description"
NO_LANGUAGE = "No language specified"
SEPARATOR = "---"


def format_repository(repo: RepositorySummary) -> str:
    """Format one repository as a fixed three-line block plus separator."""
    description = repo.description if repo.description is not None else NO_DESCRIPTION
    language = repo.language if repo.language is not None else NO_LANGUAGE
    return (
        f"Repository Name: {repo.name}\n"
        f"Description: {description}\n"
        f"Language: {language}\n"
        f"{SEPARATOR}"
    )


def print_repositories(repositories: Iterable[RepositorySummary]) -> None:
    """Write each repository block to stdout in iteration order."""
    for repo in repositories:
        click.echo(format_repository(repo))
