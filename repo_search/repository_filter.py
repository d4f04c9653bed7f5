"""Client-side filtering of repository search results."""

from typing import List, Optional

from loguru import logger

from .models import FilterCriteria, RepositorySummary, SearchResult


def matches_title(repo: RepositorySummary, title: Optional[str]) -> bool:
    """Case-insensitive substring match against the repository name."""
    if title is None:
        return True
    return title.lower() in repo.name.lower()


def matches_description(repo: RepositorySummary, description: Optional[str]) -> bool:
    """Case-insensitive substring match; repositories without a description never match."""
    if description is None:
        return True
    if repo.description is None:
        return False
    return description.lower() in repo.description.lower()


def matches_language(repo: RepositorySummary, language: Optional[str]) -> bool:
    """Case-insensitive whole-string match; repositories without a language never match."""
    if language is None:
        return True
    if repo.language is None:
        return False
    return repo.language.lower() == language.lower()


def matches_criteria(repo: RepositorySummary, criteria: FilterCriteria) -> bool:
    return (
        matches_title(repo, criteria.title)
        and matches_description(repo, criteria.description)
        and matches_language(repo, criteria.language)
    )


def filter_repositories(result: SearchResult, criteria: FilterCriteria) -> List[RepositorySummary]:
    """Return the items satisfying every supplied criterion, in their original order."""
    if criteria.is_empty():
        return list(result.items)

    filtered = [repo for repo in result.items if matches_criteria(repo, criteria)]
    logger.info(
        f"Found {len(filtered)} matching repositories "
        f"(filtered from {len(result.items)} total)"
    )
    return filtered
