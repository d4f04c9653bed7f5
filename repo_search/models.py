"""Data models for the repository search tool."""

from dataclasses import dataclass
from typing import Any, List, Optional

from dataclasses_json import Undefined, dataclass_json
from marshmallow import ValidationError

from .exceptions import ResponseDecodeError


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class RepositorySummary:
    """Repository fields returned by the search endpoint."""
    name: str
    description: Optional[str] = None  # null when the repository has none
    language: Optional[str] = None  # null when GitHub detected no language


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class SearchResult:
    """One page of repository search results, in API order."""
    items: List[RepositorySummary]

    @classmethod
    def from_response(cls, payload: Any) -> "SearchResult":
        """Build a result from a decoded JSON body, validating it against the schema."""
        try:
            return cls.schema().load(payload)
        except (ValidationError, TypeError) as e:
            raise ResponseDecodeError(f"Unexpected search response: {e}") from e


@dataclass(frozen=True)
class FilterCriteria:
    """Optional case-insensitive filters supplied on the command line."""
    title: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.language is None
