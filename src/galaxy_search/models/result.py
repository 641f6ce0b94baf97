"""Search outcome data models."""

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Dict, List

from .document import PlayerCreatureObject, ResolvedResult, ResourceType, SearchHit


@dataclass
class IndexResponse:
    """
    Raw response of the search index for one query.

    Attributes:
        hits: Hits in the order delivered by the index
        total: Total number of matching documents reported by the index
    """
    hits: List[SearchHit]
    total: int = 0


@dataclass
class SearchOutcome:
    """
    Resolved search results.

    Attributes:
        total_result_count: Total reported by the index (not the resolved count)
        results: Resolved domain objects in hit order, numeric fallback appended
    """
    total_result_count: int = 0
    results: List[ResolvedResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate search outcome."""
        if self.total_result_count < 0:
            raise ValueError("Total result count cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "totalResultCount": self.total_result_count,
            "results": [
                {"type": type(result).__name__, **(asdict(result) if is_dataclass(result) else vars(result))}
                for result in self.results
            ]
        }


@dataclass
class RecentLoginsResult:
    total_results: int
    results: List[PlayerCreatureObject] = field(default_factory=list)


@dataclass
class ResourceTypePage:
    total_results: int
    results: List[ResourceType] = field(default_factory=list)
