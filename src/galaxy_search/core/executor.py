"""Search execution against the index."""

import logging
from typing import Any, List, Mapping

from ..models.document import SearchHit
from ..models.query import CompositeQuery
from ..models.result import IndexResponse
from .index_client import IndexClient

logger = logging.getLogger(__name__)


def extract_total(total: Any) -> int:
    """
    Read the total hit count reported by the index.

    The total is either a bare integer or a ``{"value": n, "relation": ...}``
    structure; a missing total counts as zero.
    """
    if isinstance(total, Mapping):
        total = total.get("value")
    if total is None:
        return 0
    return int(total)


def parse_hits(raw_hits: List[Mapping[str, Any]]) -> List[SearchHit]:
    """Convert raw index hits to SearchHit records, keeping index order."""
    hits = []
    for raw_hit in raw_hits:
        source = raw_hit.get("_source") or {}
        document_id = source.get("id")
        hits.append(SearchHit(
            document_id=str(document_id) if document_id is not None else None,
            document_type=source.get("type"),
            score=float(raw_hit.get("_score") or 0.0)
        ))
    return hits


class SearchExecutor:
    """Runs composite queries with a pagination window."""

    def __init__(self, index_client: IndexClient, index_name: str):
        self.index_client = index_client
        self.index_name = index_name

    async def execute(self, query: CompositeQuery, from_: int, size: int) -> IndexResponse:
        """
        Execute a query against the index.

        Args:
            query: Composite query to send
            from_: Pagination offset
            size: Page size

        Returns:
            Hits in index order and the reported total

        Raises:
            IndexUnavailable: If the index cannot be reached
            QueryRejected: If the index rejects the query
        """
        response = await self.index_client.search(
            index=self.index_name,
            from_=from_,
            size=size,
            query=query.to_dict()
        )

        hits_section = response.get("hits") or {}
        hits = parse_hits(hits_section.get("hits") or [])
        total = extract_total(hits_section.get("total"))

        logger.info(f"Index returned {len(hits)} hits of {total} on {self.index_name}")
        return IndexResponse(hits=hits, total=total)
