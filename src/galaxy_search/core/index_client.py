"""Search index client protocol and Elasticsearch adapter."""

import logging
from typing import Any, Dict, Mapping, Protocol

from elasticsearch import (
    ApiError,
    AsyncElasticsearch,
    BadRequestError,
    TransportError,
)

from .exceptions import IndexUnavailable, QueryRejected

logger = logging.getLogger(__name__)


class IndexClient(Protocol):
    """Client able to run a query document against a named index."""

    async def search(
        self,
        index: str,
        from_: int,
        size: int,
        query: Dict[str, Any]
    ) -> Mapping[str, Any]:
        ...


class ElasticsearchIndexClient:
    """
    Index client backed by ``AsyncElasticsearch``.

    Transport failures are reported as IndexUnavailable and rejected
    queries as QueryRejected. Retries are left to the underlying client.
    """

    def __init__(self, client: AsyncElasticsearch):
        self.client = client

    @classmethod
    def from_url(cls, url: str, **kwargs) -> 'ElasticsearchIndexClient':
        """Create a client connected to the given Elasticsearch URL."""
        return cls(AsyncElasticsearch(url, **kwargs))

    async def search(
        self,
        index: str,
        from_: int,
        size: int,
        query: Dict[str, Any]
    ) -> Mapping[str, Any]:
        """
        Run a search request.

        Raises:
            QueryRejected: If the index rejects the query as invalid
            IndexUnavailable: If the index cannot be reached or fails
        """
        try:
            response = await self.client.search(index=index, from_=from_, size=size, query=query)
        except BadRequestError as e:
            logger.error(f"Index rejected query: {str(e)}")
            raise QueryRejected(f"Query rejected by index: {str(e)}") from e
        except (ApiError, TransportError) as e:
            logger.error(f"Index request failed: {str(e)}")
            raise IndexUnavailable(f"Search index unavailable: {str(e)}") from e

        return response.body

    async def close(self) -> None:
        await self.client.close()
