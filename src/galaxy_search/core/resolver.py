"""Resolution of index hits into domain objects."""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from ..models.document import Account, DocumentType, ResolvedResult, SearchHit
from ..models.result import SearchOutcome
from ..utils.text_processing import clean_search_text, is_numeric_id
from .stores import ResourceTypeService, ServerObjectService

logger = logging.getLogger(__name__)

Resolution = Callable[[str], Awaitable[Optional[ResolvedResult]]]


class ResultResolver:
    """
    Rehydrates search hits from the authoritative stores.

    Each hit is resolved by the lookup registered for its type tag.
    Hits with an unknown type, without an id, or that the store cannot
    find are dropped. Order of the remaining results follows hit order.
    """

    def __init__(
        self,
        object_service: ServerObjectService,
        resource_type_service: ResourceTypeService
    ):
        self.object_service = object_service
        self.resource_type_service = resource_type_service

        self._dispatch: Dict[str, Resolution] = {
            DocumentType.OBJECT.value: self._resolve_object,
            DocumentType.RESOURCE_TYPE.value: self._resolve_resource_type,
            DocumentType.ACCOUNT.value: self._resolve_account,
        }

    async def _resolve_object(self, document_id: str) -> Optional[ResolvedResult]:
        return await self.object_service.get_one(document_id)

    async def _resolve_resource_type(self, document_id: str) -> Optional[ResolvedResult]:
        return await self.resource_type_service.get_one(document_id)

    async def _resolve_account(self, document_id: str) -> Optional[ResolvedResult]:
        # Accounts are not stored; the hit id is the station id
        if not is_numeric_id(document_id):
            logger.warning(f"Dropping account hit with non-numeric id: {document_id}")
            return None
        return Account(id=int(document_id))

    async def _resolve_hit(self, hit: SearchHit) -> Optional[ResolvedResult]:
        if not hit.document_id:
            logger.debug("Dropping hit without id")
            return None

        resolution = self._dispatch.get(hit.document_type or "")
        if resolution is None:
            logger.debug(f"Dropping hit {hit.document_id} of unknown type {hit.document_type}")
            return None

        result = await resolution(hit.document_id)
        if result is None:
            logger.debug(f"{hit.document_type} {hit.document_id} not found in store")
        return result

    async def resolve(
        self,
        hits: List[SearchHit],
        original_search_text: str,
        total: int = 0
    ) -> SearchOutcome:
        """
        Resolve hits into domain objects.

        Args:
            hits: Hits in index order
            original_search_text: Search text as submitted by the caller
            total: Total reported by the index

        Returns:
            Outcome with resolved results in hit order; an exact object id
            match is appended when numeric search text resolved nothing
        """
        resolved = await asyncio.gather(*(self._resolve_hit(hit) for hit in hits))
        results: List[ResolvedResult] = [result for result in resolved if result is not None]

        search_text = clean_search_text(original_search_text)
        if not results and is_numeric_id(search_text):
            exact_match = await self.object_service.get_one(search_text)
            if exact_match is not None:
                logger.info(f"Exact object id match for {search_text}")
                results.append(exact_match)

        logger.debug(f"Resolved {len(results)} of {len(hits)} hits")
        return SearchOutcome(total_result_count=total, results=results)
