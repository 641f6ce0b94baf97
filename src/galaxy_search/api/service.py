"""High-level API service for galaxy search."""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence
from contextlib import asynccontextmanager

from ..core.batch import resolve_batch
from ..core.exceptions import ConfigurationError, GalaxySearchError, ValidationError
from ..core.executor import SearchExecutor
from ..core.index_client import IndexClient
from ..core.query_builder import build_query
from ..core.raw_query import apply_raw_query
from ..core.resolver import ResultResolver
from ..core.stores import (
    CityService,
    GuildService,
    PlayerCreatureObjectService,
    ResourceTypeService,
    ServerObjectService,
)
from ..models.document import Account, City, Guild, ResourceType, ServerObject
from ..models.query import IntRange, SearchFilters, StringRange
from ..models.result import RecentLoginsResult, ResourceTypePage, SearchOutcome
from ..utils.logging_config import StructuredLogger, setup_logging
from ..utils.text_processing import PLAYER_CREATURE_TAG, is_numeric_id
from ..utils.validators import validate_filters, validate_recent_logins_arguments

logger = logging.getLogger(__name__)


class GalaxySearchService:
    """
    High-level service interface for galaxy search operations.

    Builds relevance queries from structured filters, runs them against
    the search index and resolves hits from the authoritative stores.
    Also exposes the direct store lookups that sit next to search.
    """

    def __init__(
        self,
        object_service: ServerObjectService,
        resource_type_service: ResourceTypeService,
        index_client: IndexClient,
        guild_service: Optional[GuildService] = None,
        city_service: Optional[CityService] = None,
        player_creature_service: Optional[PlayerCreatureObjectService] = None,
        enable_text_search: bool = True,
        index_name: str = "galaxy-search",
        batch_chunk_size: int = 1000,
        batch_concurrency: int = 10,
        log_level: str = "INFO"
    ):
        """
        Initialize galaxy search service.

        Args:
            object_service: Generic object store
            resource_type_service: Resource type store
            index_client: Search index client
            guild_service: Guild store
            city_service: City store
            player_creature_service: Player character login store
            enable_text_search: Whether text search is enabled
            index_name: Name of the search index
            batch_chunk_size: Ids per store lookup in batch resolution
            batch_concurrency: Maximum concurrent store lookups in batch resolution
            log_level: Logging level
        """
        # Setup logging
        setup_logging(level=log_level)

        self.object_service = object_service
        self.resource_type_service = resource_type_service
        self.guild_service = guild_service
        self.city_service = city_service
        self.player_creature_service = player_creature_service

        self.enable_text_search = enable_text_search
        self.batch_chunk_size = batch_chunk_size
        self.batch_concurrency = batch_concurrency

        self.index_client = index_client
        self.executor = SearchExecutor(index_client, index_name)
        self.resolver = ResultResolver(object_service, resource_type_service)

        self._log = StructuredLogger(__name__)
        self._initialized = False
        logger.info("Galaxy search service initialized")

    async def initialize(self) -> None:
        """Mark the service ready for requests."""
        if self.batch_chunk_size <= 0 or self.batch_concurrency <= 0:
            raise ConfigurationError("Batch chunk size and concurrency must be positive")

        self._initialized = True
        logger.info("Service initialization complete")

    async def search(self, filters: SearchFilters) -> SearchOutcome:
        """
        Search the index and resolve the hits.

        Args:
            filters: Structured search filters

        Returns:
            Resolved outcome; empty when text search is disabled

        Raises:
            ValidationError: If filters are invalid
            MalformedRawQuery: If a raw query cannot be parsed
            IndexUnavailable: If the index cannot be reached
            QueryRejected: If the index rejects the query
        """
        self._check_initialized()
        validate_filters(filters)

        if not self.enable_text_search:
            logger.debug("Text search disabled, returning empty outcome")
            return SearchOutcome(total_result_count=0, results=[])

        log = self._log.with_context(
            search_text=filters.trimmed_text,
            from_=filters.from_,
            size=filters.size
        )
        start_time = asyncio.get_running_loop().time()

        try:
            query = apply_raw_query(build_query(filters), filters)
            response = await self.executor.execute(query, filters.from_, filters.size)
            outcome = await self.resolver.resolve(
                response.hits, filters.search_text, total=response.total
            )

        except GalaxySearchError as e:
            log.error(f"Search failed: {str(e)}")
            raise

        search_time = asyncio.get_running_loop().time() - start_time
        log.info(f"Search completed: {len(outcome.results)} results in {search_time:.3f}s")
        return outcome

    async def search_text(
        self,
        text: str,
        is_raw_query: bool = False,
        types: Optional[List[str]] = None,
        resource_attributes: Optional[List[Dict[str, Any]]] = None,
        resource_depletion_date: Optional[Dict[str, str]] = None,
        from_: int = 0,
        size: int = 25
    ) -> SearchOutcome:
        """
        Convenience method for searching with plain arguments.

        Args:
            text: Search text or raw query
            is_raw_query: Treat text as a raw query fragment
            types: Optional document type filters
            resource_attributes: Optional ``{"key", "gte", "lte"}`` ranges
            resource_depletion_date: Optional ``{"gte", "lte"}`` range
            from_: Pagination offset
            size: Page size

        Returns:
            Resolved search outcome

        Raises:
            ValidationError: If the arguments do not form valid filters
        """
        try:
            filters = SearchFilters(
                search_text=text,
                search_text_is_raw_query=is_raw_query,
                types=set(types) if types is not None else None,
                resource_attributes=[IntRange(**ra) for ra in resource_attributes]
                if resource_attributes is not None else None,
                resource_depletion_date=StringRange(**resource_depletion_date)
                if resource_depletion_date is not None else None,
                from_=from_,
                size=size
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid search arguments: {str(e)}") from e

        return await self.search(filters)

    async def object(self, object_id: str) -> Optional[ServerObject]:
        return await self.object_service.get_one(object_id)

    async def objects(
        self,
        limit: int = 50,
        exclude_deleted: bool = False,
        object_ids: Optional[Sequence[str]] = None,
        loads_with_ids: Optional[Sequence[str]] = None,
        search_text: Optional[str] = None
    ) -> List[ServerObject]:
        return await self.object_service.get_many(
            object_ids=object_ids,
            limit=limit,
            exclude_deleted=exclude_deleted,
            loads_with_ids=loads_with_ids,
            search_text=search_text
        )

    def account(self, station_id: str) -> Account:
        """Build an account from its station id."""
        if not is_numeric_id(station_id):
            raise ValidationError(f"Station id must be numeric: {station_id!r}")
        return Account(id=int(station_id))

    async def guilds(self) -> List[Guild]:
        guilds = await self._require(self.guild_service, "guild_service").get_all_guilds()
        return list(guilds.values())

    async def guild(self, guild_id: str) -> Optional[Guild]:
        return await self._require(self.guild_service, "guild_service").get_guild(guild_id)

    async def cities(self) -> List[City]:
        cities = await self._require(self.city_service, "city_service").get_all_cities()
        return list(cities.values())

    async def city(self, city_id: str) -> Optional[City]:
        return await self._require(self.city_service, "city_service").get_city(city_id)

    async def resources(self, limit: int = 50, offset: int = 0) -> ResourceTypePage:
        """Fetch a page of resource types with the total count."""
        count, results = await asyncio.gather(
            self.resource_type_service.count_many(limit=limit, offset=offset),
            self.resource_type_service.get_many(limit=limit, offset=offset)
        )
        return ResourceTypePage(total_results=count, results=results)

    async def resource(self, resource_id: str) -> Optional[ResourceType]:
        return await self.resource_type_service.get_one(resource_id)

    async def recent_logins(
        self,
        limit: int = 1000,
        offset: int = 0,
        duration_seconds: int = 10 * 60
    ) -> RecentLoginsResult:
        """
        Fetch characters that logged in recently.

        Character ids are resolved in bounded concurrent chunks, so the
        result order follows chunk completion rather than login order.

        Args:
            limit: Maximum characters to return (0-1000)
            offset: Offset into the login list
            duration_seconds: Look-back window

        Returns:
            Total login count and the resolved page of characters

        Raises:
            ValidationError: If arguments are out of range
            BatchChunkFailed: If any chunk lookup fails
        """
        self._check_initialized()
        validate_recent_logins_arguments(limit, offset, duration_seconds)

        store = self._require(self.player_creature_service, "player_creature_service")
        character_ids = await store.get_recently_logged_in_characters(duration_seconds)
        page = [str(character_id) for character_id in character_ids[offset:offset + limit]]

        async def lookup(chunk: List[str], type_filter: Optional[Sequence[int]]) -> List[ServerObject]:
            return await self.object_service.get_many(
                object_ids=chunk,
                object_types=type_filter,
                limit=len(chunk)
            )

        results = await resolve_batch(
            lookup,
            page,
            chunk_size=self.batch_chunk_size,
            concurrency_limit=self.batch_concurrency,
            type_filter=[PLAYER_CREATURE_TAG]
        )

        logger.info(f"Recent logins: {len(results)} of {len(character_ids)} characters resolved")
        return RecentLoginsResult(total_results=len(character_ids), results=results)

    async def health_check(self) -> Dict[str, Any]:
        """Report service readiness."""
        if not self._initialized:
            return {
                'status': 'not_initialized',
                'message': 'Service not initialized'
            }

        return {
            'status': 'healthy',
            'text_search_enabled': self.enable_text_search,
            'index_name': self.executor.index_name
        }

    def _require(self, store: Optional[Any], name: str) -> Any:
        if store is None:
            raise ConfigurationError(f"Service was created without {name}")
        return store

    def _check_initialized(self) -> None:
        """Check if service is properly initialized."""
        if not self._initialized:
            raise ConfigurationError("Service not initialized. Call initialize() first.")

    async def close(self) -> None:
        """Clean up resources and close the service."""
        close = getattr(self.index_client, "close", None)
        if close is not None:
            await close()
        self._initialized = False
        logger.info("Service closed successfully")

    @classmethod
    @asynccontextmanager
    async def create(cls, *args, **kwargs) -> AsyncIterator['GalaxySearchService']:
        """
        Create and manage service lifecycle with context manager.

        Yields:
            Initialized galaxy search service
        """
        service = cls(*args, **kwargs)

        try:
            await service.initialize()
            yield service
        finally:
            await service.close()
