"""Pytest configuration and shared fixtures."""

import asyncio
import pytest
from typing import Any, Dict, List, Mapping, Optional, Sequence

from galaxy_search.api.service import GalaxySearchService
from galaxy_search.models.document import City, Guild, PlayerCreatureObject, ResourceType, ServerObject
from galaxy_search.utils.text_processing import PLAYER_CREATURE_TAG


class FakeObjectService:
    """In-memory object store recording every lookup."""

    def __init__(self, objects: Dict[str, ServerObject]):
        self.objects = objects
        self.get_one_calls: List[str] = []
        self.get_many_calls: List[Dict[str, Any]] = []

    async def get_one(self, object_id: str) -> Optional[ServerObject]:
        self.get_one_calls.append(object_id)
        await asyncio.sleep(0)
        return self.objects.get(object_id)

    async def get_many(
        self,
        object_ids: Optional[Sequence[str]] = None,
        object_types: Optional[Sequence[int]] = None,
        limit: int = 50,
        exclude_deleted: bool = False,
        loads_with_ids: Optional[Sequence[str]] = None,
        search_text: Optional[str] = None
    ) -> List[ServerObject]:
        self.get_many_calls.append({
            "object_ids": list(object_ids) if object_ids is not None else None,
            "object_types": list(object_types) if object_types is not None else None,
            "limit": limit,
            "exclude_deleted": exclude_deleted,
        })
        await asyncio.sleep(0)
        ids = object_ids if object_ids is not None else list(self.objects)
        found = [self.objects[i] for i in ids if i in self.objects]
        if object_types is not None:
            found = [o for o in found if o.object_type in object_types]
        if exclude_deleted:
            found = [o for o in found if not o.deleted]
        return found[:limit]


class FakeResourceTypeService:

    def __init__(self, resources: Dict[str, ResourceType]):
        self.resources = resources
        self.get_one_calls: List[str] = []

    async def get_one(self, resource_id: str) -> Optional[ResourceType]:
        self.get_one_calls.append(resource_id)
        await asyncio.sleep(0)
        return self.resources.get(resource_id)

    async def get_many(self, limit: int = 50, offset: int = 0) -> List[ResourceType]:
        return list(self.resources.values())[offset:offset + limit]

    async def count_many(self, limit: int = 50, offset: int = 0) -> int:
        return len(self.resources)


class FakeGuildService:

    def __init__(self, guilds: Dict[str, Guild]):
        self.guilds = guilds

    async def get_all_guilds(self) -> Mapping[str, Guild]:
        return self.guilds

    async def get_guild(self, guild_id: str) -> Optional[Guild]:
        return self.guilds.get(guild_id)


class FakeCityService:

    def __init__(self, cities: Dict[str, City]):
        self.cities = cities

    async def get_all_cities(self) -> Mapping[str, City]:
        return self.cities

    async def get_city(self, city_id: str) -> Optional[City]:
        return self.cities.get(city_id)


class FakePlayerCreatureService:

    def __init__(self, character_ids: List[str]):
        self.character_ids = character_ids
        self.durations: List[int] = []

    async def get_recently_logged_in_characters(self, duration_seconds: int) -> List[str]:
        self.durations.append(duration_seconds)
        return list(self.character_ids)


class FakeIndexClient:
    """Index client returning a canned response and recording requests."""

    def __init__(self, response: Optional[Mapping[str, Any]] = None, error: Optional[Exception] = None):
        self.response = response if response is not None else index_response([])
        self.error = error
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    async def search(self, index: str, from_: int, size: int, query: Dict[str, Any]) -> Mapping[str, Any]:
        self.requests.append({"index": index, "from_": from_, "size": size, "query": query})
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


def index_response(sources: List[Dict[str, Any]], total: Any = None) -> Dict[str, Any]:
    """Build an Elasticsearch-style response from hit sources."""
    hits = [
        {"_id": f"doc-{i}", "_score": float(len(sources) - i), "_source": source}
        for i, source in enumerate(sources)
    ]
    return {
        "hits": {
            "total": {"value": len(sources), "relation": "eq"} if total is None else total,
            "hits": hits
        }
    }


@pytest.fixture
def sample_objects() -> Dict[str, ServerObject]:
    """Create sample world objects."""
    return {
        "5": ServerObject(id="5", object_name="Mos Eisley Cantina", basic_name="cantina"),
        "12345": ServerObject(id="12345", object_name="Krayt Dragon Skull", basic_name="skull"),
        "7001": PlayerCreatureObject(id="7001", object_name="Han", object_type=PLAYER_CREATURE_TAG, station_id=11),
        "7002": PlayerCreatureObject(id="7002", object_name="Leia", object_type=PLAYER_CREATURE_TAG, station_id=12),
        "7003": ServerObject(id="7003", object_name="Landspeeder", object_type=0x494E534F),
    }


@pytest.fixture
def sample_resources() -> Dict[str, ResourceType]:
    """Create sample resource types."""
    return {
        "9": ResourceType(id="9", resource_name="Duralyn", resource_class="steel_duralyn", attributes={"OQ": 900}),
        "10": ResourceType(id="10", resource_name="Orvano", resource_class="copper", attributes={"OQ": 450}),
    }


@pytest.fixture
def object_service(sample_objects) -> FakeObjectService:
    return FakeObjectService(sample_objects)


@pytest.fixture
def resource_type_service(sample_resources) -> FakeResourceTypeService:
    return FakeResourceTypeService(sample_resources)


@pytest.fixture
def index_client() -> FakeIndexClient:
    return FakeIndexClient()


@pytest.fixture
async def search_service(object_service, resource_type_service, index_client):
    """Create and initialize a search service for testing."""
    async with GalaxySearchService.create(
        object_service,
        resource_type_service,
        index_client,
        guild_service=FakeGuildService({"g1": Guild(id="g1", name="Rebel Alliance", abbreviation="RA")}),
        city_service=FakeCityService({"c1": City(id="c1", name="Theed", planet="naboo")}),
        player_creature_service=FakePlayerCreatureService(["7001", "7002", "7003", "404"]),
        log_level="WARNING"  # Reduce test output
    ) as service:
        yield service
