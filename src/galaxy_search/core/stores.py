"""Interfaces of the authoritative stores consulted during resolution."""

from typing import List, Mapping, Optional, Protocol, Sequence

from ..models.document import City, Guild, ResourceType, ServerObject


class ServerObjectService(Protocol):
    """Generic world object store. Unknown ids are omitted, never errors."""

    async def get_one(self, object_id: str) -> Optional[ServerObject]:
        ...

    async def get_many(
        self,
        object_ids: Optional[Sequence[str]] = None,
        object_types: Optional[Sequence[int]] = None,
        limit: int = 50,
        exclude_deleted: bool = False,
        loads_with_ids: Optional[Sequence[str]] = None,
        search_text: Optional[str] = None
    ) -> List[ServerObject]:
        ...


class ResourceTypeService(Protocol):

    async def get_one(self, resource_id: str) -> Optional[ResourceType]:
        ...

    async def get_many(self, limit: int = 50, offset: int = 0) -> List[ResourceType]:
        ...

    async def count_many(self, limit: int = 50, offset: int = 0) -> int:
        ...


class GuildService(Protocol):

    async def get_all_guilds(self) -> Mapping[str, Guild]:
        ...

    async def get_guild(self, guild_id: str) -> Optional[Guild]:
        ...


class CityService(Protocol):

    async def get_all_cities(self) -> Mapping[str, City]:
        ...

    async def get_city(self, city_id: str) -> Optional[City]:
        ...


class PlayerCreatureObjectService(Protocol):

    async def get_recently_logged_in_characters(self, duration_seconds: int) -> List[str]:
        """Return object ids of characters that logged in within the duration."""
        ...

