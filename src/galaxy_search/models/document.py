"""Search index records and the galaxy domain objects they resolve to."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field


class DocumentType(str, Enum):
    """Document type tags stored in the search index."""
    OBJECT = "Object"
    RESOURCE_TYPE = "ResourceType"
    ACCOUNT = "Account"


@dataclass(frozen=True)
class SearchHit:
    """
    Lightweight index record returned by the search index.

    Attributes:
        document_id: Identifier of the indexed entity (None if missing)
        document_type: Type tag of the indexed entity
        score: Relevance score assigned by the index
    """
    document_id: Optional[str]
    document_type: Optional[str]
    score: float = 0.0


@dataclass
class ServerObject:
    """Generic world object from the authoritative object store."""
    id: str
    object_name: Optional[str] = None
    basic_name: Optional[str] = None
    object_type: Optional[int] = None
    deleted: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PlayerCreatureObject(ServerObject):
    """Player character object."""
    station_id: Optional[int] = None


@dataclass
class ResourceType:
    """Resource type from the resource type store."""
    id: str
    resource_name: Optional[str] = None
    resource_class: Optional[str] = None
    attributes: Dict[str, int] = field(default_factory=dict)


@dataclass
class Account:
    """Account identified by its numeric station id."""
    id: int


@dataclass
class Guild:
    id: str
    name: Optional[str] = None
    abbreviation: Optional[str] = None
    members: List[str] = field(default_factory=list)


@dataclass
class City:
    id: str
    name: Optional[str] = None
    planet: Optional[str] = None
    citizens: List[str] = field(default_factory=list)


ResolvedResult = Union[ServerObject, PlayerCreatureObject, ResourceType, Account]
