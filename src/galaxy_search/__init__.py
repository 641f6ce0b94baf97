"""
Galaxy Search

Relevance-ranked full-text search over the galaxy object graph (objects,
resource types, accounts). Builds weighted index queries from structured
filters and resolves hits back into domain objects from the authoritative
stores.
"""

from .api.service import GalaxySearchService
from .models.document import Account, DocumentType, PlayerCreatureObject, ResourceType, SearchHit, ServerObject
from .models.query import CompositeQuery, IntRange, SearchFilters, StringRange
from .models.result import SearchOutcome
from .core.index_client import ElasticsearchIndexClient

__version__ = "1.0.0"

__all__ = [
    "GalaxySearchService",
    "ElasticsearchIndexClient",
    "Account",
    "CompositeQuery",
    "DocumentType",
    "IntRange",
    "PlayerCreatureObject",
    "ResourceType",
    "SearchFilters",
    "SearchHit",
    "SearchOutcome",
    "ServerObject",
    "StringRange",
]
