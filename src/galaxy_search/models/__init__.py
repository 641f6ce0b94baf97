"""Data models for galaxy search system."""

from .document import (
    Account,
    City,
    DocumentType,
    Guild,
    PlayerCreatureObject,
    ResolvedResult,
    ResourceType,
    SearchHit,
    ServerObject,
)
from .query import CompositeQuery, IntRange, SearchFilters, SearchFiltersModel, StringRange
from .result import IndexResponse, RecentLoginsResult, ResourceTypePage, SearchOutcome

__all__ = [
    "Account",
    "City",
    "CompositeQuery",
    "DocumentType",
    "Guild",
    "IndexResponse",
    "IntRange",
    "PlayerCreatureObject",
    "RecentLoginsResult",
    "ResolvedResult",
    "ResourceType",
    "ResourceTypePage",
    "SearchFilters",
    "SearchFiltersModel",
    "SearchHit",
    "SearchOutcome",
    "ServerObject",
    "StringRange",
]
