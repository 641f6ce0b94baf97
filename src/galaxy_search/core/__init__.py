"""Core engine components for galaxy search."""

from .exceptions import (
    GalaxySearchError,
    ValidationError,
    MalformedRawQuery,
    SearchError,
    IndexUnavailable,
    QueryRejected,
    BatchChunkFailed,
    ConfigurationError
)
from .query_builder import build_query
from .raw_query import overlay, apply_raw_query
from .executor import SearchExecutor
from .resolver import ResultResolver
from .batch import chunked, resolve_batch

__all__ = [
    "build_query",
    "overlay",
    "apply_raw_query",
    "SearchExecutor",
    "ResultResolver",
    "chunked",
    "resolve_batch",
    "GalaxySearchError",
    "ValidationError",
    "MalformedRawQuery",
    "SearchError",
    "IndexUnavailable",
    "QueryRejected",
    "BatchChunkFailed",
    "ConfigurationError"
]
