"""Custom exceptions for galaxy search system."""

from typing import Optional


class GalaxySearchError(Exception):
    """Base exception for galaxy search operations."""
    pass


class ValidationError(GalaxySearchError):
    """Exception raised during input validation."""
    pass


class MalformedRawQuery(GalaxySearchError):
    """Exception raised when raw query text cannot be parsed."""
    pass


class SearchError(GalaxySearchError):
    """Exception raised during search index operations."""
    pass


class IndexUnavailable(SearchError):
    """Exception raised when the search index cannot be reached."""
    pass


class QueryRejected(SearchError):
    """Exception raised when the search index rejects a query."""
    pass


class BatchChunkFailed(GalaxySearchError):
    """Exception raised when a chunk lookup of a batch fan-out fails."""

    def __init__(self, message: str, chunk_index: Optional[int] = None):
        super().__init__(message)
        self.chunk_index = chunk_index


class ConfigurationError(GalaxySearchError):
    """Exception raised for configuration issues."""
    pass
