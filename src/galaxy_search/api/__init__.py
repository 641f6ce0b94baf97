"""Service interface for galaxy search."""

from .service import GalaxySearchService

__all__ = ["GalaxySearchService"]
