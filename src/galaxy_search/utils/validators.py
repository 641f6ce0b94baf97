"""Input validation utilities."""

from ..models.query import SearchFilters
from ..core.exceptions import ValidationError

MAX_RECENT_LOGINS_LIMIT = 1000


def validate_filters(filters: SearchFilters) -> None:
    """
    Validate search filters object.

    Args:
        filters: Filters to validate

    Raises:
        ValidationError: If filters are invalid
    """
    try:
        if not isinstance(filters, SearchFilters):
            raise ValidationError("Invalid filters type")

        if filters.search_text is None:
            raise ValidationError("Search text is required")

        if filters.from_ < 0:
            raise ValidationError("Pagination offset cannot be negative")

        if filters.size < 0:
            raise ValidationError("Page size cannot be negative")

        # Validate type names if provided
        if filters.types is not None:
            for type_name in filters.types:
                if not type_name or not type_name.strip():
                    raise ValidationError("Empty type name in filter")

        # Validate resource attribute keys if provided
        if filters.resource_attributes:
            for attribute in filters.resource_attributes:
                if not attribute.key or not attribute.key.strip():
                    raise ValidationError("Empty resource attribute key in filter")

    except Exception as e:
        if isinstance(e, ValidationError):
            raise
        raise ValidationError(f"Filter validation failed: {str(e)}")


def validate_recent_logins_arguments(limit: int, offset: int, duration_seconds: int) -> None:
    """
    Validate recent logins arguments.

    Raises:
        ValidationError: If any argument is out of range
    """
    if limit < 0 or limit > MAX_RECENT_LOGINS_LIMIT:
        raise ValidationError("Bad `limit` argument")

    if offset < 0:
        raise ValidationError("Bad `offset` argument")

    if duration_seconds < 0:
        raise ValidationError("Bad `durationSeconds` argument")
