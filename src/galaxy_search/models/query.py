"""Search filter and composite query models."""

import copy
from typing import Any, Dict, List, Optional, Set
from dataclasses import dataclass
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


@dataclass
class IntRange:
    """Numeric range restriction on a keyed resource attribute."""
    key: str
    gte: Optional[int] = None
    lte: Optional[int] = None


@dataclass
class StringRange:
    """Range restriction with ISO-8601 string bounds."""
    gte: Optional[str] = None
    lte: Optional[str] = None


@dataclass
class SearchFilters:
    """
    Structured search filters.

    Attributes:
        search_text: Free text, or a raw query document when
            search_text_is_raw_query is set
        search_text_is_raw_query: Treat search_text as a raw JSON query fragment
        types: Document type tags to restrict to (None = no type restriction)
        resource_attributes: Per-attribute numeric ranges
        resource_depletion_date: Depletion timestamp range
        from_: Pagination offset
        size: Page size
    """
    search_text: str = ""
    search_text_is_raw_query: bool = False
    types: Optional[Set[str]] = None
    resource_attributes: Optional[List[IntRange]] = None
    resource_depletion_date: Optional[StringRange] = None
    from_: int = 0
    size: int = 25

    def __post_init__(self) -> None:
        """Validate pagination window."""
        if self.from_ < 0:
            raise ValueError("Pagination offset cannot be negative")
        if self.size < 0:
            raise ValueError("Page size cannot be negative")

    @property
    def trimmed_text(self) -> str:
        return (self.search_text or "").strip()


class IntRangeModel(BaseModel):
    key: str = Field(..., min_length=1, description="Resource attribute key")
    gte: Optional[int] = Field(None, description="Lower bound (inclusive)")
    lte: Optional[int] = Field(None, description="Upper bound (inclusive)")


class StringRangeModel(BaseModel):
    gte: Optional[str] = Field(None, description="Lower bound (ISO-8601)")
    lte: Optional[str] = Field(None, description="Upper bound (ISO-8601)")


class SearchFiltersModel(BaseModel):
    """Pydantic model for caller-facing search parameters."""

    model_config = ConfigDict(populate_by_name=True)

    search_text: str = Field("", alias="searchText", description="Search text")
    search_text_is_raw_query: bool = Field(
        False,
        validation_alias=AliasChoices("searchTextIsRawQuery", "searchTextIsEsQuery", "search_text_is_raw_query"),
        description="Treat search text as a raw query fragment",
    )
    from_: int = Field(0, ge=0, alias="from", description="Pagination offset")
    size: int = Field(25, ge=0, description="Page size")
    types: Optional[List[str]] = Field(None, description="Document type filters")
    resource_attributes: Optional[List[IntRangeModel]] = Field(
        None, alias="resourceAttributes", description="Resource attribute ranges"
    )
    resource_depletion_date: Optional[StringRangeModel] = Field(
        None, alias="resourceDepletionDate", description="Resource depletion date range"
    )

    @field_validator('types')
    @classmethod
    def validate_types(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Ensure type names are not blank."""
        if v is None:
            return v
        if any(not t or not t.strip() for t in v):
            raise ValueError('Type names cannot be empty or whitespace only')
        return [t.strip() for t in v]

    def to_filters(self) -> SearchFilters:
        """Convert to SearchFilters dataclass."""
        attributes = None
        if self.resource_attributes is not None:
            attributes = [IntRange(key=ra.key, gte=ra.gte, lte=ra.lte) for ra in self.resource_attributes]

        depletion = None
        if self.resource_depletion_date is not None:
            depletion = StringRange(
                gte=self.resource_depletion_date.gte,
                lte=self.resource_depletion_date.lte
            )

        return SearchFilters(
            search_text=self.search_text,
            search_text_is_raw_query=self.search_text_is_raw_query,
            types=set(self.types) if self.types is not None else None,
            resource_attributes=attributes,
            resource_depletion_date=depletion,
            from_=self.from_,
            size=self.size
        )


@dataclass(frozen=True)
class CompositeQuery:
    """
    Function-score query document sent to the search index.

    The body has the shape ``{"function_score": {"query": ..., "functions":
    [...], "boost_mode": "multiply"}}``. The body is copied on construction
    and accessors return copies, so the document cannot be changed through
    either side.
    """
    body: Dict[str, Any]

    def __post_init__(self):
        object.__setattr__(self, "body", copy.deepcopy(self.body))

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the query document."""
        return copy.deepcopy(self.body)

    @property
    def functions(self) -> List[Dict[str, Any]]:
        return self.to_dict()["function_score"].get("functions", [])

    @property
    def boost_mode(self) -> Optional[str]:
        return self.body["function_score"].get("boost_mode")

    @property
    def inner_query(self) -> Dict[str, Any]:
        return self.to_dict()["function_score"].get("query", {})

    @property
    def must(self) -> List[Dict[str, Any]]:
        return self.inner_query.get("bool", {}).get("must", [])

    @property
    def filter(self) -> List[Dict[str, Any]]:
        return self.inner_query.get("bool", {}).get("filter", [])

    @property
    def should(self) -> List[Dict[str, Any]]:
        return self.inner_query.get("bool", {}).get("should", [])
