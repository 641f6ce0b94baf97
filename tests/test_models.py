"""Test data models and validation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from galaxy_search.core.exceptions import ValidationError
from galaxy_search.models.document import Account, ResourceType, ServerObject
from galaxy_search.models.query import IntRange, SearchFilters, SearchFiltersModel, StringRange
from galaxy_search.models.result import SearchOutcome
from galaxy_search.utils.text_processing import clean_search_text, is_numeric_id, tagify
from galaxy_search.utils.validators import validate_filters, validate_recent_logins_arguments


class TestSearchFilters:
    """Test SearchFilters model."""

    def test_defaults(self):
        """Test default pagination window."""
        filters = SearchFilters(search_text=" cantina ")

        assert filters.from_ == 0
        assert filters.size == 25
        assert filters.types is None
        assert filters.trimmed_text == "cantina"

    def test_negative_offset(self):
        with pytest.raises(ValueError, match="Pagination offset cannot be negative"):
            SearchFilters(search_text="x", from_=-1)

    def test_negative_size(self):
        with pytest.raises(ValueError, match="Page size cannot be negative"):
            SearchFilters(search_text="x", size=-5)


class TestSearchFiltersModel:
    """Test SearchFiltersModel pydantic validation."""

    def test_camel_case_parameters(self):
        """Test caller-facing parameter names convert to filters."""
        model = SearchFiltersModel(**{
            "searchText": "steel",
            "searchTextIsEsQuery": False,
            "from": 50,
            "size": 10,
            "types": ["ResourceType"],
            "resourceAttributes": [{"key": "OQ", "gte": 900}],
            "resourceDepletionDate": {"lte": "2024-06-01T00:00:00Z"},
        })

        filters = model.to_filters()
        assert filters == SearchFilters(
            search_text="steel",
            search_text_is_raw_query=False,
            types={"ResourceType"},
            resource_attributes=[IntRange(key="OQ", gte=900)],
            resource_depletion_date=StringRange(lte="2024-06-01T00:00:00Z"),
            from_=50,
            size=10
        )

    def test_raw_query_flag_alias(self):
        model = SearchFiltersModel(searchText='{"match_all": {}}', searchTextIsRawQuery=True)

        assert model.to_filters().search_text_is_raw_query is True

    def test_defaults(self):
        filters = SearchFiltersModel(searchText="").to_filters()

        assert filters.from_ == 0
        assert filters.size == 25
        assert filters.types is None

    def test_negative_size_rejected(self):
        with pytest.raises(PydanticValidationError):
            SearchFiltersModel(searchText="x", size=-1)

    def test_blank_type_rejected(self):
        with pytest.raises(PydanticValidationError, match="Type names cannot be empty"):
            SearchFiltersModel(searchText="x", types=["Object", "  "])

    def test_blank_attribute_key_rejected(self):
        with pytest.raises(PydanticValidationError):
            SearchFiltersModel(searchText="x", resourceAttributes=[{"key": ""}])


class TestSearchOutcome:
    """Test SearchOutcome model."""

    def test_to_dict(self):
        outcome = SearchOutcome(
            total_result_count=3,
            results=[ServerObject(id="5", object_name="Cantina"), Account(id=42)]
        )

        data = outcome.to_dict()

        assert data["totalResultCount"] == 3
        assert data["results"][0]["type"] == "ServerObject"
        assert data["results"][0]["object_name"] == "Cantina"
        assert data["results"][1] == {"type": "Account", "id": 42}

    def test_negative_total(self):
        with pytest.raises(ValueError):
            SearchOutcome(total_result_count=-1)

    def test_empty(self):
        outcome = SearchOutcome()

        assert outcome.total_result_count == 0
        assert outcome.results == []


class TestValidators:
    """Test input validators."""

    def test_valid_filters(self):
        validate_filters(SearchFilters(
            search_text="x",
            types={"Object"},
            resource_attributes=[IntRange(key="OQ", gte=1)]
        ))

    def test_blank_type(self):
        with pytest.raises(ValidationError, match="Empty type name"):
            validate_filters(SearchFilters(search_text="x", types={"Object", ""}))

    def test_blank_attribute_key(self):
        with pytest.raises(ValidationError, match="Empty resource attribute key"):
            validate_filters(SearchFilters(search_text="x", resource_attributes=[IntRange(key=" ")]))

    def test_invalid_filters_type(self):
        with pytest.raises(ValidationError, match="Invalid filters type"):
            validate_filters({"search_text": "x"})  # type: ignore

    def test_paging_changed_after_construction(self):
        """Test paging made negative after construction is still rejected."""
        filters = SearchFilters(search_text="x")
        filters.from_ = -1

        with pytest.raises(ValidationError, match="Pagination offset cannot be negative"):
            validate_filters(filters)

    @pytest.mark.parametrize("limit,offset,duration", [(1001, 0, 600), (-1, 0, 600), (10, -1, 600), (10, 0, -1)])
    def test_recent_logins_arguments(self, limit, offset, duration):
        with pytest.raises(ValidationError):
            validate_recent_logins_arguments(limit, offset, duration)

    def test_recent_logins_limit_bounds(self):
        validate_recent_logins_arguments(0, 0, 0)
        validate_recent_logins_arguments(1000, 0, 600)


class TestTextProcessing:
    """Test text helpers."""

    def test_clean_search_text(self):
        assert clean_search_text("  Han Solo \n") == "Han Solo"
        assert clean_search_text(None) == ""  # type: ignore

    @pytest.mark.parametrize("text,expected", [
        ("12345", True),
        (" 12345 ", True),
        ("12a45", False),
        ("abc", False),
        ("", False),
        ("-5", False),
        ("\u0661\u0662\u0663", False),
        ("\uff11\uff12", False),
    ])
    def test_is_numeric_id(self, text, expected):
        assert is_numeric_id(text) is expected

    def test_tagify(self):
        assert tagify("CREO") == 0x4352454F

    def test_tagify_invalid(self):
        with pytest.raises(ValueError):
            tagify("CRE")


def test_resource_type_defaults():
    resource = ResourceType(id="9")

    assert resource.attributes == {}
