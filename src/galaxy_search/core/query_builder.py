"""Composite relevance query construction."""

import logging
from typing import Any, Dict, List

from ..models.document import DocumentType
from ..models.query import CompositeQuery, SearchFilters
from ..utils.text_processing import clean_search_text

logger = logging.getLogger(__name__)

# Function score weights, multiplied into the base relevance
EXACT_ID_WEIGHT = 100
ACCOUNT_TYPE_WEIGHT = 30
STATION_ID_PRESENT_WEIGHT = 10

EXACT_PHRASE_BOOST = 100
DIS_MAX_TIE_BREAKER = 1.0

PHRASE_PREFIX_FIELDS = ['basicName^2', 'objectName^2', 'accountName^2', 'resourceName', '*']
FUZZY_FIELDS = ['accountName^2', 'resourceName', 'resourceClass', 'resourceClassId', '*']
IDENTIFIER_FIELDS = ['id^10', 'stationId^5', '*']

RESOURCE_ATTRIBUTE_FIELD_PREFIX = 'resourceAttributes'
RESOURCE_DEPLETION_FIELD = 'resourceDepletedTime'


def _score_functions(search_text: str) -> List[Dict[str, Any]]:
    return [
        {"filter": {"match": {"id": search_text}}, "weight": EXACT_ID_WEIGHT},
        {"filter": {"match": {"type": DocumentType.ACCOUNT.value}}, "weight": ACCOUNT_TYPE_WEIGHT},
        {"filter": {"exists": {"field": "stationId"}}, "weight": STATION_ID_PRESENT_WEIGHT},
    ]


def _range_query(field: str, gte: Any = None, lte: Any = None) -> Dict[str, Any]:
    """Build a range clause, emitting only the bounds that are set."""
    bounds: Dict[str, Any] = {}
    if gte is not None:
        bounds["gte"] = gte
    if lte is not None:
        bounds["lte"] = lte
    return {"range": {field: bounds}}


def _type_disjunction(types) -> Dict[str, Any]:
    return {
        "bool": {
            "should": [{"term": {"type": t}} for t in sorted(types)],
            "minimum_should_match": 1
        }
    }


def _text_disjunction(search_text: str) -> Dict[str, Any]:
    """
    Combine the competing text match strategies.

    The best matching strategy dominates the score while every other
    matching strategy is added in full (tie breaker 1.0).
    """
    return {
        "dis_max": {
            "queries": [
                {
                    "multi_match": {
                        "query": search_text,
                        "type": "phrase",
                        "analyzer": "keyword",
                        "boost": EXACT_PHRASE_BOOST
                    }
                },
                {
                    "multi_match": {
                        "query": search_text,
                        "type": "phrase_prefix",
                        "fields": list(PHRASE_PREFIX_FIELDS)
                    }
                },
                {
                    "multi_match": {
                        "query": search_text,
                        "fuzziness": "AUTO",
                        "fields": list(FUZZY_FIELDS)
                    }
                },
                {
                    "multi_match": {
                        "query": search_text,
                        "fields": list(IDENTIFIER_FIELDS)
                    }
                },
            ],
            "tie_breaker": DIS_MAX_TIE_BREAKER
        }
    }


def build_query(filters: SearchFilters) -> CompositeQuery:
    """
    Build the composite search query for the given filters.

    Args:
        filters: Structured search filters

    Returns:
        Function-score query wrapping a bool query with must, filter
        and should clauses
    """
    search_text = clean_search_text(filters.search_text)

    must: List[Dict[str, Any]] = []
    filter_clauses: List[Dict[str, Any]] = []
    should: List[Dict[str, Any]] = []

    # Nothing to search for: match nothing rather than everything
    if not search_text and filters.types is None:
        must.append({"match_none": {}})

    if filters.types is not None:
        must.append(_type_disjunction(filters.types))

    if search_text and not filters.search_text_is_raw_query:
        must.append(_text_disjunction(search_text))

    if filters.resource_attributes:
        for attribute in filters.resource_attributes:
            filter_clauses.append(_range_query(
                f"{RESOURCE_ATTRIBUTE_FIELD_PREFIX}.{attribute.key}",
                gte=attribute.gte,
                lte=attribute.lte
            ))

    if filters.resource_depletion_date is not None:
        filter_clauses.append(_range_query(
            RESOURCE_DEPLETION_FIELD,
            gte=filters.resource_depletion_date.gte,
            lte=filters.resource_depletion_date.lte
        ))

    body = {
        "function_score": {
            "query": {
                "bool": {
                    "must": must,
                    "filter": filter_clauses,
                    "should": should
                }
            },
            "functions": _score_functions(search_text),
            "boost_mode": "multiply"
        }
    }

    logger.debug(f"Built query with {len(must)} must and {len(filter_clauses)} filter clauses")
    return CompositeQuery(body=body)
