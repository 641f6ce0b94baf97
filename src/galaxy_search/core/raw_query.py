"""Overlay of caller-supplied raw query fragments onto built queries."""

import copy
import json
import logging
from typing import Any, Dict

from ..models.query import CompositeQuery, SearchFilters
from ..utils.text_processing import clean_search_text
from .exceptions import MalformedRawQuery

logger = logging.getLogger(__name__)

# Fragments with this top-level key compete for score instead of replacing the query
SHOULD_MERGE_KEY = "multi_match"


def merge_with_concat(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge source into a copy of target.

    Lists present on both sides are concatenated, dicts are merged
    recursively and any other source value overwrites the target value.

    Args:
        target: Base document
        source: Overlay document

    Returns:
        New merged document (neither input is modified)
    """
    merged = copy.deepcopy(target)
    for key, value in source.items():
        existing = merged.get(key)
        if isinstance(existing, list) and isinstance(value, list):
            merged[key] = existing + copy.deepcopy(value)
        elif isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = merge_with_concat(existing, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_raw_query(raw_query_text: str) -> Dict[str, Any]:
    """
    Parse raw query text as a JSON query fragment.

    Raises:
        MalformedRawQuery: If the text is not a JSON object
    """
    try:
        fragment = json.loads(raw_query_text)
    except (TypeError, ValueError) as e:
        raise MalformedRawQuery(f"Raw query is not valid JSON: {str(e)}") from e

    if not isinstance(fragment, dict):
        raise MalformedRawQuery("Raw query must be a JSON object")

    return fragment


def overlay(query: CompositeQuery, raw_query_text: str) -> CompositeQuery:
    """
    Merge a raw query fragment into a built query.

    A ``multi_match`` fragment is appended to the inner bool query's
    should clauses. Any other fragment replaces the inner query; the
    score functions still apply on top of it.

    Args:
        query: Built composite query
        raw_query_text: JSON query fragment

    Returns:
        New composite query

    Raises:
        MalformedRawQuery: If the fragment cannot be parsed
    """
    fragment = parse_raw_query(raw_query_text)

    if SHOULD_MERGE_KEY in fragment:
        body = merge_with_concat(
            query.body,
            {"function_score": {"query": {"bool": {"should": [fragment]}}}}
        )
        logger.debug("Raw query merged as should clause")
    else:
        body = query.to_dict()
        body["function_score"]["query"] = fragment
        logger.debug("Raw query replaced inner query")

    return CompositeQuery(body=body)


def apply_raw_query(query: CompositeQuery, filters: SearchFilters) -> CompositeQuery:
    """Apply the overlay when the filters carry a non-empty raw query."""
    search_text = clean_search_text(filters.search_text)
    if not filters.search_text_is_raw_query or not search_text:
        return query
    return overlay(query, search_text)
