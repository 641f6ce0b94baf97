"""Utility modules for galaxy search."""

from .text_processing import clean_search_text, is_numeric_id, tagify
from .validators import validate_filters, validate_recent_logins_arguments
from .logging_config import setup_logging, StructuredLogger

__all__ = [
    "clean_search_text",
    "is_numeric_id",
    "tagify",
    "validate_filters",
    "validate_recent_logins_arguments",
    "setup_logging",
    "StructuredLogger",
]
