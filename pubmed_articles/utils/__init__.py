"""Utility modules for PubMed Articles MCP Server."""

from .error_handler import (
    PubMedError,
    ValidationError,
    UnsupportedOperationError,
    UpstreamError,
    ExtractionError,
)
from .outcome import Outcome, OutcomeStatus
from .query_builder import QueryBuilder
from .article_parser import parse_pubmed_article

__all__ = [
    "QueryBuilder",
    "Outcome",
    "OutcomeStatus",
    "parse_pubmed_article",
    "PubMedError",
    "ValidationError",
    "UnsupportedOperationError",
    "UpstreamError",
    "ExtractionError",
]
