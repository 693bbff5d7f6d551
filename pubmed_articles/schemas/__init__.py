"""Pydantic schemas for PubMed Articles MCP Server."""

from .tool_schemas import (
    # Result schemas
    ArticleRecord,
    PdfResolution,

    # Request schemas
    SearchKeywordsRequest,
    SearchAdvancedRequest,
    ArticleMetadataRequest,
    ArticlePdfRequest,
    PubMedRequest,
    SUPPORTED_METHODS,
    normalize_pmid,
)

__all__ = [
    "ArticleRecord",
    "PdfResolution",
    "SearchKeywordsRequest",
    "SearchAdvancedRequest",
    "ArticleMetadataRequest",
    "ArticlePdfRequest",
    "PubMedRequest",
    "SUPPORTED_METHODS",
    "normalize_pmid",
]
