"""Operations behind the pubmed_articles MCP tool."""

from .search_tools import (
    search_keywords,
    search_advanced,
)
from .retrieval_tools import (
    get_article_metadata,
    get_article_pdf,
)
from .dispatcher import dispatch, format_response

__all__ = [
    # Search tools
    "search_keywords",
    "search_advanced",
    # Retrieval tools
    "get_article_metadata",
    "get_article_pdf",
    # Dispatcher
    "dispatch",
    "format_response",
]
