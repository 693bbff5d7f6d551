"""
PubMed Articles MCP Server

A FastMCP-based server exposing PubMed search, metadata lookup and PDF link
resolution as a single unified tool for LLM applications.

Run with: python -m pubmed_articles.server
Or: pubmed-articles-mcp
"""

from fastmcp import FastMCP
from typing import Annotated, Any
import logging

from pydantic import Field

from .config import Config
from .schemas.tool_schemas import SUPPORTED_METHODS
from .tools.dispatcher import dispatch, format_response

# Configure logging (stderr, so the stdio transport stays clean)
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastMCP server
mcp = FastMCP(
    name="pubmed-articles-mcp",
    instructions="""
    This MCP server provides access to PubMed, the largest biomedical literature
    database with over 35 million citations, through one tool: pubmed_articles.

    Choose the operation with the `method` parameter:
    - search_keywords: keyword search (requires `keywords`)
    - search_advanced: filtered search by term, title, author, journal and
      publication date range (at least one filter required)
    - get_article_metadata: detailed metadata for one PMID
    - get_article_pdf: PubMed Central PDF link for one PMID, when available

    Every call returns JSON. Failures are reported as {"error": "..."}.
    """
)


# =============================================================================
# Tools
# =============================================================================

# Arguments are accepted untyped and validated by the dispatcher, so bad values
# come back as {"error": ...}. The schema extras only describe the expected input.
MethodArg = Annotated[Any, Field(json_schema_extra={"type": "string", "enum": list(SUPPORTED_METHODS)})]
StringArg = Annotated[Any, Field(json_schema_extra={"type": "string"})]
CountArg = Annotated[Any, Field(json_schema_extra={"type": "integer", "minimum": 1})]
PmidArg = Annotated[Any, Field(json_schema_extra={"oneOf": [{"type": "string"}, {"type": "integer"}]})]


@mcp.tool()
async def pubmed_articles(
    method: MethodArg,
    keywords: StringArg = None,
    num_results: CountArg = Config.DEFAULT_NUM_RESULTS,
    pmid: PmidArg = None,
    term: StringArg = None,
    title: StringArg = None,
    author: StringArg = None,
    journal: StringArg = None,
    start_date: StringArg = None,
    end_date: StringArg = None
) -> str:
    """
    Unified tool for PubMed operations: search biomedical literature, retrieve
    article metadata, and locate full-text PDFs.

    Args:
        method: The operation to perform: "search_keywords", "search_advanced",
            "get_article_metadata" or "get_article_pdf"
        keywords: For search_keywords: query with keywords, medical terms, drug
            names or diseases. Multiple terms use implicit AND; PubMed operators
            OR, AND, NOT are supported.
        num_results: For search methods: maximum number of results (default 10,
            minimum 1). PubMed may return fewer.
        pmid: For get_article_metadata and get_article_pdf: PubMed ID, as a
            string or integer (e.g. "12345678" or 12345678)
        term: For search_advanced: general search term
        title: For search_advanced: search in article titles
        author: For search_advanced: author name (e.g. "Smith J")
        journal: For search_advanced: journal name or abbreviation
            (e.g. "Nature", "N Engl J Med")
        start_date: For search_advanced: start of publication date range,
            YYYY/MM/DD (e.g. "2020/01/01")
        end_date: For search_advanced: end of publication date range,
            YYYY/MM/DD (e.g. "2024/12/31")

    Examples:
        - method="search_keywords", keywords="CRISPR gene therapy", num_results=5
        - method="search_advanced", author="Zhang F", start_date="2020/01/01"
        - method="get_article_pdf", pmid=33301246
    """
    payload = await dispatch({
        "method": method,
        "keywords": keywords,
        "num_results": num_results,
        "pmid": pmid,
        "term": term,
        "title": title,
        "author": author,
        "journal": journal,
        "start_date": start_date,
        "end_date": end_date,
    })
    return format_response(payload)


# =============================================================================
# Resources
# =============================================================================

@mcp.resource("pubmed://status")
def get_server_status() -> str:
    """Get PubMed Articles MCP Server status and configuration."""
    return f"""
PubMed Articles MCP Server Status
=================================
Version: {Config.TOOL_VERSION}
User-Agent: {Config.get_user_agent()}
E-utilities: {Config.EUTILITIES_BASE_URL}
Request Timeout: {Config.REQUEST_TIMEOUT}s
Transport: {Config.MCP_TRANSPORT}

Available Tools (1):
- pubmed_articles: search_keywords, search_advanced, get_article_metadata, get_article_pdf
"""


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """Run the server with the configured transport."""
    if Config.MCP_TRANSPORT == "stdio":
        logger.info("Starting PubMed Articles MCP Server on stdio")
        mcp.run(transport="stdio")
    else:
        logger.info(
            f"Starting PubMed Articles MCP Server on {Config.MCP_HOST}:{Config.MCP_PORT} "
            f"({Config.MCP_TRANSPORT} transport)"
        )
        mcp.run(transport=Config.MCP_TRANSPORT, host=Config.MCP_HOST, port=Config.MCP_PORT)


if __name__ == "__main__":
    main()
