"""
Configuration management for PubMed Articles MCP Server.

Handles environment variables, API endpoints, and request settings.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Central configuration for PubMed Articles MCP Server."""

    # Tool identification (sent to NCBI with every request)
    TOOL_NAME: str = os.getenv("TOOL_NAME", "pubmed-articles-mcp")
    TOOL_EMAIL: str = os.getenv("TOOL_EMAIL", "pubmed-articles-mcp@example.com")
    TOOL_VERSION: str = "1.0.0"

    @classmethod
    def get_user_agent(cls) -> str:
        """Get the identifying User-Agent string for outbound requests."""
        return f"{cls.TOOL_NAME}/{cls.TOOL_VERSION} (mailto:{cls.TOOL_EMAIL})"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # MCP transport
    MCP_TRANSPORT: str = os.getenv("MCP_TRANSPORT", "stdio")
    MCP_HOST: str = os.getenv("MCP_HOST", "0.0.0.0")
    MCP_PORT: int = int(os.getenv("MCP_PORT", "8000"))

    # API Base URLs
    EUTILITIES_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
    PUBMED_DATABASE: str = "pubmed"

    # Link templates
    PUBMED_ARTICLE_URL: str = "https://pubmed.ncbi.nlm.nih.gov/{pmid}/"
    PMC_PDF_URL: str = "https://www.ncbi.nlm.nih.gov/pmc/articles/{pmcid}/pdf/"

    # Request settings
    REQUEST_TIMEOUT: int = 30  # seconds

    # Default search settings
    DEFAULT_NUM_RESULTS: int = 10
    OPEN_START_DATE: str = "1800"
    OPEN_END_DATE: str = "3000"


# Export config instance
config = Config()
