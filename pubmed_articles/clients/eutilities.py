"""
NCBI E-Utilities client for PubMed Articles MCP Server.

Provides the two E-utilities endpoints used by the gateway:
- ESearch: Text-based database search returning ordered PMIDs
- EFetch: Full record download for one PMID
"""

import xml.etree.ElementTree as ET
from typing import List, Optional
import logging

import httpx

from .base import BaseClient
from ..config import Config
from ..utils.error_handler import UpstreamError

logger = logging.getLogger(__name__)


class EUtilitiesClient(BaseClient):
    """
    Client for NCBI E-Utilities API.

    Base URL: https://eutils.ncbi.nlm.nih.gov/entrez/eutils
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize E-Utilities client."""
        super().__init__(
            base_url=Config.EUTILITIES_BASE_URL,
            timeout=Config.REQUEST_TIMEOUT,
            transport=transport
        )

    async def search(
        self,
        query: str,
        retmax: int = Config.DEFAULT_NUM_RESULTS,
        db: str = Config.PUBMED_DATABASE
    ) -> List[str]:
        """
        Search a database using ESearch.

        Args:
            query: Search query in E-utilities syntax
            retmax: Maximum number of IDs to return
            db: Database to search

        Returns:
            Ordered list of IDs

        Raises:
            UpstreamError: When the request fails or the response is unreadable
        """
        response = await self.get(
            "esearch.fcgi",
            db=db,
            term=query,
            retmax=retmax,
            retmode="xml"
        )
        return self._parse_esearch_xml(response.text)

    def _parse_esearch_xml(self, response_text: str) -> List[str]:
        """Parse ESearch XML response into the ordered ID list."""
        try:
            root = ET.fromstring(response_text)
        except ET.ParseError as e:
            logger.error(f"Failed to parse ESearch XML: {e}")
            raise UpstreamError(
                message="Failed to parse search results",
                original_error=str(e)
            )

        error = root.find(".//ERROR")
        if error is not None:
            raise UpstreamError(
                message="Search error",
                original_error=error.text
            )

        return [
            id_elem.text.strip()
            for id_elem in root.findall("IdList/Id")
            if id_elem.text and id_elem.text.strip()
        ]

    async def fetch(
        self,
        pmid: str,
        db: str = Config.PUBMED_DATABASE
    ) -> str:
        """
        Fetch the full record of one article using EFetch.

        Args:
            pmid: PubMed ID to fetch
            db: Database

        Returns:
            Raw XML response text
        """
        response = await self.get(
            "efetch.fcgi",
            db=db,
            id=pmid,
            retmode="xml"
        )
        return response.text
