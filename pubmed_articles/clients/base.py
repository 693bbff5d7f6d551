"""
Base HTTP client for NCBI API interactions.

Provides common functionality for request handling, logging, and error management.
"""

import httpx
from typing import Optional, Dict, Any
import logging

from ..config import Config
from ..utils.error_handler import UpstreamError, map_http_status_to_error

logger = logging.getLogger(__name__)


class BaseClient:
    """
    Base HTTP client with a fixed timeout and identifying headers.

    Each request is attempted once; there is no retry or rate limiting.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the base client.

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

        # HTTP client configuration
        self._client: Optional[httpx.AsyncClient] = None

        logger.debug(f"BaseClient initialized for {base_url} (timeout: {timeout}s)")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
                transport=self._transport
            )
        return self._client

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for all requests."""
        return {
            "User-Agent": Config.get_user_agent(),
            "Accept": "application/xml, text/xml",
        }

    def _build_params(self, **kwargs) -> Dict[str, str]:
        """
        Build query parameters with common fields.

        Automatically adds tool and email identification.
        """
        params = {
            "tool": Config.TOOL_NAME,
            "email": Config.TOOL_EMAIL,
        }

        # Add provided parameters, filtering out None values
        for key, value in kwargs.items():
            if value is not None:
                params[key] = str(value)

        return params

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (appended to base_url)
            params: Query parameters

        Returns:
            httpx.Response object

        Raises:
            UpstreamError: For network issues, timeouts and error statuses
        """
        url = f"{self.base_url}/{endpoint}"
        client = await self._get_client()

        logger.debug(f"Request: {method} {url} {params}")

        try:
            response = await client.request(method, url, params=params)
        except httpx.TimeoutException as e:
            raise UpstreamError(
                message="Request timed out",
                original_error=str(e)
            )
        except httpx.RequestError as e:
            raise UpstreamError(
                message="Network request failed",
                original_error=str(e)
            )

        if response.status_code >= 400:
            raise map_http_status_to_error(
                response.status_code,
                response.text[:500]  # Truncate long error messages
            )

        logger.debug(f"Response: {response.status_code} ({len(response.text)} bytes)")
        return response

    async def get(
        self,
        endpoint: str,
        **params
    ) -> httpx.Response:
        """Make a GET request."""
        full_params = self._build_params(**params)
        return await self._request("GET", endpoint, params=full_params)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
