"""
Custom exception hierarchy for PubMed Articles MCP Server.

Validation and routing errors are surfaced to the caller inside the response
envelope. Upstream and extraction errors are absorbed by the gateway.
"""

from typing import Optional


class PubMedError(Exception):
    """Base exception for all PubMed Articles MCP Server errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to the response envelope."""
        return {"error": self.message}


class ValidationError(PubMedError):
    """
    A required argument is missing or an argument is malformed.

    Raised before any network call is made.
    """

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class UnsupportedOperationError(PubMedError):
    """
    The requested method is not one of the supported operations.
    """

    def __init__(self, message: str = "Unsupported operation"):
        super().__init__(message)


class UpstreamError(PubMedError):
    """
    E-utilities call failed: network error, timeout, HTTP error status or a
    response body that could not be read.
    """

    def __init__(
        self,
        message: str = "Upstream request failed",
        status_code: Optional[int] = None,
        original_error: Optional[str] = None
    ):
        super().__init__(message, details=original_error)
        self.status_code = status_code
        self.original_error = original_error


class ExtractionError(PubMedError):
    """
    An EFetch payload could not be turned into an article record.
    """

    def __init__(
        self,
        message: str = "Could not extract article",
        pmid: Optional[str] = None
    ):
        super().__init__(message)
        self.pmid = pmid


def map_http_status_to_error(
    status_code: int,
    response_text: Optional[str] = None
) -> UpstreamError:
    """
    Map HTTP status codes to an UpstreamError with a readable message.

    Args:
        status_code: HTTP status code
        response_text: Optional response body for additional context

    Returns:
        UpstreamError instance
    """
    messages = {
        400: "Bad request - check query syntax",
        404: "Resource not found",
        429: "Rate limit exceeded",
        500: "NCBI internal server error",
        502: "NCBI gateway error",
        503: "NCBI service temporarily unavailable",
        504: "NCBI gateway timeout",
    }

    return UpstreamError(
        message=messages.get(status_code, f"HTTP error {status_code}"),
        status_code=status_code,
        original_error=response_text
    )
