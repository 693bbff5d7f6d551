"""
Request dispatcher for the pubmed_articles tool.

Validates the flat argument bag into a typed request, routes it to the
search or retrieval operation and wraps the outcome in a JSON-ready payload.
``dispatch`` never raises: every failure becomes ``{"error": "<message>"}``.
"""

from typing import Any, Dict, Optional
import json
import logging

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from . import retrieval_tools, search_tools
from ..schemas.tool_schemas import (
    ArticleMetadataRequest,
    ArticlePdfRequest,
    PdfResolution,
    PubMedRequest,
    SearchAdvancedRequest,
    SearchKeywordsRequest,
    SUPPORTED_METHODS,
)
from ..utils.error_handler import PubMedError, UnsupportedOperationError, ValidationError

logger = logging.getLogger(__name__)

_request_adapter = TypeAdapter(PubMedRequest)


def clean_arguments(arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop arguments that are None or blank strings; they count as absent."""
    cleaned = {}
    for key, value in (arguments or {}).items():
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        cleaned[key] = value
    return cleaned


def _describe_schema_error(exc: SchemaValidationError, method: str) -> str:
    """Turn the first pydantic error into a caller-facing message."""
    error = exc.errors()[0]
    # The union tag leads the location; the field name, if any, follows it
    path = [part for part in error.get("loc", ()) if part != method]
    field = path[-1] if path else None
    reason = error.get("ctx", {}).get("error") or error.get("msg", "invalid value")

    if error.get("type") == "missing" and field:
        return f"{field} parameter is required for {method}"
    if field:
        return f"Invalid {field}: {reason}"
    return str(reason)


def parse_request(arguments: Optional[Dict[str, Any]]) -> BaseModel:
    """
    Validate raw tool arguments into one of the request variants.

    Raises:
        ValidationError: Missing or malformed arguments
        UnsupportedOperationError: Unknown method
    """
    params = clean_arguments(arguments)
    method = params.get("method")

    if method is None:
        raise ValidationError("method parameter is required")
    if method not in SUPPORTED_METHODS:
        raise UnsupportedOperationError(f"Unknown method: {method}")

    try:
        return _request_adapter.validate_python(params)
    except SchemaValidationError as e:
        raise ValidationError(_describe_schema_error(e, method))


async def _handle_search_keywords(request: SearchKeywordsRequest):
    return await search_tools.search_keywords(
        keywords=request.keywords,
        num_results=request.num_results
    )


async def _handle_search_advanced(request: SearchAdvancedRequest):
    return await search_tools.search_advanced(
        term=request.term,
        title=request.title,
        author=request.author,
        journal=request.journal,
        start_date=request.start_date,
        end_date=request.end_date,
        num_results=request.num_results
    )


async def _handle_article_metadata(request: ArticleMetadataRequest):
    return await retrieval_tools.get_article_metadata(request.pmid)


async def _handle_article_pdf(request: ArticlePdfRequest):
    return await retrieval_tools.get_article_pdf(request.pmid)


HANDLERS = {
    SearchKeywordsRequest: _handle_search_keywords,
    SearchAdvancedRequest: _handle_search_advanced,
    ArticleMetadataRequest: _handle_article_metadata,
    ArticlePdfRequest: _handle_article_pdf,
}


def to_payload(result: Any) -> Any:
    """Convert gateway results (models, lists of models, None) to plain data."""
    if isinstance(result, list):
        return [to_payload(item) for item in result]
    if isinstance(result, PdfResolution):
        return result.model_dump(exclude_none=True)
    if isinstance(result, BaseModel):
        return result.model_dump()
    return result


async def dispatch(arguments: Optional[Dict[str, Any]]) -> Any:
    """
    Execute one pubmed_articles invocation.

    Args:
        arguments: Flat tool arguments including ``method``

    Returns:
        The operation's payload, or ``{"error": message}``
    """
    try:
        request = parse_request(arguments)
        logger.info(f"Dispatching {request.method}")
        result = await HANDLERS[type(request)](request)
        return to_payload(result)
    except PubMedError as e:
        logger.warning(f"Request rejected: {e.message}")
        return e.to_dict()
    except Exception as e:
        logger.exception("Unexpected error while handling pubmed_articles request")
        return {"error": str(e) or e.__class__.__name__}


def format_response(payload: Any) -> str:
    """Serialize a dispatcher payload for the text content block."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
