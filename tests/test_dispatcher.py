"""
Tests for the pubmed_articles request dispatcher.
"""

import json

import pytest
from unittest.mock import AsyncMock, patch

from pubmed_articles.schemas.tool_schemas import (
    ArticleMetadataRequest,
    ArticleRecord,
    PdfResolution,
    SearchAdvancedRequest,
)
from pubmed_articles.tools.dispatcher import (
    clean_arguments,
    dispatch,
    format_response,
    parse_request,
)
from pubmed_articles.utils.error_handler import UnsupportedOperationError, ValidationError


class TestParseRequest:
    """Validation of the flat argument bag."""

    def test_missing_method(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"keywords": "cancer"})
        assert exc_info.value.message == "method parameter is required"

    def test_unknown_method(self):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            parse_request({"method": "delete_article"})
        assert exc_info.value.message == "Unknown method: delete_article"

    def test_missing_keywords(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"method": "search_keywords", "keywords": "  "})
        assert exc_info.value.message == "keywords parameter is required for search_keywords"

    def test_missing_pmid(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"method": "get_article_pdf", "pmid": None})
        assert exc_info.value.message == "pmid parameter is required for get_article_pdf"

    def test_advanced_without_filters(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"method": "search_advanced", "num_results": 5, "title": ""})
        assert exc_info.value.message == "At least one search parameter is required"

    def test_invalid_num_results(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"method": "search_keywords", "keywords": "x", "num_results": 0})
        assert exc_info.value.message.startswith("Invalid num_results")

    def test_boolean_pmid_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_request({"method": "get_article_metadata", "pmid": True})
        assert exc_info.value.message.startswith("Invalid pmid")

    def test_integer_pmid_normalized(self):
        request = parse_request({"method": "get_article_metadata", "pmid": 12345678})
        assert isinstance(request, ArticleMetadataRequest)
        assert request.pmid == "12345678"

    def test_string_pmid_stripped(self):
        request = parse_request({"method": "get_article_metadata", "pmid": " 12345678 "})
        assert request.pmid == "12345678"

    def test_defaults_and_unrelated_fields_ignored(self):
        request = parse_request({
            "method": "search_advanced",
            "journal": "Nature",
            "keywords": "ignored",
            "pmid": None,
        })
        assert isinstance(request, SearchAdvancedRequest)
        assert request.num_results == 10
        assert request.journal == "Nature"

    def test_clean_arguments(self):
        assert clean_arguments({"a": None, "b": "", "c": " ", "d": 0, "e": "x"}) == {"d": 0, "e": "x"}
        assert clean_arguments(None) == {}


class TestDispatch:
    """Routing and response envelope."""

    @pytest.mark.asyncio
    async def test_search_keywords_routed(self):
        record = ArticleRecord(pmid="1", title="A")

        with patch(
            'pubmed_articles.tools.search_tools.search_keywords',
            new=AsyncMock(return_value=[record])
        ) as mock_search:
            result = await dispatch({"method": "search_keywords", "keywords": "cancer"})

        mock_search.assert_awaited_once_with(keywords="cancer", num_results=10)
        assert result == [record.model_dump()]
        assert result[0]["url"] == "https://pubmed.ncbi.nlm.nih.gov/1/"

    @pytest.mark.asyncio
    async def test_search_advanced_routed(self):
        with patch(
            'pubmed_articles.tools.search_tools.search_advanced',
            new=AsyncMock(return_value=[])
        ) as mock_search:
            result = await dispatch({
                "method": "search_advanced",
                "title": "CRISPR",
                "end_date": "2024/12/31",
                "num_results": 3,
            })

        assert result == []
        mock_search.assert_awaited_once_with(
            term=None,
            title="CRISPR",
            author=None,
            journal=None,
            start_date=None,
            end_date="2024/12/31",
            num_results=3
        )

    @pytest.mark.asyncio
    async def test_metadata_not_found_is_null(self):
        with patch(
            'pubmed_articles.tools.retrieval_tools.get_article_metadata',
            new=AsyncMock(return_value=None)
        ):
            result = await dispatch({"method": "get_article_metadata", "pmid": "1"})

        assert result is None
        assert format_response(result) == "null"

    @pytest.mark.asyncio
    async def test_pdf_without_link_omits_key(self):
        resolution = PdfResolution(message="PDF not directly available for PMID 1. Check publisher website.")

        with patch(
            'pubmed_articles.tools.retrieval_tools.get_article_pdf',
            new=AsyncMock(return_value=resolution)
        ) as mock_pdf:
            result = await dispatch({"method": "get_article_pdf", "pmid": 1})

        mock_pdf.assert_awaited_once_with("1")
        assert result == {"message": "PDF not directly available for PMID 1. Check publisher website."}

    @pytest.mark.asyncio
    async def test_validation_error_envelope(self):
        with patch('pubmed_articles.tools.search_tools.EUtilitiesClient') as MockClient:
            result = await dispatch({"method": "search_advanced"})

        assert result == {"error": "At least one search parameter is required"}
        MockClient.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_method_envelope(self):
        result = await dispatch({"method": "bogus"})
        assert result == {"error": "Unknown method: bogus"}

    @pytest.mark.asyncio
    async def test_unexpected_exception_never_escapes(self):
        with patch(
            'pubmed_articles.tools.retrieval_tools.get_article_metadata',
            new=AsyncMock(side_effect=RuntimeError("boom"))
        ):
            result = await dispatch({"method": "get_article_metadata", "pmid": "1"})

        assert result == {"error": "boom"}

    @pytest.mark.asyncio
    async def test_none_arguments(self):
        assert await dispatch(None) == {"error": "method parameter is required"}


class TestFormatResponse:

    def test_json_indented(self):
        text = format_response({"error": "x"})
        assert text == '{\n  "error": "x"\n}'
        assert json.loads(text) == {"error": "x"}
