"""
Search Tools

Keyword and filtered PubMed search. Each search issues one ESearch call and
then fetches the matching articles one at a time, in result order.
"""

from typing import List, Optional
import logging

from ..clients.eutilities import EUtilitiesClient
from ..config import Config
from ..schemas.tool_schemas import ArticleRecord
from ..utils.error_handler import UpstreamError, ValidationError
from ..utils.outcome import Outcome
from ..utils.query_builder import QueryBuilder
from .retrieval_tools import fetch_article_record

logger = logging.getLogger(__name__)


async def search_pmids(client: EUtilitiesClient, query: str, num_results: int) -> Outcome:
    """
    Run ESearch and return the ordered PMIDs.

    A failed search is reported as a failed outcome, never raised.
    """
    try:
        pmids = await client.search(query=query, retmax=num_results)
    except UpstreamError as e:
        logger.warning(f"Error searching PubMed for {query!r}: {e.message} ({e.details})")
        return Outcome.failure(e.message)

    if not pmids:
        return Outcome.empty(f"No results for {query!r}")
    return Outcome.success(pmids[:num_results])


async def search_and_fetch(query: str, num_results: int) -> List[ArticleRecord]:
    """
    Search PubMed and fetch metadata for every hit.

    Articles whose fetch fails are left out, so the result may be shorter
    than the number of PMIDs found.

    Args:
        query: Query in E-utilities syntax
        num_results: Maximum number of PMIDs to request

    Returns:
        ArticleRecords in search result order
    """
    async with EUtilitiesClient() as client:
        search_outcome = await search_pmids(client, query, num_results)
        pmids = search_outcome.unwrap_or([])

        articles = []
        for pmid in pmids:
            outcome = await fetch_article_record(client, pmid)
            if outcome.ok:
                articles.append(outcome.value)
            else:
                logger.info(f"Dropping PMID {pmid} from results: {outcome.error}")

    logger.info(f"Search returned {len(articles)} of {len(pmids)} articles")
    return articles


async def search_keywords(
    keywords: str,
    num_results: int = Config.DEFAULT_NUM_RESULTS
) -> List[ArticleRecord]:
    """
    Search PubMed with a keyword query.

    Args:
        keywords: Query string; PubMed operators (AND, OR, NOT) are passed through
        num_results: Maximum number of results

    Returns:
        List of ArticleRecords
    """
    logger.info(f"Searching PubMed for keywords: {keywords}")
    return await search_and_fetch(keywords, num_results)


async def search_advanced(
    term: Optional[str] = None,
    title: Optional[str] = None,
    author: Optional[str] = None,
    journal: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    num_results: int = Config.DEFAULT_NUM_RESULTS
) -> List[ArticleRecord]:
    """
    Search PubMed with field filters combined by AND.

    Args:
        term: General search term (no field tag)
        title: Title filter
        author: Author filter (e.g. "Smith J")
        journal: Journal filter
        start_date: Start of publication date range, YYYY/MM/DD
        end_date: End of publication date range, YYYY/MM/DD
        num_results: Maximum number of results

    Returns:
        List of ArticleRecords

    Raises:
        ValidationError: When no filter is given
    """
    query = QueryBuilder.build_advanced_query(
        term=term,
        title=title,
        author=author,
        journal=journal,
        start_date=start_date,
        end_date=end_date
    )
    if not query:
        raise ValidationError("At least one search parameter is required")

    logger.info(f"Advanced search query: {query}")
    return await search_and_fetch(query, num_results)
