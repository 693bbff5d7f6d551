"""
Document Retrieval Tools

Single-article metadata lookup and PMC PDF link resolution.
"""

from typing import Optional, Union
import logging

from ..clients.eutilities import EUtilitiesClient
from ..config import Config
from ..schemas.tool_schemas import ArticleRecord, PdfResolution, normalize_pmid
from ..utils.article_parser import parse_pubmed_article
from ..utils.error_handler import PubMedError
from ..utils.outcome import Outcome

logger = logging.getLogger(__name__)


async def fetch_article_record(client: EUtilitiesClient, pmid: str) -> Outcome:
    """
    Fetch and parse one article.

    Upstream and extraction errors are logged and returned as a failed
    outcome; a payload without an article is an empty outcome.

    Args:
        client: Open E-utilities client
        pmid: Canonical PubMed ID

    Returns:
        Outcome carrying an ArticleRecord on success
    """
    try:
        xml_text = await client.fetch(pmid)
        record = parse_pubmed_article(xml_text, pmid)
    except PubMedError as e:
        logger.warning(f"Error fetching metadata for PMID {pmid}: {e.message} ({e.details})")
        return Outcome.failure(e.message)

    if record is None:
        return Outcome.empty(f"No article found for PMID {pmid}")
    return Outcome.success(record)


async def get_article_metadata(pmid: Union[str, int]) -> Optional[ArticleRecord]:
    """
    Fetch detailed metadata for one article.

    Args:
        pmid: PubMed ID as string or integer

    Returns:
        ArticleRecord, or None when the article could not be retrieved
    """
    pmid = normalize_pmid(pmid)
    logger.info(f"Fetching metadata for PMID: {pmid}")

    async with EUtilitiesClient() as client:
        outcome = await fetch_article_record(client, pmid)

    return outcome.unwrap_or(None)


def resolve_pdf_link(pmid: str, record: Optional[ArticleRecord]) -> PdfResolution:
    """Build the PMC PDF link for a record. The link is not verified."""
    if record is not None and record.pmcid:
        return PdfResolution(
            pdf_url=Config.PMC_PDF_URL.format(pmcid=record.pmcid),
            message=f"PDF may be available at PMC: {record.pmcid}"
        )

    return PdfResolution(
        message=f"PDF not directly available for PMID {pmid}. Check publisher website."
    )


async def get_article_pdf(pmid: Union[str, int]) -> PdfResolution:
    """
    Resolve a full-text PDF link for an article.

    Only articles deposited in PubMed Central get a link.

    Args:
        pmid: PubMed ID as string or integer

    Returns:
        PdfResolution with message and, when available, pdf_url
    """
    pmid = normalize_pmid(pmid)
    logger.info(f"PDF download requested for PMID: {pmid}")

    async with EUtilitiesClient() as client:
        outcome = await fetch_article_record(client, pmid)

    return resolve_pdf_link(pmid, outcome.unwrap_or(None))
