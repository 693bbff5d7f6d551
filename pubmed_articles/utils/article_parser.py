"""
EFetch XML to ArticleRecord extraction.

Every element below PubmedArticle is optional. Missing values fall back to
the defaults declared on ArticleRecord rather than raising.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional
import logging

from ..schemas.tool_schemas import ArticleRecord
from .error_handler import ExtractionError

logger = logging.getLogger(__name__)

# ArticleId IdType values mapped to ArticleRecord fields
ARTICLE_ID_FIELDS = {
    "doi": "doi",
    "pmc": "pmcid",
}


def _element_text(elem: Optional[ET.Element]) -> str:
    """Full text of an element with inline markup flattened, or ''."""
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()


def _find_text(parent: Optional[ET.Element], path: str) -> str:
    """Text at ``path`` below ``parent``, or '' when any step is missing."""
    if parent is None:
        return ""
    return _element_text(parent.find(path))


def extract_authors(article: Optional[ET.Element]) -> List[str]:
    """
    Build "LastName, ForeName" strings from the author list.

    Authors without a last name (e.g. collective names) are skipped. A
    missing fore name leaves "LastName,".
    """
    if article is None:
        return []

    authors = []
    for author in article.findall("AuthorList/Author"):
        last_name = _find_text(author, "LastName")
        fore_name = _find_text(author, "ForeName")
        if last_name:
            authors.append(f"{last_name}, {fore_name}".strip())
    return authors


def extract_publication_date(article: Optional[ET.Element]) -> Optional[str]:
    """Join the Year, Month and Day of PubDate with '-', skipping missing parts."""
    if article is None:
        return None

    pub_date = article.find("Journal/JournalIssue/PubDate")
    if pub_date is None:
        return None

    parts = [_find_text(pub_date, tag) for tag in ("Year", "Month", "Day")]
    return "-".join(part for part in parts if part) or None


def extract_abstract(article: Optional[ET.Element]) -> str:
    if article is None:
        return ""
    segments = [
        _element_text(text)
        for text in article.findall("Abstract/AbstractText")
    ]
    return " ".join(segment for segment in segments if segment)


def extract_article_ids(pubmed_data: Optional[ET.Element]) -> Dict[str, str]:
    """
    Scan the article ID list once, keeping the first entry per known type.

    The first entry wins even when it is empty. IDs without an IdType or with an
    unknown one are ignored.
    """
    found: Dict[str, str] = {}
    if pubmed_data is None:
        return found

    for article_id in pubmed_data.findall("ArticleIdList/ArticleId"):
        field = ARTICLE_ID_FIELDS.get(article_id.get("IdType", ""))
        if field is None or field in found:
            continue
        found[field] = _element_text(article_id)
    return found


def extract_mesh_terms(citation: ET.Element) -> List[str]:
    terms = []
    for heading in citation.findall("MeshHeadingList/MeshHeading"):
        descriptor = _find_text(heading, "DescriptorName")
        if descriptor:
            terms.append(descriptor)
    return terms


def extract_keywords(citation: ET.Element) -> List[str]:
    keyword_list = citation.find("KeywordList")
    if keyword_list is None:
        return []
    keywords = []
    for keyword in keyword_list.findall("Keyword"):
        text = _element_text(keyword)
        if text:
            keywords.append(text)
    return keywords


def parse_pubmed_article(xml_text: str, pmid: str) -> Optional[ArticleRecord]:
    """
    Parse an EFetch response into an ArticleRecord.

    Args:
        xml_text: Raw EFetch XML (a PubmedArticleSet)
        pmid: The PMID that was requested; used as the record's identifier

    Returns:
        ArticleRecord, or None when the payload holds no article

    Raises:
        ExtractionError: When the payload is not well-formed XML
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ExtractionError(
            message=f"Malformed EFetch payload for PMID {pmid}: {e}",
            pmid=pmid
        )

    article_elem = root if root.tag == "PubmedArticle" else root.find("PubmedArticle")
    if article_elem is None:
        logger.debug(f"No PubmedArticle in EFetch payload for PMID {pmid}")
        return None

    citation = article_elem.find("MedlineCitation")
    if citation is None:
        logger.debug(f"No MedlineCitation in EFetch payload for PMID {pmid}")
        return None

    article = citation.find("Article")

    fields = {
        "pmid": pmid,
        "title": _find_text(article, "ArticleTitle"),
        "journal": _find_text(article, "Journal/Title"),
        "publication_date": extract_publication_date(article),
        "authors": extract_authors(article),
        "abstract": extract_abstract(article),
        "keywords": extract_keywords(citation),
        "mesh_terms": extract_mesh_terms(citation),
    }
    fields.update(extract_article_ids(article_elem.find("PubmedData")))

    # Drop empty scalars so the model defaults apply
    return ArticleRecord(**{
        key: value for key, value in fields.items()
        if value is not None and value != ""
    })
