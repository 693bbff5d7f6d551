"""
Pydantic schemas for the pubmed_articles tool.

Defines the request variants accepted by the dispatcher and the records it
returns.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from ..config import Config


# =============================================================================
# Result Models
# =============================================================================

class ArticleRecord(BaseModel):
    """Normalized metadata for one PubMed article."""
    model_config = ConfigDict(frozen=True)

    pmid: str = Field(..., min_length=1)
    title: str = "No title available"
    authors: List[str] = Field(default_factory=list)
    journal: str = "Unknown journal"
    publication_date: str = "Unknown date"
    abstract: str = ""
    doi: str = ""
    pmcid: str = ""
    keywords: List[str] = Field(default_factory=list)
    mesh_terms: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def url(self) -> str:
        return Config.PUBMED_ARTICLE_URL.format(pmid=self.pmid)


class PdfResolution(BaseModel):
    """Outcome of a PDF link lookup. ``pdf_url`` is only set for PMC articles."""
    message: str
    pdf_url: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================

def normalize_pmid(value: Union[str, int]) -> str:
    """
    Convert a PMID given as int or str to its canonical string form.

    Integers become their decimal representation, strings are stripped.
    """
    if isinstance(value, bool):
        raise ValueError("PMID must be a string or an integer")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    raise ValueError("PMID must be a string or an integer")


class ArticleLookupRequest(BaseModel):
    """Common base for the single-article methods."""
    pmid: str = Field(..., min_length=1, description="PubMed ID of the article")

    @field_validator("pmid", mode="before")
    @classmethod
    def canonical_pmid(cls, value):
        return normalize_pmid(value)


class SearchKeywordsRequest(BaseModel):
    """Input for the search_keywords method."""
    method: Literal["search_keywords"]
    keywords: str = Field(
        ...,
        description="Search query with keywords, medical terms or PubMed operators"
    )
    num_results: int = Field(
        Config.DEFAULT_NUM_RESULTS,
        ge=1,
        description="Maximum number of results to return"
    )


class SearchAdvancedRequest(BaseModel):
    """Input for the search_advanced method."""
    method: Literal["search_advanced"]
    term: Optional[str] = Field(None, description="General search term")
    title: Optional[str] = Field(None, description="Search in article titles")
    author: Optional[str] = Field(None, description="Author name(s)")
    journal: Optional[str] = Field(None, description="Journal name or abbreviation")
    start_date: Optional[str] = Field(None, description="Start date, YYYY/MM/DD")
    end_date: Optional[str] = Field(None, description="End date, YYYY/MM/DD")
    num_results: int = Field(
        Config.DEFAULT_NUM_RESULTS,
        ge=1,
        description="Maximum number of results to return"
    )

    @model_validator(mode="after")
    def require_filter(self):
        filters = (
            self.term, self.title, self.author,
            self.journal, self.start_date, self.end_date,
        )
        if not any(filters):
            raise ValueError("At least one search parameter is required")
        return self


class ArticleMetadataRequest(ArticleLookupRequest):
    """Input for the get_article_metadata method."""
    method: Literal["get_article_metadata"]


class ArticlePdfRequest(ArticleLookupRequest):
    """Input for the get_article_pdf method."""
    method: Literal["get_article_pdf"]


PubMedRequest = Annotated[
    Union[
        SearchKeywordsRequest,
        SearchAdvancedRequest,
        ArticleMetadataRequest,
        ArticlePdfRequest,
    ],
    Field(discriminator="method"),
]

SUPPORTED_METHODS = (
    "search_keywords",
    "search_advanced",
    "get_article_metadata",
    "get_article_pdf",
)
