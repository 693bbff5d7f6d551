"""
E-utilities query syntax builder.

Composes the filter fields of an advanced search into one query string.
"""

from typing import List, Optional

from ..config import Config


class QueryBuilder:
    """
    Builds E-utilities compatible query strings.

    Field tags reference:
    - [Title] = Article title
    - [Author] = Author name
    - [Journal] = Journal title or abbreviation
    - [Date - Publication] = Publication date range (start:end)
    """

    # Field tag mapping
    FIELD_TAGS = {
        "title": "Title",
        "author": "Author",
        "journal": "Journal",
        "publication_date": "Date - Publication",
    }

    @classmethod
    def build_field_query(cls, term: str, field: str) -> str:
        """
        Build a field-specific query.

        Args:
            term: Search term
            field: Field name (will be mapped to NCBI field tag)

        Returns:
            Field-tagged query string
        """
        field_tag = cls.FIELD_TAGS.get(field.lower(), field)
        return f"{term}[{field_tag}]"

    @classmethod
    def build_date_range(
        cls,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> Optional[str]:
        """
        Build a publication date range filter.

        Dates are expected as YYYY/MM/DD and forwarded verbatim; a missing
        bound is replaced with an open one.

        Args:
            start_date: Start date
            end_date: End date

        Returns:
            Date range query string or None
        """
        if not start_date and not end_date:
            return None

        start = start_date or Config.OPEN_START_DATE
        end = end_date or Config.OPEN_END_DATE

        return cls.build_field_query(f"{start}:{end}", "publication_date")

    @classmethod
    def build_advanced_query(
        cls,
        term: Optional[str] = None,
        title: Optional[str] = None,
        author: Optional[str] = None,
        journal: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> str:
        """
        Build an advanced query from individual filters.

        Only the filters that are present are joined with AND. The general
        term comes first and carries no field tag.

        Returns:
            Combined query string, empty when no filter is set
        """
        clauses: List[str] = []

        if term:
            clauses.append(term)
        if title:
            clauses.append(cls.build_field_query(title, "title"))
        if author:
            clauses.append(cls.build_field_query(author, "author"))
        if journal:
            clauses.append(cls.build_field_query(journal, "journal"))

        date_range = cls.build_date_range(start_date, end_date)
        if date_range:
            clauses.append(date_range)

        return " AND ".join(clauses)
