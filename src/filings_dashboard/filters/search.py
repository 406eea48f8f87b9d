"""
Search Filter Implementation.

Case-insensitive substring search over:
    - fund name
    - entity id, raw and zero-padded to six characters
    - filing id, raw and zero-padded to six characters

Padding lets "00101" find entity "101".
"""

from __future__ import annotations

from typing import Tuple

from filings_dashboard.domain.entities import Filing
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.base import PredicateFilter

SEARCH_ID_PAD_WIDTH = 6


def searchable_terms(filing: Filing) -> Tuple[str, ...]:
    """Lower-cased strings a search query is matched against."""
    return (
        filing.fund_name.lower(),
        filing.entity_id.lower(),
        filing.entity_id.rjust(SEARCH_ID_PAD_WIDTH, "0").lower(),
        filing.id.lower(),
        filing.id.rjust(SEARCH_ID_PAD_WIDTH, "0").lower(),
    )


class SearchFilter(PredicateFilter):
    """Filter filings by free-text query."""

    stage_name = "search_filter"

    def is_active(self, spec: FilterSpec) -> bool:
        return spec.has_search

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        query = spec.search_query.lower()
        if any(query in term for term in searchable_terms(filing)):
            return True, ""
        return False, f"no match for {spec.search_query!r}"
