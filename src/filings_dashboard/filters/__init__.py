"""
Filters Package - Concrete Filter Implementations.

Each filter implements the FilterStage protocol and narrows the filings
produced by the previous stage.

Filters (in pipeline order):
    - TabFilter: Lifecycle tab (active/submitted/returned/reports)
    - FundTypeStage: Mutual or private funds
    - StatusFilter: Selected statuses, active tab only
    - PeriodYearFilter: Selected reporting years
    - SearchFilter: Free-text query over names and identifiers

Design Principles:
    - Each filter is independently testable
    - Stateless filtering (all state via FilterSpec)
    - Clear rejection reasons for audit trail
"""

from typing import List

from filings_dashboard.filters.base import PredicateFilter
from filings_dashboard.filters.fund_type import FundTypeStage
from filings_dashboard.filters.period_year import PeriodYearFilter
from filings_dashboard.filters.search import SEARCH_ID_PAD_WIDTH, SearchFilter
from filings_dashboard.filters.status import StatusFilter
from filings_dashboard.filters.tab import TAB_STATUSES, TabFilter


def default_stages() -> List[PredicateFilter]:
    """Filter stages in their fixed order."""
    return [
        TabFilter(),
        FundTypeStage(),
        StatusFilter(),
        PeriodYearFilter(),
        SearchFilter(),
    ]


__all__ = [
    "FundTypeStage",
    "PeriodYearFilter",
    "PredicateFilter",
    "SEARCH_ID_PAD_WIDTH",
    "SearchFilter",
    "StatusFilter",
    "TAB_STATUSES",
    "TabFilter",
    "default_stages",
]
