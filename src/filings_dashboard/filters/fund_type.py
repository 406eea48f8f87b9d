"""
Fund Type Filter Implementation.

Keeps filings of the selected fund type. Skipped on the reports tab and
when the selection is "all".
"""

from __future__ import annotations

from typing import Tuple

from filings_dashboard.domain.entities import Filing, FundTypeFilter, Tab
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.base import PredicateFilter


class FundTypeStage(PredicateFilter):
    """Filter filings by fund type."""

    stage_name = "fund_type_filter"

    def is_active(self, spec: FilterSpec) -> bool:
        return spec.tab is not Tab.REPORTS and spec.fund_type is not FundTypeFilter.ALL

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        if spec.fund_type.matches(filing.fund_type):
            return True, ""
        return False, f"fund_type={filing.fund_type.value} != {spec.fund_type.value}"
