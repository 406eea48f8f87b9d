"""
Period Year Filter Implementation.

Keeps filings whose period label carries a selected year. The year is
the first run of four digits in the label; a label without one never
matches while the filter is active.
"""

from __future__ import annotations

from typing import Tuple

from filings_dashboard.domain.entities import Filing
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.base import PredicateFilter


class PeriodYearFilter(PredicateFilter):
    """Filter filings by reporting-period year."""

    stage_name = "period_year_filter"

    def is_active(self, spec: FilterSpec) -> bool:
        return bool(spec.period_years)

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        year = filing.period_year
        if year is None:
            return False, f"period={filing.period!r} has no year"
        if year in spec.period_years:
            return True, ""
        return False, f"period_year={year} not selected"
