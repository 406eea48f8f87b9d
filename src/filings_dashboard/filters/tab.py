"""
Tab Filter Implementation.

Partitions filings by lifecycle stage:
    - active: available, prepared, ready-to-submit, outstanding, deferred
    - submitted: processed
    - returned: returned
    - reports: no row-level filtering

Waived and under-review filings belong to no filtering tab; they only
show up under reports.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from filings_dashboard.domain.entities import Filing, ReturnStatus, Tab
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.base import PredicateFilter

TAB_STATUSES: Dict[Tab, FrozenSet[ReturnStatus]] = {
    Tab.ACTIVE: frozenset(
        {
            ReturnStatus.AVAILABLE,
            ReturnStatus.PREPARED,
            ReturnStatus.READY_TO_SUBMIT,
            ReturnStatus.OUTSTANDING,
            ReturnStatus.DEFERRED,
        }
    ),
    Tab.SUBMITTED: frozenset({ReturnStatus.PROCESSED}),
    Tab.RETURNED: frozenset({ReturnStatus.RETURNED}),
}


class TabFilter(PredicateFilter):
    """Keep filings whose status belongs to the selected tab."""

    stage_name = "tab_filter"

    def is_active(self, spec: FilterSpec) -> bool:
        return spec.tab in TAB_STATUSES

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        if filing.status in TAB_STATUSES[spec.tab]:
            return True, ""
        return False, f"status={filing.status.value} not on tab {spec.tab.value}"
