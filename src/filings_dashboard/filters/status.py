"""
Status Filter Implementation.

Narrows the active tab to the selected statuses. Labels are compared
case-insensitively with separators ignored, so "ReadyToSubmit",
"ready-to-submit" and "READY_TO_SUBMIT" select the same status.
The selection is ignored on every other tab.
"""

from __future__ import annotations

from typing import Tuple

from filings_dashboard.domain.entities import Filing, Tab, normalize_status_label
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.base import PredicateFilter


class StatusFilter(PredicateFilter):
    """Filter active filings by selected statuses."""

    stage_name = "status_filter"

    def is_active(self, spec: FilterSpec) -> bool:
        return spec.tab is Tab.ACTIVE and bool(spec.statuses)

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        selected = {normalize_status_label(s) for s in spec.statuses}
        if filing.status.normalized in selected:
            return True, ""
        return False, f"status={filing.status.value} not selected"
