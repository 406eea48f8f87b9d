"""
Unit Tests for StatusFilter.

Test Aspects Covered:
    ✅ Business Logic: Membership in the selected set
    ✅ Edge Cases: Case-insensitive labels, ignored outside the active tab
"""

from __future__ import annotations

from typing import List

import pytest

from filings_dashboard.domain.entities import Filing, ReturnStatus, Tab
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.filters.status import StatusFilter


@pytest.fixture
def active_filings(make_filing) -> List[Filing]:
    return [
        make_filing("1", status=ReturnStatus.AVAILABLE),
        make_filing("2", status=ReturnStatus.PREPARED),
        make_filing("3", status=ReturnStatus.READY_TO_SUBMIT),
        make_filing("4", status=ReturnStatus.OUTSTANDING, extensions_used=3, can_request_extension=False),
    ]


class TestStatusFilter:
    """Test cases for StatusFilter."""

    def test_keeps_selected_statuses(self, active_filings: List[Filing]) -> None:
        """
        SCENARIO: Available and outstanding selected
        EXPECTED: Only those two statuses pass
        """
        spec = FilterSpec(statuses={"available", "outstanding"})

        result = StatusFilter().apply(active_filings, spec)

        assert result.passed_ids == ["1", "4"]
        assert result.rejection_reasons["2"] == "status=prepared not selected"

    @pytest.mark.parametrize("label", ["Ready-To-Submit", "readytosubmit", "READY_TO_SUBMIT"])
    def test_case_insensitive_match(self, active_filings: List[Filing], label: str) -> None:
        """
        SCENARIO: Status label in a different case/spelling
        EXPECTED: Matches ready-to-submit
        """
        result = StatusFilter().apply(active_filings, FilterSpec(statuses={label}))

        assert result.passed_ids == ["3"]

    def test_empty_selection_passes_everything(self, active_filings: List[Filing]) -> None:
        result = StatusFilter().apply(active_filings, FilterSpec(statuses=set()))

        assert result.passed_ids == ["1", "2", "3", "4"]

    @pytest.mark.parametrize("tab", [Tab.SUBMITTED, Tab.RETURNED, Tab.REPORTS])
    def test_ignored_outside_active_tab(self, active_filings: List[Filing], tab: Tab) -> None:
        """
        SCENARIO: Non-empty selection on another tab
        EXPECTED: Stage inactive
        """
        spec = FilterSpec(tab=tab, statuses={"prepared"})

        result = StatusFilter().apply(active_filings, spec)

        assert result.passed_count == 4

    def test_unknown_label_matches_nothing(self, active_filings: List[Filing]) -> None:
        result = StatusFilter().apply(active_filings, FilterSpec(statuses={"archived"}))

        assert result.passed_ids == []
