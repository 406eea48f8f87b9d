"""
Unit Tests for FilingsDashboard.

Test Aspects Covered:
    ✅ Business Logic: Setter reset rules, reset, navigation
    ✅ Error Handling: Provider failure, invalid options
    ✅ Edge Cases: Out-of-range navigation, re-entrant changes
"""

from __future__ import annotations

from typing import List
from unittest.mock import Mock

import pytest

from filings_dashboard.adapters.mock_provider import MockReturnsProvider
from filings_dashboard.domain.entities import Filing, FundTypeFilter, Tab
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.domain.value_objects import FilterResult
from filings_dashboard.filters import default_stages
from filings_dashboard.pipeline.filter_pipeline import FilterPipeline
from filings_dashboard.resilience.error_handler import (
    ErrorHandler,
    ProviderError,
    RetryConfig,
    RetryExhausted,
)
from filings_dashboard.session.dashboard import FilingsDashboard
from filings_dashboard.validation.option_parser import ValidationError


def ids(filings: List[Filing]) -> List[str]:
    return [f.id for f in filings]


@pytest.fixture
def big_dashboard(make_filing) -> FilingsDashboard:
    """30 active filings -> 3 pages of 12."""
    provider = MockReturnsProvider([make_filing(str(i)) for i in range(1, 31)])
    board = FilingsDashboard(provider=provider)
    board.load()
    return board


class TestLoading:
    """Test cases for load()."""

    def test_initial_state_before_load(self, mock_provider) -> None:
        board = FilingsDashboard(provider=mock_provider)

        assert not board.is_loaded
        assert board.filtered_records == []
        assert board.page_count == 1
        assert board.current_page == 1

    def test_load_applies_current_filters(self, dashboard: FilingsDashboard) -> None:
        """
        SCENARIO: Sample data, default active tab
        EXPECTED: 8 active filings on one page
        """
        assert dashboard.is_loaded
        assert len(dashboard.all_records) == 12
        assert ids(dashboard.filtered_records) == ["1", "2", "3", "5", "6", "7", "11", "12"]
        assert dashboard.page_count == 1

    def test_provider_failure_surfaces(self) -> None:
        """
        SCENARIO: Provider raises ProviderError, no retry handler
        EXPECTED: ProviderError propagates, dashboard stays unloaded
        """
        provider = Mock()
        provider.list_all.side_effect = ProviderError("offline")
        board = FilingsDashboard(provider=provider)

        with pytest.raises(ProviderError, match="offline"):
            board.load()
        assert not board.is_loaded

    def test_provider_failure_after_retries(self) -> None:
        """
        SCENARIO: Provider keeps failing with a retry handler
        EXPECTED: RetryExhausted (a ProviderError) after max attempts
        """
        provider = Mock()
        provider.list_all.side_effect = ProviderError("offline")
        handler = ErrorHandler(RetryConfig(max_attempts=3, base_delay_seconds=0), sleep=lambda s: None)
        board = FilingsDashboard(provider=provider, error_handler=handler)

        with pytest.raises(RetryExhausted) as exc_info:
            board.load()

        assert isinstance(exc_info.value, ProviderError)
        assert provider.list_all.call_count == 3

    def test_transient_failure_recovers(self, seed_filings) -> None:
        provider = Mock()
        provider.list_all.side_effect = [ProviderError("blip"), seed_filings]
        handler = ErrorHandler(RetryConfig(base_delay_seconds=0), sleep=lambda s: None)
        board = FilingsDashboard(provider=provider, error_handler=handler)

        board.load()

        assert len(board.all_records) == 12


class TestSetters:
    """Test cases for filter setters."""

    def test_set_tab_clears_statuses_and_page(self, dashboard: FilingsDashboard) -> None:
        """
        SCENARIO: Statuses selected, then tab changes
        EXPECTED: Statuses cleared, page reset to 1
        """
        dashboard.set_statuses(["available"])

        dashboard.set_tab("returned")

        assert dashboard.spec.tab is Tab.RETURNED
        assert dashboard.spec.statuses == set()
        assert dashboard.current_page == 1
        assert ids(dashboard.filtered_records) == ["8", "9", "10"]

    @pytest.mark.parametrize(
        "setter, value",
        [
            ("set_tab", "submitted"),
            ("set_fund_type", "mutual"),
            ("set_statuses", ["available"]),
            ("set_period_years", ["2024"]),
            ("set_search_query", "fund"),
        ],
    )
    def test_every_setter_resets_page(self, big_dashboard: FilingsDashboard, setter: str, value) -> None:
        big_dashboard.go_to_page(3)
        assert big_dashboard.current_page == 3

        getattr(big_dashboard, setter)(value)

        assert big_dashboard.current_page == 1

    def test_set_fund_type(self, dashboard: FilingsDashboard) -> None:
        dashboard.set_fund_type("private")

        assert dashboard.spec.fund_type is FundTypeFilter.PRIVATE
        assert ids(dashboard.filtered_records) == ["2", "6", "12"]

    def test_set_fund_type_rejects_unknown(self, dashboard: FilingsDashboard) -> None:
        with pytest.raises(ValidationError) as exc_info:
            dashboard.set_fund_type("hedge")

        assert exc_info.value.field == "fund_type"

    def test_status_selection_ignored_after_switch_to_submitted(self, dashboard: FilingsDashboard) -> None:
        """
        SCENARIO: Submitted tab with statuses selected via configure
        EXPECTED: Exactly the processed filings
        """
        dashboard.configure(tab="submitted", statuses=["available"])

        assert ids(dashboard.filtered_records) == ["4"]

    def test_unknown_tab_behaves_as_reports(self, dashboard: FilingsDashboard) -> None:
        dashboard.set_fund_type("mutual")

        dashboard.set_tab("analytics")

        assert dashboard.spec.tab is Tab.REPORTS
        assert len(dashboard.filtered_records) == 12
        assert dashboard.tab_content.title == "Returns Filing & Extension Management Portal"

    def test_reset_filters_keeps_tab(self, dashboard: FilingsDashboard) -> None:
        """
        SCENARIO: Many filters set on the returned tab, then reset
        EXPECTED: Filters cleared, tab unchanged, page 1
        """
        dashboard.set_tab("returned")
        dashboard.configure(fundType="private", periodYears=["2023"], searchQuery="energy")
        assert ids(dashboard.filtered_records) == ["9"]

        dashboard.reset_filters()

        spec = dashboard.spec
        assert spec.tab is Tab.RETURNED
        assert spec.fund_type is FundTypeFilter.ALL
        assert spec.statuses == set()
        assert spec.period_years == set()
        assert spec.search_query == ""
        assert spec.page == 1
        assert ids(dashboard.filtered_records) == ["8", "9", "10"]

    def test_spec_is_a_copy(self, dashboard: FilingsDashboard) -> None:
        snapshot = dashboard.spec
        snapshot.period_years.add("1999")

        assert dashboard.spec.period_years == set()


class TestNavigation:
    """Test cases for page navigation."""

    def test_next_and_previous(self, big_dashboard: FilingsDashboard) -> None:
        big_dashboard.next_page()
        assert big_dashboard.current_page == 2
        assert ids(big_dashboard.paged_slice)[0] == "13"

        big_dashboard.previous_page()
        assert big_dashboard.current_page == 1

    def test_next_stops_at_last_page(self, big_dashboard: FilingsDashboard) -> None:
        for _ in range(5):
            big_dashboard.next_page()

        assert big_dashboard.current_page == 3
        assert len(big_dashboard.paged_slice) == 6

    def test_previous_stops_at_first_page(self, big_dashboard: FilingsDashboard) -> None:
        big_dashboard.previous_page()

        assert big_dashboard.current_page == 1

    @pytest.mark.parametrize("target", [0, -1, 4, 100])
    def test_go_to_page_out_of_range_is_noop(self, big_dashboard: FilingsDashboard, target: int) -> None:
        """
        SCENARIO: go_to_page outside [1, page_count]
        EXPECTED: Current page unchanged
        """
        big_dashboard.go_to_page(2)

        big_dashboard.go_to_page(target)

        assert big_dashboard.current_page == 2

    def test_configure_page_only(self, big_dashboard: FilingsDashboard) -> None:
        big_dashboard.configure(page=3)
        assert big_dashboard.current_page == 3

        big_dashboard.configure(page="2")
        assert big_dashboard.current_page == 2

    def test_configure_filters_then_page(self, big_dashboard: FilingsDashboard) -> None:
        """
        SCENARIO: Filter change and explicit page in one call
        EXPECTED: Page reset by the filter, then moved to the requested page
        """
        big_dashboard.go_to_page(3)

        big_dashboard.configure({"searchQuery": "test", "page": 2})

        assert big_dashboard.current_page == 2


class TestConfigureValidation:
    """Test cases for configure() option validation."""

    def test_unknown_option(self, dashboard: FilingsDashboard) -> None:
        with pytest.raises(ValidationError, match="Unknown filter option"):
            dashboard.configure(sortBy="name")

    def test_invalid_values_leave_state_untouched(self, dashboard: FilingsDashboard) -> None:
        before = dashboard.spec

        with pytest.raises(ValidationError):
            dashboard.configure(fundType="hedge", searchQuery="bond")

        assert dashboard.spec == before

    def test_empty_configure_is_noop(self, dashboard: FilingsDashboard) -> None:
        before = dashboard.spec

        dashboard.configure()

        assert dashboard.spec == before


class TestReentrancy:
    """Test cases for changes issued while the pipeline runs."""

    def test_nested_change_triggers_one_more_pass(self, mock_provider) -> None:
        """
        SCENARIO: A stage changes the search text during the first pass
        EXPECTED: Pipeline runs once more and the final result reflects it
        """

        class MutatingStage:
            name = "mutating"

            def __init__(self) -> None:
                self.dashboard = None
                self.calls = 0

            def apply(self, filings, spec) -> FilterResult:
                self.calls += 1
                if self.calls == 1:
                    self.dashboard.set_search_query("bond")
                return FilterResult(passed_ids=[f.id for f in filings])

        stage = MutatingStage()
        board = FilingsDashboard(
            provider=mock_provider,
            pipeline=FilterPipeline(filters=default_stages() + [stage]),
        )
        stage.dashboard = board

        board.load()

        assert stage.calls == 2
        assert ids(board.filtered_records) == ["11"]


class TestAccessors:
    """Test cases for derived read accessors."""

    def test_available_years_newest_first(self, dashboard: FilingsDashboard) -> None:
        assert dashboard.available_years == ["2024", "2023"]

    def test_initial_spec_respected(self, mock_provider) -> None:
        board = FilingsDashboard(
            provider=mock_provider,
            initial_spec=FilterSpec(tab=Tab.SUBMITTED),
        )

        board.load()

        assert ids(board.filtered_records) == ["4"]
        assert board.tab_content.show_status_filter is False

    def test_initial_page_clamped_before_load(self, mock_provider) -> None:
        """
        SCENARIO: Session created with page 5 and nothing loaded yet
        EXPECTED: current page within the single empty page
        """
        board = FilingsDashboard(provider=mock_provider, initial_spec=FilterSpec(page=5))

        assert board.page_count == 1
        assert board.current_page == 1

    def test_non_year_selection_matches_nothing(self, dashboard: FilingsDashboard) -> None:
        dashboard.set_period_years(["24"])

        assert dashboard.spec.period_years == {"24"}
        assert dashboard.filtered_records == []
        assert dashboard.page_count == 1
