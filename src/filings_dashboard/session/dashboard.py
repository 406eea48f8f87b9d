"""
Filings Dashboard - Session State over the Filter Pipeline.

The FilingsDashboard owns one FilterSpec, pulls every filing from the
provider once, and re-runs the pipeline after each change.

Rules:
    - Every filter setter resets the page to 1
    - Changing tab also clears the status selection
    - reset_filters() leaves the tab alone
    - Out-of-range navigation is a no-op
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from filings_dashboard.domain.entities import Filing, FundTypeFilter, Tab, TabContent
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.domain.value_objects import PageResult, StageResult
from filings_dashboard.interfaces.returns_provider import ReturnsProvider
from filings_dashboard.pipeline.filter_pipeline import FilterPipeline
from filings_dashboard.pipeline.paginator import DEFAULT_PAGE_SIZE, clamp_page
from filings_dashboard.resilience.error_handler import ErrorHandler
from filings_dashboard.validation.option_parser import OptionParser

logger = logging.getLogger(__name__)


class FilingsDashboard:
    """Filterable, paginated view over a provider's filings."""

    def __init__(
        self,
        provider: ReturnsProvider,
        pipeline: Optional[FilterPipeline] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_spec: Optional[FilterSpec] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize dashboard session.

        Args:
            provider: Source of filings
            pipeline: Filter pipeline (defaults to the standard stages)
            page_size: Filings per page
            initial_spec: Starting filter selection
            error_handler: Retry policy for provider reads (optional)
        """
        self.provider = provider
        self.pipeline = pipeline or FilterPipeline()
        self.page_size = page_size
        self.error_handler = error_handler
        self._spec = initial_spec.copy() if initial_spec else FilterSpec()
        self._records: Tuple[Filing, ...] = ()
        self._result = PageResult(page_size=page_size)
        self._loaded = False
        self._parser = OptionParser()
        # Nothing loaded yet: one empty page
        self._spec.page = clamp_page(self._spec.page, self._result.page_count)

        # Re-entrancy guard for changes made while the pipeline runs
        self._refreshing = False
        self._refresh_pending = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """
        Pull all filings from the provider and apply the current filters.

        Raises:
            ProviderError: If the provider cannot be read
        """
        if self.error_handler:
            records = self.error_handler.retry(
                self.provider.list_all, operation_name="list_all"
            )
        else:
            records = self.provider.list_all()

        self._records = tuple(records)
        self._loaded = True
        logger.info(f"Loaded {len(self._records)} filings")
        self._refresh()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def spec(self) -> FilterSpec:
        """Copy of the current filter selection."""
        return self._spec.copy()

    @property
    def all_records(self) -> List[Filing]:
        return list(self._records)

    @property
    def filtered_records(self) -> List[Filing]:
        return list(self._result.filtered_records)

    @property
    def page_count(self) -> int:
        return self._result.page_count

    @property
    def current_page(self) -> int:
        return self._spec.page

    @property
    def paged_slice(self) -> List[Filing]:
        return list(self._result.page_slice)

    @property
    def total_count(self) -> int:
        return self._result.total_count

    @property
    def audit_trail(self) -> List[StageResult]:
        return list(self._result.audit_trail)

    @property
    def tab_content(self) -> TabContent:
        return self._spec.tab.content

    @property
    def available_years(self) -> List[str]:
        """Distinct period years in the data, newest first."""
        years = {f.period_year for f in self._records if f.period_year}
        return sorted(years, reverse=True)

    # ------------------------------------------------------------------
    # Filter setters
    # ------------------------------------------------------------------

    def set_tab(self, tab: Union[Tab, str]) -> None:
        self._spec.tab = Tab.parse(tab)
        self._spec.statuses = set()
        self._reset_page_and_refresh()

    def set_fund_type(self, fund_type: Union[FundTypeFilter, str]) -> None:
        self._spec.fund_type = self._parser.parse_fund_type(fund_type)
        self._reset_page_and_refresh()

    def set_statuses(self, statuses: Iterable[str]) -> None:
        self._spec.statuses = self._parser.parse_statuses(statuses)
        self._reset_page_and_refresh()

    def set_period_years(self, years: Iterable[str]) -> None:
        self._spec.period_years = self._parser.parse_period_years(years)
        self._reset_page_and_refresh()

    def set_search_query(self, query: str) -> None:
        self._spec.search_query = self._parser.parse_search_query(query)
        self._reset_page_and_refresh()

    def reset_filters(self) -> None:
        """Clear every filter except the tab."""
        self._spec.fund_type = FundTypeFilter.ALL
        self._spec.statuses = set()
        self._spec.period_years = set()
        self._spec.search_query = ""
        self._reset_page_and_refresh()

    def configure(self, options: Optional[Dict[str, Any]] = None, **kwargs: Any) -> None:
        """
        Set several options by name in one pass.

        Recognized names: tab, fundType, statuses, periodYears, searchQuery,
        page. Filter options reset the page to 1; an explicit page is then
        applied like go_to_page(). Changing tab clears statuses unless
        statuses are given too.

        Raises:
            ValidationError: If any option name or value is not accepted
        """
        merged = dict(options or {})
        merged.update(kwargs)
        parsed = self._parser.parse_all(merged)
        if not parsed:
            return

        page = parsed.pop("page", None)
        if parsed:
            if "tab" in parsed:
                self._spec.tab = parsed["tab"]
                self._spec.statuses = set()
            for field in ("fund_type", "statuses", "period_years", "search_query"):
                if field in parsed:
                    setattr(self._spec, field, parsed[field])
            self._reset_page_and_refresh()

        if page is not None:
            self.go_to_page(page)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next_page(self) -> None:
        if self._spec.page < self.page_count:
            self._set_page(self._spec.page + 1)

    def previous_page(self) -> None:
        if self._spec.page > 1:
            self._set_page(self._spec.page - 1)

    def go_to_page(self, page: int) -> None:
        if 1 <= page <= self.page_count:
            self._set_page(page)
        else:
            logger.debug(f"Ignoring go_to_page({page}); {self.page_count} page(s)")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_page(self, page: int) -> None:
        self._spec.page = page
        self._refresh()

    def _reset_page_and_refresh(self) -> None:
        self._spec.page = 1
        self._refresh()

    def _refresh(self) -> None:
        """Re-run the pipeline; a nested call is folded into one more pass."""
        if self._refreshing:
            self._refresh_pending = True
            return

        self._refreshing = True
        try:
            while True:
                self._refresh_pending = False
                result = self.pipeline.apply(self._records, self._spec, self.page_size)
                if not self._refresh_pending:
                    break
            self._result = result
            self._spec.page = result.current_page
        finally:
            self._refreshing = False
