"""
Filter Stage Protocol.

Defines the abstract interface for filter stages. Each filter stage
implements one narrowing step (tab, fund type, status, period year,
search) while conforming to a common interface.

The filter stage is responsible for:
    - Deciding whether it is active for the current FilterSpec
    - Returning passed filings in input order with rejection reasons

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Filters are stateless (all state via FilterSpec)
    - Stages never widen the set they are given
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filings_dashboard.domain.entities import Filing
    from filings_dashboard.domain.filter_spec import FilterSpec
    from filings_dashboard.domain.value_objects import FilterResult


@runtime_checkable
class FilterStage(Protocol):
    """Abstract interface for filter stages."""

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        ...

    def apply(self, filings: List[Filing], spec: FilterSpec) -> FilterResult:
        """
        Apply filter logic to filings.

        Args:
            filings: Filings produced by the previous stage
            spec: Current filter selection

        Returns:
            FilterResult with passed/rejected ids and reasons
        """
        ...
