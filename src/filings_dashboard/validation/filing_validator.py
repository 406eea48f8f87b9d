"""
Filing Validator - Validate a Loaded Filing Set.

Per-record invariants (extension budget) are enforced by the Filing model
itself. This validator checks the set as a whole:
    - Identifiers are unique (error)
    - Period labels carry a year (warning)
    - Every status is reachable from a filtering tab (warning)
    - Multi-fund filings name their parent fund (warning)

Design Notes:
    - Warnings for suspicious data (don't fail)
    - Logs anomalies for investigation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Set

from filings_dashboard.domain.entities import Filing
from filings_dashboard.filters.tab import TAB_STATUSES

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of filing-set validation."""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    @property
    def has_issues(self) -> bool:
        return len(self.errors) > 0 or len(self.warnings) > 0


class FilingValidator:
    """Validates a filing set as returned by a provider."""

    def validate(self, filings: Sequence[Filing]) -> ValidationResult:
        result = ValidationResult()
        seen: Set[str] = set()
        tabbed = set().union(*TAB_STATUSES.values())

        for filing in filings:
            if filing.id in seen:
                result.add_error(f"Duplicate filing id {filing.id!r}")
            seen.add(filing.id)

            if filing.period_year is None:
                result.add_warning(
                    f"{filing.id}: period {filing.period!r} has no year, "
                    "never matches a year filter"
                )
            if filing.status not in tabbed:
                result.add_warning(
                    f"{filing.id}: status {filing.status.value} is not on any filtering tab"
                )
            if filing.is_multi_fund and not filing.parent_fund_name:
                result.add_warning(f"{filing.id}: multi-fund filing without parent fund name")

        for warning in result.warnings:
            logger.warning(warning)
        for error in result.errors:
            logger.error(error)

        return result
