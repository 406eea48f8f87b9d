"""
Predicate Filter Base.

Shared apply() loop for stages that keep or drop each filing on its own.
A stage that is inactive for the current FilterSpec passes everything
through untouched.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from filings_dashboard.domain.entities import Filing
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.domain.value_objects import FilterResult


class PredicateFilter:
    """Base class for per-filing filter stages."""

    stage_name = "predicate_filter"

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return self.stage_name

    def is_active(self, spec: FilterSpec) -> bool:
        return True

    def apply(self, filings: List[Filing], spec: FilterSpec) -> FilterResult:
        """
        Apply the stage to filings.

        Args:
            filings: Filings produced by the previous stage
            spec: Current filter selection

        Returns:
            FilterResult with passed/rejected ids, input order preserved
        """
        if not self.is_active(spec):
            return FilterResult(passed_ids=[f.id for f in filings])

        passed: List[str] = []
        rejected: List[str] = []
        reasons: Dict[str, str] = {}

        for filing in filings:
            keep, reason = self._check_filing(filing, spec)
            if keep:
                passed.append(filing.id)
            else:
                rejected.append(filing.id)
                reasons[filing.id] = reason

        return FilterResult(
            passed_ids=passed,
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )

    def _check_filing(self, filing: Filing, spec: FilterSpec) -> Tuple[bool, str]:
        raise NotImplementedError
