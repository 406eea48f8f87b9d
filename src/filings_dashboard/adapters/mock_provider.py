"""
Mock Returns Provider.

A fake data provider for development and testing. Serves the fixed
sample set of twelve filings the portal ships with.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from filings_dashboard.domain.entities import (
    Filing,
    FundStructure,
    FundType,
    PendingRequest,
    PendingRequestType,
    ReturnStatus,
)

logger = logging.getLogger(__name__)

_Q4_2024 = ("Q4 2024", "Oct 1 - Dec 31, 2024")
_Q3_2024 = ("Q3 2024", "Jul 1 - Sep 30, 2024")
_Q2_2024 = ("Q2 2024", "Apr 1 - Jun 30, 2024")
_Q1_2024 = ("Q1 2024", "Jan 1 - Mar 31, 2024")
_FY_2024 = ("FY 2024", "Jan 1 - Dec 31, 2024")
_FY_2023 = ("FY 2023", "Jan 1 - Dec 31, 2023")


def _filing(
    filing_id: str,
    fund_name: str,
    fund_type: FundType,
    period: tuple,
    due_date: str,
    due_date_description: str,
    status: ReturnStatus,
    extensions_used: int,
    extension_description: str,
    can_request_extension: bool,
    fund_structure: Optional[FundStructure] = None,
    parent_fund_name: Optional[str] = None,
    pending: Optional[PendingRequestType] = None,
) -> Filing:
    return Filing(
        id=filing_id,
        entity_id=str(100 + int(filing_id)),
        fund_name=fund_name,
        fund_type=fund_type,
        fund_structure=fund_structure,
        parent_fund_name=parent_fund_name,
        period=period[0],
        period_description=period[1],
        due_date=due_date,
        due_date_description=due_date_description,
        status=status,
        extensions_used=extensions_used,
        used_extension_days=30 * extensions_used,
        max_extensions=3,
        extension_description=extension_description,
        can_request_extension=can_request_extension,
        is_urgent=False,
        pending_request=PendingRequest(type=pending) if pending else None,
    )


MUTUAL, PRIVATE = FundType.MUTUAL, FundType.PRIVATE
SINGLE, MULTI = FundStructure.SINGLE, FundStructure.MULTI

SEED_FILINGS: List[Filing] = [
    _filing("1", "Healthcare Innovation Fund", MUTUAL, _Q4_2024, "March 31, 2025",
            "5 days remaining", ReturnStatus.AVAILABLE, 0,
            "All extensions available", True, fund_structure=SINGLE),
    _filing("2", "Technology Growth Fund", PRIVATE, _FY_2024, "June 30, 2025",
            "125 days remaining", ReturnStatus.AVAILABLE, 1,
            "60 days remaining", True, pending=PendingRequestType.EXTENSION),
    _filing("3", "Emerging Markets Equity Fund", MUTUAL, _FY_2024, "September 30, 2024",
            "91 days past filing due date", ReturnStatus.OUTSTANDING, 3,
            "All extensions used", False, fund_structure=SINGLE),
    _filing("4", "Real Estate Investment Fund", PRIVATE, _Q2_2024, "November 30, 2024",
            "Filed on December 30, 2024 with extension", ReturnStatus.PROCESSED, 1,
            "Extension approved - 30 days", False),
    _filing("5", "Global Equity Sub-Fund", MUTUAL, _Q4_2024, "March 31, 2025",
            "45 days remaining", ReturnStatus.AVAILABLE, 0,
            "All extensions available", True, fund_structure=MULTI,
            parent_fund_name="Sustainable Growth Multi-Fund Complex",
            pending=PendingRequestType.WAIVER),
    _filing("6", "Infrastructure Development Fund", PRIVATE, _Q3_2024, "March 31, 2025",
            "Prepared for submission", ReturnStatus.PREPARED, 1,
            "Prepared by filing team", True),
    _filing("7", "Small Cap Growth Fund", MUTUAL, _Q2_2024, "December 20, 2024",
            "Ready for submission", ReturnStatus.READY_TO_SUBMIT, 0,
            "Awaiting final submission", True, fund_structure=SINGLE,
            pending=PendingRequestType.DEFERRAL),
    _filing("8", "Asia Pacific Growth Fund", MUTUAL, _Q3_2024, "January 15, 2025",
            "Returned on January 20, 2025", ReturnStatus.RETURNED, 1,
            "Amendments required - resubmit within 30 days", False, fund_structure=SINGLE),
    _filing("9", "Sustainable Energy Fund", PRIVATE, _FY_2023, "September 30, 2024",
            "Returned on November 5, 2024", ReturnStatus.RETURNED, 2,
            "Incomplete documentation - 1 extension remaining", True),
    _filing("10", "European Bond Fund", MUTUAL, _Q1_2024, "July 31, 2024",
            "Returned on October 10, 2024", ReturnStatus.RETURNED, 0,
            "Calculation errors identified - all extensions available", True,
            fund_structure=SINGLE),
    _filing("11", "Emerging Markets Bond Fund", MUTUAL, _Q4_2024, "March 31, 2025",
            "92 days remaining", ReturnStatus.AVAILABLE, 2,
            "30 days remaining", True, fund_structure=SINGLE),
    _filing("12", "Commodity Trading Fund", PRIVATE, _FY_2024, "June 30, 2025",
            "182 days remaining", ReturnStatus.AVAILABLE, 0,
            "All extensions available", True),
]


class MockReturnsProvider:
    """Fake data provider for development and testing."""

    def __init__(self, filings: Optional[List[Filing]] = None) -> None:
        """
        Initialize mock provider.

        Args:
            filings: Filings to serve (defaults to the twelve sample filings)
        """
        self._filings = list(filings) if filings is not None else list(SEED_FILINGS)
        self._by_id = {f.id: f for f in self._filings}

    def list_all(self) -> List[Filing]:
        """Get all mock filings in seed order."""
        logger.debug(f"Serving {len(self._filings)} mock filings")
        return list(self._filings)

    def get_by_id(self, filing_id: str) -> Optional[Filing]:
        """Get a mock filing, or None if unknown."""
        return self._by_id.get(filing_id)
