"""
In-Memory Payment Handoff.

Holds submitted extension requests keyed by filing id until the payment
step picks them up.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from filings_dashboard.domain.entities import ExtensionRequestData

logger = logging.getLogger(__name__)


class InMemoryPaymentHandoff:
    """Stores submitted requests for the payment step."""

    def __init__(self) -> None:
        self._requests: Dict[str, ExtensionRequestData] = {}

    def submit(self, filing_id: str, request: ExtensionRequestData) -> None:
        if filing_id in self._requests:
            logger.info(f"Replacing pending payment request for filing {filing_id}")
        self._requests[filing_id] = request

    def get(self, filing_id: str) -> Optional[ExtensionRequestData]:
        return self._requests.get(filing_id)

    def payment_route(self, filing_id: str) -> str:
        """Route of the payment step for a filing."""
        return f"/payment/{filing_id}"

    def __len__(self) -> int:
        return len(self._requests)
