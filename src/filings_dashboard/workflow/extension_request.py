"""
Extension Request Flow.

Drives the extension-request form for one filing:

    open(id) --> FORM --continue_with(data)--> SUBMITTED
                   |
                   +--------back()----------> EXITED

Opening an unknown id lands in NOT_FOUND. For a multi-fund filing the
form starts with one sub-fund line per filing under the same parent
fund. Those lines live only while the form is open.

No field validation is applied beyond what the request model's types
require; checks belong to the downstream payment step.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, cast

from filings_dashboard.domain.entities import (
    ExtensionRequestData,
    ExtensionType,
    Filing,
    SubFund,
)
from filings_dashboard.interfaces.payment_handoff import PaymentHandoff
from filings_dashboard.interfaces.returns_provider import ReturnsProvider

logger = logging.getLogger(__name__)


class FlowState(str, Enum):
    IDLE = "idle"
    NOT_FOUND = "not_found"
    FORM = "form"
    SUBMITTED = "submitted"
    EXITED = "exited"


class FlowStateError(Exception):
    """Raised when an action is not allowed in the current state."""

    def __init__(self, action: str, state: FlowState) -> None:
        super().__init__(f"Cannot {action} while extension request is {state.value}")
        self.action = action
        self.state = state


def build_sub_funds(filing: Filing, siblings: List[Filing]) -> List[SubFund]:
    """
    One request line per sub-fund of the filing's parent fund.

    Args:
        filing: Multi-fund filing the form was opened for
        siblings: Candidate filings (usually the provider's full set)

    Returns:
        Sub-fund entries in provider order, empty for single funds
    """
    if not filing.is_multi_fund:
        return []

    members = [
        f
        for f in siblings
        if f.is_multi_fund
        and filing.parent_fund_name
        and f.parent_fund_name == filing.parent_fund_name
    ]
    if not any(f.id == filing.id for f in members):
        members.insert(0, filing)

    total = len(members)
    return [
        SubFund(
            id=f.id,
            name=f.fund_name,
            description=f"Sub-fund {index} of {total}",
            current_filing_date=f.due_date,
            extension_type=ExtensionType.NONE,
            extensions_used=f.extensions_used,
            used_extension_days=f.used_extension_days,
            max_extensions=f.max_extensions,
            entity_id=f.entity_id,
        )
        for index, f in enumerate(members, start=1)
    ]


class ExtensionRequestFlow:
    """Form-to-handoff flow of one extension request."""

    def __init__(self, provider: ReturnsProvider, handoff: PaymentHandoff) -> None:
        self.provider = provider
        self.handoff = handoff
        self.state = FlowState.IDLE
        self.filing_id: Optional[str] = None
        self.filing: Optional[Filing] = None
        self.sub_funds: List[SubFund] = []
        self.submitted_request: Optional[ExtensionRequestData] = None

    def open(self, filing_id: str) -> FlowState:
        """
        Load the filing and enter the form.

        Returns:
            FORM, or NOT_FOUND if the provider has no such filing

        Raises:
            ProviderError: If the provider cannot be read
        """
        self.filing_id = filing_id
        self.filing = self.provider.get_by_id(filing_id)
        self.submitted_request = None

        if self.filing is None:
            logger.info(f"Extension request opened for unknown filing {filing_id}")
            self.sub_funds = []
            self.state = FlowState.NOT_FOUND
            return self.state

        if self.filing.is_multi_fund:
            self.sub_funds = build_sub_funds(self.filing, self.provider.list_all())
        else:
            self.sub_funds = []

        self.state = FlowState.FORM
        logger.debug(
            f"Extension form for filing {filing_id} "
            f"({len(self.sub_funds)} sub-fund line(s))"
        )
        return self.state

    def continue_with(self, request: ExtensionRequestData) -> FlowState:
        """Hand the request to the payment step keyed by filing id."""
        self._require_form("continue")
        filing_id = cast(str, self.filing_id)

        self.handoff.submit(filing_id, request)
        self.submitted_request = request
        self.sub_funds = []
        self.state = FlowState.SUBMITTED
        logger.info(
            f"Extension request for filing {filing_id} submitted "
            f"({request.extension_type.value})"
        )
        return self.state

    def back(self) -> FlowState:
        """Leave the form without submitting."""
        self._require_form("go back")
        self.sub_funds = []
        self.state = FlowState.EXITED
        return self.state

    def _require_form(self, action: str) -> None:
        if self.state is not FlowState.FORM:
            raise FlowStateError(action, self.state)
