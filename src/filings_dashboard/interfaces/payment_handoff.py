"""
Payment Handoff Protocol.

The extension-request flow ends by handing the collected request to a
downstream payment step, keyed by filing identifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filings_dashboard.domain.entities import ExtensionRequestData


@runtime_checkable
class PaymentHandoff(Protocol):
    """Receives submitted extension requests."""

    def submit(self, filing_id: str, request: ExtensionRequestData) -> None:
        ...
