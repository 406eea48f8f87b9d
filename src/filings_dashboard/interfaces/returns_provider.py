"""
Returns Provider Protocol.

Defines the abstract interface for data access. All data sources
(mock, file, network) must implement this protocol to back the
filings dashboard.

The provider is responsible for:
    - Listing every filing in a stable order
    - Looking up a single filing by identifier

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Repeated calls within a session return the same set and order
    - A missing identifier is a normal outcome (None), not an error
    - Unreachable sources raise ProviderError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from filings_dashboard.domain.entities import Filing


@runtime_checkable
class ReturnsProvider(Protocol):
    """Abstract interface for filing data access."""

    def list_all(self) -> List[Filing]:
        """
        Get all filings.

        Returns:
            Filings in provider order

        Raises:
            ProviderError: If the data source cannot be read
        """
        ...

    def get_by_id(self, filing_id: str) -> Optional[Filing]:
        """
        Get a single filing.

        Args:
            filing_id: Filing identifier

        Returns:
            The filing, or None if no such filing exists
        """
        ...
