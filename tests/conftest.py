"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

import pytest

from filings_dashboard.adapters.mock_provider import SEED_FILINGS, MockReturnsProvider
from filings_dashboard.config.models import DashboardConfig
from filings_dashboard.domain.entities import Filing, FundType, ReturnStatus
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.session.dashboard import FilingsDashboard

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def repo_root() -> Path:
    """Repository root (holds config/)."""
    return REPO_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory of YAML test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_filings_path(fixtures_dir: Path) -> Path:
    """Path to the sample filings file."""
    return fixtures_dir / "sample_filings.yaml"


@pytest.fixture
def seed_filings() -> List[Filing]:
    """The twelve sample filings."""
    return list(SEED_FILINGS)


@pytest.fixture
def mock_provider() -> MockReturnsProvider:
    """Create mock provider for testing."""
    return MockReturnsProvider()


@pytest.fixture
def default_config() -> DashboardConfig:
    """Create default dashboard configuration."""
    return DashboardConfig()


@pytest.fixture
def spec() -> FilterSpec:
    """Fresh filter specification (active tab, no filters)."""
    return FilterSpec()


@pytest.fixture
def make_filing() -> Callable[..., Filing]:
    """Factory for filings with sensible defaults."""

    def _make(filing_id: str = "1", **overrides: Any) -> Filing:
        fields = {
            "id": filing_id,
            "entity_id": str(100 + int(filing_id)) if filing_id.isdigit() else filing_id,
            "fund_name": f"Test Fund {filing_id}",
            "fund_type": FundType.MUTUAL,
            "period": "Q4 2024",
            "status": ReturnStatus.AVAILABLE,
            "extensions_used": 0,
            "max_extensions": 3,
            "can_request_extension": True,
        }
        fields.update(overrides)
        return Filing(**fields)

    return _make


@pytest.fixture
def dashboard(mock_provider: MockReturnsProvider) -> FilingsDashboard:
    """Dashboard over the sample filings, already loaded."""
    board = FilingsDashboard(provider=mock_provider)
    board.load()
    return board
