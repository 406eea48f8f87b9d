"""
Bootstrap - Wire a Dashboard from Configuration.

    >>> from filings_dashboard.bootstrap import create_dashboard
    >>> dashboard = create_dashboard(load_config("config/default.yaml"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from filings_dashboard.adapters.console_logger import ConsoleAuditLogger
from filings_dashboard.adapters.file_provider import FileReturnsProvider
from filings_dashboard.adapters.mock_provider import MockReturnsProvider
from filings_dashboard.adapters.payment_handoff import InMemoryPaymentHandoff
from filings_dashboard.config.models import DashboardConfig
from filings_dashboard.domain.filter_spec import FilterSpec
from filings_dashboard.interfaces.payment_handoff import PaymentHandoff
from filings_dashboard.interfaces.returns_provider import ReturnsProvider
from filings_dashboard.pipeline.filter_pipeline import FilterPipeline
from filings_dashboard.resilience.error_handler import ErrorHandler, RetryConfig
from filings_dashboard.session.dashboard import FilingsDashboard
from filings_dashboard.workflow.extension_request import ExtensionRequestFlow


def create_provider(
    config: DashboardConfig,
    base_path: Optional[Path] = None,
) -> ReturnsProvider:
    """Build the provider named by config.provider."""
    if config.provider.kind == "file":
        path = Path(config.provider.path)
        if not path.is_absolute() and base_path is not None:
            path = base_path / path
        return FileReturnsProvider(path)
    return MockReturnsProvider()


def create_dashboard(
    config: Optional[DashboardConfig] = None,
    provider: Optional[ReturnsProvider] = None,
    base_path: Optional[Path] = None,
) -> FilingsDashboard:
    """
    Create a dashboard session from configuration.

    Args:
        config: Dashboard configuration (defaults to DashboardConfig())
        provider: Provider override; built from config when None
        base_path: Base path for a relative provider.path

    Returns:
        Unloaded FilingsDashboard; call load() before reading results
    """
    config = config or DashboardConfig()
    audit_logger = ConsoleAuditLogger(verbose=True) if config.verbose_audit else None

    return FilingsDashboard(
        provider=provider or create_provider(config, base_path),
        pipeline=FilterPipeline(audit_logger=audit_logger),
        page_size=config.pagination.page_size,
        initial_spec=FilterSpec(
            tab=config.defaults.tab,
            fund_type=config.defaults.fund_type,
        ),
        error_handler=ErrorHandler(RetryConfig.from_settings(config.retry)),
    )


def create_extension_flow(
    provider: ReturnsProvider,
    handoff: Optional[PaymentHandoff] = None,
) -> ExtensionRequestFlow:
    """Create an extension-request flow over the given provider."""
    if handoff is None:
        handoff = InMemoryPaymentHandoff()
    return ExtensionRequestFlow(provider, handoff)
