"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package.

Providers:
    - MockReturnsProvider: Twelve sample filings for development/testing
    - FileReturnsProvider: Filings read from a YAML file

Loggers:
    - ConsoleAuditLogger: Simple console output

Handoff:
    - InMemoryPaymentHandoff: Submitted extension requests by filing id

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from filings_dashboard.adapters.console_logger import ConsoleAuditLogger
from filings_dashboard.adapters.file_provider import FileReturnsProvider
from filings_dashboard.adapters.mock_provider import SEED_FILINGS, MockReturnsProvider
from filings_dashboard.adapters.payment_handoff import InMemoryPaymentHandoff

__all__ = [
    "ConsoleAuditLogger",
    "FileReturnsProvider",
    "InMemoryPaymentHandoff",
    "MockReturnsProvider",
    "SEED_FILINGS",
]
