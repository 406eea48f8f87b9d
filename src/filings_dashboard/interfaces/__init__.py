"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external dependencies. High-level modules depend on these abstractions,
not on concrete implementations.

Protocols:
    - ReturnsProvider: Data access abstraction
    - FilterStage: Base protocol for filter stages
    - AuditLogger: Logging abstraction for audit trail
    - PaymentHandoff: Downstream step of the extension-request flow
"""

from filings_dashboard.interfaces.audit_logger import AuditLogger
from filings_dashboard.interfaces.filter_stage import FilterStage
from filings_dashboard.interfaces.payment_handoff import PaymentHandoff
from filings_dashboard.interfaces.returns_provider import ReturnsProvider

__all__ = [
    "AuditLogger",
    "FilterStage",
    "PaymentHandoff",
    "ReturnsProvider",
]
