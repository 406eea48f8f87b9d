"""
Audit Logger Protocol.

Defines the abstract interface for audit logging. The audit logger
tracks filtering decisions of each pipeline run for debugging.

Design Notes:
    - Correlation ID propagation for tracing one run
    - No side effects on filtering logic
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any, Dict, Optional

    from filings_dashboard.domain.entities import Filing


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def log_filing_filtered(self, filing: Filing, stage_name: str, reason: str) -> None:
        ...
