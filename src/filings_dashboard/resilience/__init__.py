"""
Resilience Package - Error Handling at the Provider Boundary.

    - ProviderError: Distinct failure signal for unreadable data sources
    - ErrorHandler: Retry with exponential backoff
    - RetryExhausted: Raised when retries run out

Design Principles:
    - The in-memory filter pipeline has no failure modes of its own
    - Retry with backoff for transient provider errors only
"""

from filings_dashboard.resilience.error_handler import (
    ErrorHandler,
    ProviderError,
    RetryConfig,
    RetryExhausted,
)

__all__ = ["ErrorHandler", "ProviderError", "RetryConfig", "RetryExhausted"]
