"""
Error Handler - Retry at the Provider Boundary.

The filter pipeline works on filings already in memory and has no failure
modes of its own. Only reading the data source can fail; such failures
are raised as ProviderError and retried here with exponential backoff.

Design Notes:
    - Only ProviderError (and subclasses) is retried by default
    - Not-found is a normal provider answer and never reaches this layer
    - Exhaustion raises RetryExhausted, itself a ProviderError, chained to
      the last failure
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple, Type, TypeVar

from filings_dashboard.config.models import RetrySettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProviderError(Exception):
    """Raised when the filings data source cannot be read."""


class RetryExhausted(ProviderError):
    """Raised when every attempt at a provider call failed."""

    def __init__(self, operation: str, attempts: int) -> None:
        super().__init__(f"{operation} failed after {attempts} attempts")
        self.operation = operation
        self.attempts = attempts


@dataclass
class RetryConfig:
    """Backoff policy for provider calls."""

    max_attempts: int = 3
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 10.0
    exponential_base: float = 2.0
    retryable_exceptions: Tuple[Type[BaseException], ...] = (ProviderError,)

    @classmethod
    def from_settings(cls, settings: RetrySettings) -> "RetryConfig":
        """Build from the retry section of DashboardConfig."""
        return cls(
            max_attempts=settings.max_attempts if settings.enabled else 1,
            base_delay_seconds=settings.base_delay_seconds,
            max_delay_seconds=settings.max_delay_seconds,
            exponential_base=settings.exponential_base,
        )

    def delays(self) -> Iterator[float]:
        """Sleep before each retry: base, base*exp, base*exp^2 ... capped."""
        for retry in range(self.max_attempts - 1):
            yield min(
                self.base_delay_seconds * self.exponential_base ** retry,
                self.max_delay_seconds,
            )


class ErrorHandler:
    """Runs provider calls under a RetryConfig."""

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize error handler.

        Args:
            retry_config: Backoff policy (defaults to RetryConfig())
            sleep: Delay function, replaceable in tests
        """
        self.retry_config = retry_config or RetryConfig()
        self._sleep = sleep

    def retry(self, func: Callable[[], T], operation_name: str = "operation") -> T:
        """
        Call func until it succeeds or the attempts run out.

        Raises:
            RetryExhausted: When all attempts raised a retryable error
        """
        config = self.retry_config
        delays = config.delays()
        attempt = 0

        while True:
            attempt += 1
            try:
                result = func()
            except config.retryable_exceptions as e:
                delay = next(delays, None)
                if delay is None:
                    logger.error(f"{operation_name} gave up after {attempt} attempt(s): {e}")
                    raise RetryExhausted(operation_name, attempt) from e
                logger.warning(
                    f"{operation_name} attempt {attempt}/{config.max_attempts} failed: {e}; "
                    f"retrying in {delay:.2f}s"
                )
                self._sleep(delay)
            else:
                if attempt > 1:
                    logger.info(f"{operation_name} recovered on attempt {attempt}")
                return result
