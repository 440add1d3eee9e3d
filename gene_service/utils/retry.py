"""Retry and backoff utilities for resilient external service calls.

Used by HTTP clients for transport-level failures only. When attempts are
exhausted the last exception is re-raised unchanged so callers see the
real upstream failure.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryStrategy:
    """Exponential backoff with optional jitter."""

    def __init__(
        self,
        max_attempts: int = 3,
        initial_delay: float = 0.2,
        max_delay: float = 5.0,
        exponential_base: float = 2.0,
        jitter: bool = True,
        exceptions: tuple[type[Exception], ...] = (Exception,),
    ) -> None:
        """Initialize retry strategy.

        Args:
            max_attempts: Total number of attempts (first call included).
            initial_delay: Delay in seconds before the first retry.
            max_delay: Maximum delay in seconds between retries.
            exponential_base: Base for exponential backoff calculation.
            jitter: Whether to add random jitter to delays.
            exceptions: Exception types that trigger a retry.
        """
        self.max_attempts = max(max_attempts, 1)
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter = jitter
        self.exceptions = exceptions

    def should_retry(self, exception: Exception) -> bool:
        """Check if exception should trigger a retry."""
        return isinstance(exception, self.exceptions)

    def calculate_delay(self, attempt: int) -> float:
        """Delay before retrying after the given (0-indexed) attempt."""
        delay = min(self.initial_delay * (self.exponential_base**attempt), self.max_delay)
        if self.jitter:
            delay = delay * (0.5 + random.random())  # Random between 50-150% of delay
        return delay


async def call_with_retry(
    strategy: RetryStrategy,
    func: Callable[..., Awaitable[T]],
    *args: Any,
    **kwargs: Any,
) -> T:
    """Await ``func`` and retry it according to ``strategy``.

    Non-retryable exceptions propagate immediately; retryable ones propagate
    once attempts are exhausted.

    Example:
        strategy = RetryStrategy(max_attempts=3, exceptions=(httpx.TransportError,))
        response = await call_with_retry(strategy, client.get, "/gene/abstract-painting")
    """
    name = getattr(func, "__name__", repr(func))
    for attempt in range(strategy.max_attempts):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            if not strategy.should_retry(e) or attempt >= strategy.max_attempts - 1:
                raise

            delay = strategy.calculate_delay(attempt)
            logger.warning(
                f"Retrying {name} after {delay:.2f}s (attempt {attempt + 1}/{strategy.max_attempts})",
                extra={
                    "function": name,
                    "attempt": attempt + 1,
                    "max_attempts": strategy.max_attempts,
                    "delay": delay,
                    "exception": str(e),
                },
            )
            await asyncio.sleep(delay)

    raise RuntimeError("Retry logic error: no attempt was made")


__all__ = ["RetryStrategy", "call_with_retry"]
