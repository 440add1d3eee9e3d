"""Shared utilities."""

from gene_service.utils.retry import RetryStrategy, call_with_retry

__all__ = ["RetryStrategy", "call_with_retry"]
