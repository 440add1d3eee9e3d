"""Base HTTP client for external API integrations.

Provides a base class for external service clients with:
- Connection pooling
- Retry of transport errors with exponential backoff
- Request/response logging
- Timeout configuration

HTTP error statuses are raised as ``httpx.HTTPStatusError`` and never
retried; callers see them unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from gene_service.utils.retry import RetryStrategy, call_with_retry

logger = logging.getLogger(__name__)

QueryParams = dict[str, Any] | list[tuple[str, str]]

RETRYABLE_ERRORS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


class BaseHTTPClient:
    """Base HTTP client for external API integrations.

    Example:
        ```python
        class PartnerClient(BaseHTTPClient):
            def __init__(self):
                super().__init__(base_url="https://api.example.com", timeout=10.0)

            async def partner(self, partner_id: str) -> dict:
                return await self.get_json(f"/partner/{partner_id}")
        ```
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Base URL for the API.
            timeout: Request timeout in seconds.
            max_retries: Attempts per request for transport errors.
            headers: Default headers to include in all requests.
            transport: Optional transport (e.g. httpx.MockTransport in tests).
        """
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.default_headers = headers or {}
        self._retry = RetryStrategy(max_attempts=max_retries, exceptions=RETRYABLE_ERRORS)

        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers=self.default_headers,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
            ),
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self.client.aclose()

    async def __aenter__(self) -> BaseHTTPClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and close client."""
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request, retrying transport errors.

        Raises:
            httpx.HTTPStatusError: On 4xx/5xx responses.
            httpx.TransportError: When retries are exhausted.
        """
        logger.info(
            f"{method} request to {self.base_url}{path}",
            extra={"path": path, "params": params},
        )
        start_time = time.perf_counter()
        response = await call_with_retry(
            self._retry, self.client.request, method, path, params=params, **kwargs
        )
        logger.info(
            f"{method} response from {self.base_url}{path}",
            extra={
                "path": path,
                "status_code": response.status_code,
                "duration_ms": (time.perf_counter() - start_time) * 1000,
            },
        )
        response.raise_for_status()
        return response

    async def get_json(self, path: str, params: QueryParams | None = None) -> Any:
        """GET a path and decode the JSON body."""
        response = await self.request("GET", path, params=params)
        return response.json()


__all__ = ["RETRYABLE_ERRORS", "BaseHTTPClient"]
