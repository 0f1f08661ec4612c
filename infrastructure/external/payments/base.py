"""
Base payment client implementing shared concerns: http transport, timeouts, logging.

Concrete providers subclass and implement provider-specific logic. Calls are
synchronous and never retried; failures surface to the caller.
"""
from __future__ import annotations

from typing import Optional

import httpx

from core.logging_config import get_logger
from infrastructure.external.payments.exceptions import PaymentProviderError


logger = get_logger(__name__)


class BasePaymentClient:
    provider: str = "base"

    def __init__(
        self,
        *,
        connect_timeout_ms: int = 2000,
        read_timeout_ms: int = 1000,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.connect_timeout_ms = connect_timeout_ms
        self.read_timeout_ms = read_timeout_ms
        # Built eagerly so no per-call state is created lazily across threads
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.timeouts)

    @property
    def timeouts(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.read_timeout_ms / 1000,
            connect=self.connect_timeout_ms / 1000,
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _post(self, url: str, body: bytes, content_type: str) -> httpx.Response:
        """POST ``body`` and read the full response; transport errors are wrapped once."""
        try:
            response = self._client.post(
                url,
                content=body,
                headers={"Content-Type": content_type},
                timeout=self.timeouts,
            )
        except httpx.HTTPError as exc:
            logger.error("payment.transport_error", provider=self.provider, url=url, error=str(exc))
            raise PaymentProviderError(str(exc), provider=self.provider, details={"url": url}) from exc
        if response.is_error:
            logger.warning(
                "payment.http_status",
                provider=self.provider,
                url=url,
                status_code=response.status_code,
            )
        return response

    def _log(self, event: str, **kwargs) -> None:
        logger.info(
            event,
            provider=self.provider,
            **kwargs,
        )
