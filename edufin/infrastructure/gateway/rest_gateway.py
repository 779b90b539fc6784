"""
REST client for the finance backend.

Posts composed charges and subscriptions as JSON. Each submission is sent
once; transport failures are only retried when idempotency keys are
enabled, because the backend can then drop the duplicate.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from edufin.config import get_logger, get_settings
from edufin.core.exceptions import GatewayRejectedError, GatewayUnavailableError
from edufin.core.interfaces import GatewayReceipt, IChargeGateway

logger = get_logger(__name__)


def _extract_message(response: httpx.Response) -> str:
    """Best-effort error text from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if body.get(key):
                return str(body[key])
    return response.text[:200]


def _parse_receipt(response: httpx.Response) -> GatewayReceipt:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {"data": body}

    record = body.get("data") if isinstance(body.get("data"), dict) else body
    reference = record.get("id")
    return GatewayReceipt(
        reference=str(reference) if reference is not None else None,
        status=record.get("status"),
        status_code=response.status_code,
        body=body,
    )


class RestChargeGateway(IChargeGateway):
    """
    HTTP adapter for the finance backend.

    Provides:
    - Bearer authentication when an API key is configured
    - Idempotency-Key header when a key is passed
    - Exponential-backoff retries on transport errors, keyed submissions only
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings().gateway
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.charges_path = settings.charges_path
        self.subscriptions_path = settings.subscriptions_path
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout if timeout is not None else settings.timeout
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay
        self._transport = transport

    async def create_charge(
        self,
        payload: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> GatewayReceipt:
        return await self._submit(self.charges_path, payload, idempotency_key)

    async def create_subscription(
        self,
        payload: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> GatewayReceipt:
        return await self._submit(self.subscriptions_path, payload, idempotency_key)

    def _headers(self, idempotency_key: str | None) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    async def _post(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> GatewayReceipt:
        """Single POST attempt."""
        url = f"{self.base_url}{path}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
            except httpx.TransportError as e:
                raise GatewayUnavailableError(path, f"{e.__class__.__name__}: {e}") from e

        if not response.is_success:
            raise GatewayRejectedError(path, response.status_code, _extract_message(response))

        return _parse_receipt(response)

    def _get_retry_decorator(self) -> Any:
        """Get tenacity retry decorator with current settings."""
        return retry(
            stop=stop_after_attempt(max(1, self.max_retries)),
            wait=wait_exponential(
                multiplier=self.retry_delay,
                min=self.retry_delay,
                max=self.retry_delay * 8,
            ),
            retry=retry_if_exception_type(GatewayUnavailableError),
            before_sleep=self._log_retry,
            reraise=True,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning(
            "gateway_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _submit(
        self,
        path: str,
        payload: dict[str, Any],
        idempotency_key: str | None,
    ) -> GatewayReceipt:
        headers = self._headers(idempotency_key)

        async def _do_post() -> GatewayReceipt:
            return await self._post(path, payload, headers)

        operation: Callable[[], Awaitable[GatewayReceipt]] = _do_post
        if idempotency_key:
            operation = self._get_retry_decorator()(_do_post)

        logger.info("gateway_post", path=path, keyed=bool(idempotency_key))
        receipt = await operation()
        logger.info(
            "gateway_accepted",
            path=path,
            reference=receipt.reference,
            status_code=receipt.status_code,
        )
        return receipt


# Singleton
_gateway: RestChargeGateway | None = None


def get_charge_gateway() -> RestChargeGateway:
    """Get or create the finance backend gateway."""
    global _gateway
    if _gateway is None:
        _gateway = RestChargeGateway()
    return _gateway


def reset_charge_gateway() -> None:
    """Drop the cached gateway (for testing)."""
    global _gateway
    _gateway = None
