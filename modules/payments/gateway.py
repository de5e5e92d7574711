"""
Paystack gateway client.

Only the server-side verify-by-reference endpoint is used; checkout happens
in the browser with the public key served by GET /config.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .interfaces import IPaymentGateway
from .models import GatewayVerification
from .exceptions import (
    GatewayNotConfiguredError,
    GatewayRejectedError,
    GatewayUnavailableError,
)

logger = logging.getLogger(__name__)


class PaystackGateway(IPaymentGateway):
    """
    Verifies Paystack transactions.

    Args:
        secret_key: Paystack secret key (never sent to clients)
        base_url: API root, https://api.paystack.co in production
        timeout: Seconds before the verification call is abandoned
        transport: Optional httpx transport, used by tests
    """

    def __init__(
        self,
        secret_key: str,
        base_url: str = "https://api.paystack.co",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._secret_key = secret_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._secret_key)

    async def verify(self, reference: str) -> GatewayVerification:
        """Call GET /transaction/verify/{reference}."""
        if not self.is_configured:
            logger.error("Paystack secret key not configured")
            raise GatewayNotConfiguredError()

        url = f"{self._base_url}/transaction/verify/{quote(reference, safe='')}"

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(
                    url,
                    headers={
                        "Authorization": f"Bearer {self._secret_key}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            logger.error(f"Paystack verification request failed for {reference}: {e}")
            raise GatewayUnavailableError(str(e)) from e

        body = self._parse_body(response)

        if not response.is_success:
            logger.error(
                f"Paystack API error for {reference}: "
                f"{response.status_code} {body.get('message')}"
            )
            raise GatewayRejectedError(reference, response.status_code, body.get("message"))

        return self._parse_verification(reference, response.status_code, body)

    def _parse_body(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def _parse_verification(
        self, reference: str, status_code: int, body: dict[str, Any]
    ) -> GatewayVerification:
        """
        Map the Paystack envelope to a GatewayVerification.

        Raises:
            GatewayRejectedError: If a 2xx body cannot be read as a transaction.
        """
        data = body.get("data") or {}
        if not isinstance(data, dict):
            logger.error(f"Paystack returned a malformed transaction for {reference}: {data!r}")
            raise GatewayRejectedError(reference, status_code, "Malformed transaction data")

        # A false envelope status means Paystack could not vouch for the charge
        status = data.get("status", "unknown") if body.get("status") else "failed"

        amount = data.get("amount")
        try:
            return GatewayVerification(
                reference=data.get("reference") or reference,
                status=status,
                amount=int(amount) if amount is not None else None,
                currency=data.get("currency"),
                paid_at=data.get("paid_at") or data.get("paidAt"),
                gateway_response=data.get("gateway_response"),
                raw=body,
            )
        except (TypeError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.error(f"Paystack returned a malformed transaction for {reference}: {e}")
            raise GatewayRejectedError(reference, status_code, "Malformed transaction data") from e
