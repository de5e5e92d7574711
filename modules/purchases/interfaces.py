"""
Purchases module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import PurchaseResult


@runtime_checkable
class IPurchaseService(Protocol):
    """Turns a client-reported gateway reference into an access grant."""

    async def complete_purchase(
        self,
        user_id: str,
        reference: str,
        video_id: Optional[str] = None,
    ) -> PurchaseResult:
        """
        Verify, record, grant, and update statistics.

        Raises:
            PaymentNotSuccessfulError: Gateway reports a non-success status
            AmountMismatchError: Charge does not cover the video price
            DuplicatePaymentReferenceError: Reference already recorded
            GatewayNotConfiguredError, GatewayRejectedError,
            GatewayUnavailableError: Verification call failed
            PurchaseIncompleteError: A step after recording failed
        """
        ...
