"""
Payments module interfaces.

The purchase flow depends on IPaymentGateway and IPaymentRepository, not on
Paystack or Supabase directly, so it can be exercised without either.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .models import GatewayVerification, Payment, PaymentStatus


@runtime_checkable
class IPaymentGateway(Protocol):
    """Server-side view of the payment gateway."""

    async def verify(self, reference: str) -> GatewayVerification:
        """
        Look up a transaction by reference using the server-held secret.

        Returns the gateway's verdict whatever the transaction status is;
        callers check ``successful``.

        Raises:
            GatewayNotConfiguredError: If no secret key is configured
            GatewayRejectedError: If the gateway refuses the lookup
            GatewayUnavailableError: On network failure
        """
        ...


@runtime_checkable
class IPaymentRepository(Protocol):
    """Persistence for payment records."""

    def create(
        self,
        user_id: str,
        video_id: str,
        amount: int,
        currency: str,
        reference: str,
        status: PaymentStatus,
        access_expires_at: datetime,
        verified_at: Optional[datetime] = None,
    ) -> Payment:
        """
        Insert a payment record.

        Raises:
            DuplicatePaymentReferenceError: If the reference was already recorded
        """
        ...

    def get_by_reference(self, reference: str) -> Optional[Payment]:
        """Find the payment recorded for a gateway reference."""
        ...

    def list_for_user(self, user_id: str) -> list[Payment]:
        """All payments of a user, most recent first."""
        ...

    def update_status(
        self,
        payment_id: str,
        status: PaymentStatus,
        verified_at: datetime,
    ) -> None:
        """Record the verification outcome of a pending payment."""
        ...
