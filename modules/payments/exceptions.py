"""
Payments module exceptions.

Gateway failures are never retried and never trigger compensating writes;
they propagate to the caller with a message.
"""

from typing import Optional

from shared.exceptions import (
    ConflictError,
    ExternalServiceError,
    ValidationError,
)


class GatewayNotConfiguredError(ExternalServiceError):
    """Raised when the gateway secret key is missing on the server."""

    def __init__(self):
        super().__init__(
            "Payment verification not configured",
            service="paystack",
            code="GATEWAY_NOT_CONFIGURED",
        )


class GatewayRejectedError(ExternalServiceError):
    """Raised when the gateway answers the verification call with a non-2xx status."""

    def __init__(self, reference: str, status_code: int, gateway_message: Optional[str] = None):
        super().__init__(
            "Payment verification failed",
            service="paystack",
            code="GATEWAY_REJECTED",
            details={
                "reference": reference,
                "status_code": status_code,
                "gateway_message": gateway_message,
            },
        )
        self.status_code = status_code


class GatewayUnavailableError(ExternalServiceError):
    """Raised when the gateway cannot be reached."""

    def __init__(self, reason: str):
        super().__init__(
            "Payment gateway unavailable",
            service="paystack",
            code="GATEWAY_UNAVAILABLE",
            details={"reason": reason},
        )


class PaymentNotSuccessfulError(ValidationError):
    """Raised when the gateway reports the transaction did not succeed."""

    def __init__(self, reference: str, gateway_status: str):
        super().__init__(
            "Payment was not successful",
            code="PAYMENT_NOT_SUCCESSFUL",
            details={"reference": reference, "gateway_status": gateway_status},
        )


class AmountMismatchError(ValidationError):
    """Raised when a verified charge does not cover the video price."""

    def __init__(
        self,
        reference: str,
        expected_amount: int,
        expected_currency: str,
        paid_amount: Optional[int],
        paid_currency: Optional[str],
    ):
        super().__init__(
            "Payment amount does not match the video price",
            code="AMOUNT_MISMATCH",
            details={
                "reference": reference,
                "expected_amount": expected_amount,
                "expected_currency": expected_currency,
                "paid_amount": paid_amount,
                "paid_currency": paid_currency,
            },
        )


class DuplicatePaymentReferenceError(ConflictError):
    """Raised when a payment with the same gateway reference already exists."""

    def __init__(self, reference: str):
        super().__init__(
            f"Payment reference already used: {reference}",
            code="DUPLICATE_PAYMENT_REFERENCE",
            details={"reference": reference},
        )
