"""
Payments module.

Verifies transactions with Paystack and persists payment records.
"""

from .interfaces import IPaymentGateway, IPaymentRepository
from .models import (
    GatewayVerification,
    Payment,
    PaymentStatus,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from .exceptions import (
    AmountMismatchError,
    DuplicatePaymentReferenceError,
    GatewayNotConfiguredError,
    GatewayRejectedError,
    GatewayUnavailableError,
    PaymentNotSuccessfulError,
)

__all__ = [
    # Interfaces
    "IPaymentGateway",
    "IPaymentRepository",
    # Models
    "GatewayVerification",
    "Payment",
    "PaymentStatus",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
    # Exceptions
    "AmountMismatchError",
    "DuplicatePaymentReferenceError",
    "GatewayNotConfiguredError",
    "GatewayRejectedError",
    "GatewayUnavailableError",
    "PaymentNotSuccessfulError",
]
