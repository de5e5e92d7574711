"""
Payments module data models.

Amounts are integers in minor currency units (pesewas for GHS) so no
floating point rounding ever touches money.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    """Lifecycle of a payment record."""

    PENDING = "pending"
    SUCCESSFUL = "successful"
    FAILED = "failed"


class Payment(BaseModel):
    """
    A payment record.

    Created once per checkout attempt. After verification only ``status``
    and ``verified_at`` may change.
    """

    id: str = Field(..., description="Payment ID (UUID)")
    user_id: str = Field(..., description="Paying user ID")
    video_id: str = Field(..., description="Purchased video ID")
    amount: int = Field(..., ge=0, description="Amount in minor units")
    currency: str = Field(default="GHS", description="ISO currency code")
    paystack_reference: str = Field(..., description="Gateway transaction reference (unique)")
    status: PaymentStatus = Field(..., description="Payment status")
    access_expires_at: datetime = Field(..., description="Expiry of the access this payment bought")
    created_at: datetime = Field(..., description="Record creation time")
    verified_at: Optional[datetime] = Field(None, description="Gateway verification time")


class GatewayVerification(BaseModel):
    """Result of a verify-by-reference call to the payment gateway."""

    reference: str
    status: str = Field(..., description="Gateway transaction status, e.g. 'success', 'abandoned'")
    amount: Optional[int] = Field(None, description="Amount charged, in minor units")
    currency: Optional[str] = None
    paid_at: Optional[datetime] = None
    gateway_response: Optional[str] = Field(None, description="Gateway's human-readable outcome")
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @property
    def successful(self) -> bool:
        return self.status == "success"


class VerifyPaymentRequest(BaseModel):
    """Body of POST /api/verify-payment."""

    reference: str = Field(..., min_length=1, description="Gateway transaction reference")


class VerifyPaymentResponse(BaseModel):
    """Response of POST /api/verify-payment."""

    success: bool
    message: str
    reference: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
