"""
Purchases module data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from modules.access.models import AccessGrant
from modules.payments.models import Payment


class PurchaseStage(str, Enum):
    """
    How far a purchase got.

    initiated -> gateway_confirmed -> recorded -> granted
    """

    INITIATED = "initiated"
    GATEWAY_CONFIRMED = "gateway_confirmed"
    RECORDED = "recorded"
    GRANTED = "granted"


class PurchaseRequest(BaseModel):
    """Body of POST /api/purchases."""

    reference: str = Field(..., min_length=1, description="Gateway transaction reference")
    video_id: Optional[str] = Field(None, description="Video bought; defaults to the featured video")


class PurchaseResult(BaseModel):
    """Outcome of a completed purchase."""

    stage: PurchaseStage
    payment: Payment
    grant: AccessGrant
    total_spent: int = Field(..., description="User's lifetime spend after this purchase")
    videos_watched: int = Field(..., description="User's lifetime video count after this purchase")
