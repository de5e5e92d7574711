"""
Access module data models.

An AccessGrant is the time-bounded entitlement bought by one payment.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class AccessGrant(BaseModel):
    """
    Entitlement permitting playback of one video for one user.

    Only one grant per (user, video) is meant to be authoritative at a
    time, but nothing in the store enforces it.
    """

    id: str = Field(..., description="Grant ID (UUID)")
    user_id: str = Field(..., description="Entitled user")
    video_id: str = Field(..., description="Unlocked video")
    payment_id: str = Field(..., description="Originating payment")
    is_active: bool = Field(default=True, description="False once revoked or found expired")
    expires_at: datetime = Field(..., description="End of the access window")
    created_at: datetime = Field(..., description="Issue time")

    def is_valid_at(self, now: datetime) -> bool:
        """Active and expiring strictly after ``now``."""
        return self.is_active and self.expires_at > now


class AccessSnapshot(BaseModel):
    """State of one (user, video) entitlement at a point in time."""

    user_id: str
    video_id: str
    has_access: bool
    grant: Optional[AccessGrant] = None
    evaluated_at: datetime


class AccessChange(BaseModel):
    """A store change notification touching a user's grants."""

    event: str = Field(..., description="INSERT, UPDATE or DELETE")
    grant_id: Optional[str] = None
    video_id: Optional[str] = None
    record: dict[str, Any] = Field(default_factory=dict)


class AccessStatusResponse(BaseModel):
    """Response of GET /api/access/{video_id}."""

    video_id: str
    has_access: bool
    grant: Optional[AccessGrant] = None
