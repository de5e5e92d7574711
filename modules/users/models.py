"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class UserProfile(BaseModel):
    """
    A storefront user.

    Created on first sign-in, keyed by the identity provider's user ID.
    Spend and watch counters only ever go up.
    """

    id: str = Field(..., description="User ID (Supabase Auth UUID)")
    email: EmailStr = Field(..., description="Email address")
    first_name: str = Field(default="User", description="First name")
    last_name: str = Field(default="", description="Last name")
    total_spent: int = Field(default=0, ge=0, description="Lifetime spend in minor units")
    videos_watched: int = Field(default=0, ge=0, description="Lifetime purchased videos")
    created_at: Optional[datetime] = Field(None, description="Profile creation time")

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class CreateProfileRequest(BaseModel):
    """Body of POST /api/users/me."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    email: EmailStr
    display_name: str
    total_spent: int
    videos_watched: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            display_name=profile.display_name,
            total_spent=profile.total_spent,
            videos_watched=profile.videos_watched,
            created_at=profile.created_at,
        )
