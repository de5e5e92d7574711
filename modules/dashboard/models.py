"""
Dashboard module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from modules.access.models import AccessGrant
from modules.catalog.models import VideoSummary
from modules.payments.models import Payment
from modules.users.models import UserProfileResponse


DASHBOARD_ERROR_MESSAGE = "Failed to load dashboard data. Please try again."


class PaymentWithVideo(Payment):
    """A payment with the purchased video's metadata, when it could be loaded."""

    video: Optional[VideoSummary] = None


class DashboardSectionError(BaseModel):
    """One dashboard section that could not be loaded."""

    section: str = Field(..., description="profile, payments or active_access")
    message: str = Field(default=DASHBOARD_ERROR_MESSAGE)


class Dashboard(BaseModel):
    """
    Everything the account page shows.

    A section that failed to load is empty and listed in ``errors``.
    """

    profile: Optional[UserProfileResponse] = None
    payments: list[PaymentWithVideo] = Field(default_factory=list)
    active_access: list[AccessGrant] = Field(default_factory=list)
    errors: list[DashboardSectionError] = Field(default_factory=list)
