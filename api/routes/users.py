"""
User-related endpoints.

Provides endpoints for the user profile and the account dashboard.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from modules.dashboard.models import Dashboard
from modules.dashboard.service import DashboardService
from modules.users.interfaces import IUserService
from modules.users.models import CreateProfileRequest, UserProfileResponse
from shared.models import AuthenticatedUser

from ..dependencies import get_dashboard_service, get_user_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Get the current user's profile, creating it on first access.

    Requires authentication.
    """
    profile = await service.ensure_profile(user)
    return UserProfileResponse.from_profile(profile)


@router.post("/me", response_model=UserProfileResponse)
async def create_current_user_profile(
    request: Optional[CreateProfileRequest] = None,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    First sign-in: create the profile with the given names.

    An existing profile is returned unchanged.
    """
    request = request or CreateProfileRequest()
    profile = await service.ensure_profile(
        user,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    return UserProfileResponse.from_profile(profile)


@router.get("/me/dashboard", response_model=Dashboard)
async def get_dashboard(
    user: AuthenticatedUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> Dashboard:
    """Profile, purchase history and active access in one call."""
    return await service.get_dashboard(user)
