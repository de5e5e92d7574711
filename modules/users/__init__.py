"""
Users module.

User profiles created on first sign-in, and lifetime statistics updated
by purchases.

Public API:
- IUserService: Interface for profile operations
- UserProfile: Profile model
- UserNotFoundError
"""

from .interfaces import IUserService, IUserRepository
from .models import UserProfile, CreateProfileRequest, UserProfileResponse
from .exceptions import UserNotFoundError, InvalidStatsIncrementError

__all__ = [
    "IUserService",
    "IUserRepository",
    "UserProfile",
    "CreateProfileRequest",
    "UserProfileResponse",
    "UserNotFoundError",
    "InvalidStatsIncrementError",
]
