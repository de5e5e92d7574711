"""
Users module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import UserProfile


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence for user profiles (``users`` table)."""

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        ...

    def create(
        self,
        user_id: str,
        email: str,
        first_name: str,
        last_name: str,
    ) -> UserProfile:
        """
        Insert a profile with zeroed statistics.

        Raises:
            DuplicateRecordError: If the profile already exists
        """
        ...

    def increment_stats(self, user_id: str, amount: int, videos: int) -> Optional[UserProfile]:
        """
        Atomically add to total_spent and videos_watched.

        Returns the updated profile, or None if no such user exists.
        """
        ...


@runtime_checkable
class IUserService(Protocol):
    """Interface for profile and statistics operations."""

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        ...

    async def ensure_profile(
        self,
        user: AuthenticatedUser,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> UserProfile:
        """Return the user's profile, creating it on first sign-in."""
        ...

    async def record_purchase(self, user_id: str, amount: int, videos: int = 1) -> UserProfile:
        """
        Add a purchase to the user's lifetime statistics.

        Raises:
            UserNotFoundError: If the user has no profile
        """
        ...
