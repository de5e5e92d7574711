"""
User service implementation.
"""

import logging
from typing import Optional

from shared.exceptions import DuplicateRecordError
from shared.models import AuthenticatedUser

from .interfaces import IUserRepository, IUserService
from .models import UserProfile
from .exceptions import InvalidStatsIncrementError, UserNotFoundError

logger = logging.getLogger(__name__)


def split_full_name(full_name: Optional[str]) -> tuple[str, str]:
    """Split a provider display name into (first, last); 'User' when empty."""
    parts = (full_name or "").split()
    first = parts[0] if parts else "User"
    last = " ".join(parts[1:])
    return first, last


class UserService(IUserService):
    """Profiles and lifetime statistics."""

    def __init__(self, repository: IUserRepository):
        self._repository = repository

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self._repository.get_by_id(user_id)

    async def ensure_profile(
        self,
        user: AuthenticatedUser,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> UserProfile:
        existing = self._repository.get_by_id(user.id)
        if existing is not None:
            return existing

        default_first, default_last = split_full_name(user.full_name)
        try:
            profile = self._repository.create(
                user_id=user.id,
                email=user.email,
                first_name=first_name or default_first,
                last_name=last_name if last_name is not None else default_last,
            )
        except DuplicateRecordError:
            # Another request created it between the read and the insert
            profile = self._repository.get_by_id(user.id)
            if profile is None:
                raise
            return profile

        logger.info(f"Created profile for user {user.id}")
        return profile

    async def record_purchase(self, user_id: str, amount: int, videos: int = 1) -> UserProfile:
        if amount < 0 or videos < 0:
            raise InvalidStatsIncrementError(amount, videos)

        profile = self._repository.increment_stats(user_id, amount, videos)
        if profile is None:
            raise UserNotFoundError(user_id)

        logger.debug(
            f"Updated stats for user {user_id}: total_spent={profile.total_spent} "
            f"videos_watched={profile.videos_watched}"
        )
        return profile
