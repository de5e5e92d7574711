"""
Access service implementation.

Owns the access-grant lifecycle: issuing grants, the entitlement check with
lazy revocation of expired grants, and the live snapshot stream.
"""

import logging
from datetime import datetime, timedelta
from typing import AsyncIterator, Optional

from shared.clock import Clock, utc_now
from shared.exceptions import StoreError

from .interfaces import IAccessChangeFeed, IAccessRepository, IAccessService
from .models import AccessGrant, AccessSnapshot
from .exceptions import ChangeFeedUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_DURATION = timedelta(hours=24)


class AccessService(IAccessService):
    """
    Access-grant service.

    Args:
        repository: Grant persistence
        feed: Change notifications for watch_access(); optional
        access_duration: Length of the window a payment buys
        clock: Time source used for every validity decision
    """

    def __init__(
        self,
        repository: IAccessRepository,
        feed: Optional[IAccessChangeFeed] = None,
        access_duration: timedelta = DEFAULT_ACCESS_DURATION,
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._feed = feed
        self._access_duration = access_duration
        self._clock = clock

    @property
    def access_duration(self) -> timedelta:
        return self._access_duration

    async def check_access(self, user_id: str, video_id: str) -> Optional[AccessGrant]:
        """Return the valid grant for (user, video) or None."""
        now = self._clock()
        grants = self._repository.find_active(user_id, video_id)
        valid = self._expire_stale(grants, now)
        return self._latest(valid)

    async def list_active_access(self, user_id: str) -> list[AccessGrant]:
        """Return all valid grants of a user, latest expiry first."""
        now = self._clock()
        grants = self._repository.list_active_for_user(user_id)
        valid = self._expire_stale(grants, now)
        return sorted(valid, key=lambda g: g.expires_at, reverse=True)

    async def issue_grant(
        self,
        user_id: str,
        video_id: str,
        payment_id: str,
        issued_at: datetime,
    ) -> AccessGrant:
        expires_at = issued_at + self._access_duration
        grant = self._repository.create(
            user_id=user_id,
            video_id=video_id,
            payment_id=payment_id,
            expires_at=expires_at,
        )
        logger.info(
            f"Issued access grant {grant.id} for user={user_id} video={video_id} "
            f"until {expires_at.isoformat()}"
        )
        return grant

    async def snapshot(self, user_id: str, video_id: str) -> AccessSnapshot:
        """
        Evaluate access without the lazy cleanup.

        A stale active grant shows as invalid here but stays flagged active
        until the next check_access().
        """
        now = self._clock()
        grants = self._repository.find_active(user_id, video_id)
        grant = self._latest([g for g in grants if g.is_valid_at(now)])
        return AccessSnapshot(
            user_id=user_id,
            video_id=video_id,
            has_access=grant is not None,
            grant=grant,
            evaluated_at=now,
        )

    async def watch_access(self, user_id: str, video_id: str) -> AsyncIterator[AccessSnapshot]:
        """
        Yield the current snapshot, then one per change notification.

        Nothing is subscribed until the first snapshot is requested; closing
        the iterator tears the subscription down. Each call is independent,
        so a consumer restarts the stream by calling again.
        """
        if self._feed is None:
            raise ChangeFeedUnavailableError()

        subscription = await self._feed.subscribe(user_id, video_id)
        try:
            yield await self.snapshot(user_id, video_id)
            async for change in subscription:
                logger.debug(
                    f"Access change {change.event} for user={user_id} video={video_id}"
                )
                yield await self.snapshot(user_id, video_id)
        finally:
            await subscription.close()

    def _expire_stale(self, grants: list[AccessGrant], now: datetime) -> list[AccessGrant]:
        """Split grants into valid ones and flag the expired ones inactive."""
        valid = []
        for grant in grants:
            if grant.is_valid_at(now):
                valid.append(grant)
                continue
            try:
                self._repository.deactivate(grant.id)
                logger.info(f"Deactivated expired access grant {grant.id}")
            except StoreError as e:
                # Best effort: the next check tries again
                logger.warning(f"Failed to deactivate expired grant {grant.id}: {e.message}")
        return valid

    @staticmethod
    def _latest(grants: list[AccessGrant]) -> Optional[AccessGrant]:
        if not grants:
            return None
        return max(grants, key=lambda g: g.expires_at)
