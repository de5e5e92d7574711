"""
Access module interfaces.

IAccessService is what the API, the purchase flow and the dashboard use.
IAccessRepository and IAccessChangeFeed are its injected collaborators.
"""

from datetime import datetime, timedelta
from typing import AsyncIterator, Optional, Protocol, runtime_checkable

from .models import AccessChange, AccessGrant, AccessSnapshot


@runtime_checkable
class IAccessRepository(Protocol):
    """Persistence for access grants (``video_access`` table)."""

    def find_active(self, user_id: str, video_id: str) -> list[AccessGrant]:
        """Grants for (user, video) flagged active, whatever their expiry."""
        ...

    def list_active_for_user(self, user_id: str) -> list[AccessGrant]:
        """Every grant of a user flagged active, whatever its expiry."""
        ...

    def create(
        self,
        user_id: str,
        video_id: str,
        payment_id: str,
        expires_at: datetime,
    ) -> AccessGrant:
        """Insert an active grant."""
        ...

    def deactivate(self, grant_id: str) -> None:
        """Flag a grant inactive."""
        ...


@runtime_checkable
class IAccessSubscription(Protocol):
    """An open change subscription; iterate it, then close it."""

    def __aiter__(self) -> AsyncIterator[AccessChange]:
        ...

    async def __anext__(self) -> AccessChange:
        ...

    async def close(self) -> None:
        """Tear the subscription down. Iteration stops afterwards."""
        ...


@runtime_checkable
class IAccessChangeFeed(Protocol):
    """Source of store-pushed change notifications for access grants."""

    async def subscribe(self, user_id: str, video_id: str) -> IAccessSubscription:
        """
        Start receiving changes for the (user, video) grants.

        Changes that happen after this call returns are delivered.
        """
        ...


@runtime_checkable
class IAccessService(Protocol):
    """Interface for the access-grant lifecycle."""

    @property
    def access_duration(self) -> timedelta:
        """Length of the access window one payment buys."""
        ...

    async def check_access(self, user_id: str, video_id: str) -> Optional[AccessGrant]:
        """
        Entitlement check.

        Returns the grant that is active and expires strictly in the
        future, or None. Active grants found already expired are flagged
        inactive on the way (best effort).
        """
        ...

    async def list_active_access(self, user_id: str) -> list[AccessGrant]:
        """All currently valid grants of a user, with the same lazy cleanup."""
        ...

    async def issue_grant(
        self,
        user_id: str,
        video_id: str,
        payment_id: str,
        issued_at: datetime,
    ) -> AccessGrant:
        """Create a grant expiring one access window after ``issued_at``."""
        ...

    async def snapshot(self, user_id: str, video_id: str) -> AccessSnapshot:
        """Evaluate (user, video) access now, without writing anything."""
        ...

    def watch_access(self, user_id: str, video_id: str) -> AsyncIterator[AccessSnapshot]:
        """
        Live stream of access snapshots.

        Yields the current state, then a fresh snapshot after every change
        notification. Runs until the consumer stops iterating.
        """
        ...
