"""
Access grant repository for database access.

Encapsulates Supabase queries and data mapping for the ``video_access`` table.
"""

from datetime import datetime
from typing import Any

from shared.repository import BaseRepository
from .models import AccessGrant


class AccessRepository(BaseRepository[AccessGrant]):
    """
    Repository for access grants.

    Expiry is not evaluated here; the service decides validity against
    its clock.
    """

    table_name = "video_access"

    def find_active(self, user_id: str, video_id: str) -> list[AccessGrant]:
        result = self._execute(
            self._db.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .eq("video_id", video_id)
            .eq("is_active", True)
        )
        return [self._map_to_grant(row) for row in result.data]

    def list_active_for_user(self, user_id: str) -> list[AccessGrant]:
        result = self._execute(
            self._db.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .eq("is_active", True)
        )
        return [self._map_to_grant(row) for row in result.data]

    def create(
        self,
        user_id: str,
        video_id: str,
        payment_id: str,
        expires_at: datetime,
    ) -> AccessGrant:
        data = {
            "user_id": user_id,
            "video_id": video_id,
            "payment_id": payment_id,
            "is_active": True,
            "expires_at": expires_at.isoformat(),
        }
        result = self._execute(self._db.table(self.table_name).insert(data))
        return self._map_to_grant(result.data[0])

    def deactivate(self, grant_id: str) -> None:
        self._execute(
            self._db.table(self.table_name).update({"is_active": False}).eq("id", grant_id)
        )

    def _map_to_grant(self, data: dict[str, Any]) -> AccessGrant:
        """Map database row to AccessGrant model."""
        return AccessGrant(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            video_id=str(data["video_id"]),
            payment_id=str(data["payment_id"]),
            is_active=bool(data.get("is_active", False)),
            expires_at=data["expires_at"],
            created_at=data["created_at"],
        )
