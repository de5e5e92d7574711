"""
User repository for database access.

Statistics are incremented by the ``increment_user_stats`` Postgres
function (see migrations/002_increment_user_stats.sql) so concurrent
purchases for the same user cannot lose an update.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserProfile


class UserRepository(BaseRepository[UserProfile]):
    """Repository for user profiles."""

    table_name = "users"

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        result = self._execute(
            self._db.table(self.table_name).select("*").eq("id", user_id)
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def create(
        self,
        user_id: str,
        email: str,
        first_name: str,
        last_name: str,
    ) -> UserProfile:
        data = {
            "id": user_id,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "total_spent": 0,
            "videos_watched": 0,
        }
        result = self._execute(self._db.table(self.table_name).insert(data))
        return self._map_to_profile(result.data[0])

    def increment_stats(self, user_id: str, amount: int, videos: int) -> Optional[UserProfile]:
        result = self._execute(
            self._db.rpc(
                "increment_user_stats",
                {"p_user_id": user_id, "p_amount": amount, "p_videos": videos},
            )
        )
        row = result.data
        if isinstance(row, list):
            row = row[0] if row else None
        if not row:
            return None
        return self._map_to_profile(row)

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            email=data["email"],
            first_name=data.get("first_name") or "User",
            last_name=data.get("last_name") or "",
            total_spent=int(data.get("total_spent") or 0),
            videos_watched=int(data.get("videos_watched") or 0),
            created_at=data.get("created_at"),
        )
