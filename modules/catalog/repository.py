"""
Video repository for database access.

Encapsulates Supabase queries for the read-only ``videos`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Video


class VideoRepository(BaseRepository[Video]):
    """Repository for catalog reads."""

    table_name = "videos"

    def get_by_id(self, video_id: str) -> Optional[Video]:
        result = self._execute(
            self._db.table(self.table_name).select("*").eq("id", video_id)
        )
        if not result.data:
            return None
        return self._map_to_video(result.data[0])

    def list_all(self) -> list[Video]:
        result = self._execute(
            self._db.table(self.table_name).select("*").order("created_at", desc=True)
        )
        return [self._map_to_video(row) for row in result.data]

    def _map_to_video(self, data: dict[str, Any]) -> Video:
        """Map database row to Video model."""
        return Video(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            duration=int(data["duration"]),
            price=int(data["price"]),
            video_url=data["video_url"],
            thumbnail_url=data.get("thumbnail_url"),
            level=data.get("level") or "All Levels",
            subject=data.get("subject") or "",
            created_at=data.get("created_at"),
        )
