"""
Catalog service implementation.
"""

from .interfaces import ICatalogService, IVideoRepository
from .models import Video
from .exceptions import VideoNotFoundError


class CatalogService(ICatalogService):
    """Looks up catalog entries through an injected repository."""

    def __init__(self, repository: IVideoRepository, featured_video_id: str):
        self._repository = repository
        self._featured_video_id = featured_video_id

    async def get_video(self, video_id: str) -> Video:
        video = self._repository.get_by_id(video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return video

    async def list_videos(self) -> list[Video]:
        return self._repository.list_all()

    async def get_featured(self) -> Video:
        return await self.get_video(self._featured_video_id)
