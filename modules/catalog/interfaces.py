"""
Catalog module interfaces.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import Video


@runtime_checkable
class IVideoRepository(Protocol):
    """Read access to the video catalog."""

    def get_by_id(self, video_id: str) -> Optional[Video]:
        """Return the video or None if it is not in the catalog."""
        ...

    def list_all(self) -> list[Video]:
        """Return every video, newest first."""
        ...


@runtime_checkable
class ICatalogService(Protocol):
    """Interface for catalog lookups used by the API and purchases."""

    async def get_video(self, video_id: str) -> Video:
        """
        Get a video by ID.

        Raises:
            VideoNotFoundError: If the video does not exist
        """
        ...

    async def list_videos(self) -> list[Video]:
        """List the catalog, newest first."""
        ...

    async def get_featured(self) -> Video:
        """Get the featured (premium) video."""
        ...
