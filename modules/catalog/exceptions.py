"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class VideoNotFoundError(NotFoundError):
    """Raised when a video is not in the catalog."""

    def __init__(self, video_id: str):
        super().__init__(
            f"Video not found: {video_id}",
            code="VIDEO_NOT_FOUND",
            details={"video_id": video_id},
        )
