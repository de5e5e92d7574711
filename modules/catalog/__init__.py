"""
Catalog module.

Read-only access to video metadata and the playback gate.

Public API:
- ICatalogService: Interface for catalog lookups
- Video, VideoSummary, VideoDetailResponse, PlaybackResponse: Models
- VideoNotFoundError
"""

from .interfaces import ICatalogService, IVideoRepository
from .models import Video, VideoSummary, VideoDetailResponse, PlaybackResponse
from .exceptions import VideoNotFoundError

__all__ = [
    "ICatalogService",
    "IVideoRepository",
    "Video",
    "VideoSummary",
    "VideoDetailResponse",
    "PlaybackResponse",
    "VideoNotFoundError",
]
