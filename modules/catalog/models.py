"""
Catalog module data models.

Videos are static catalog entries; this system never writes them.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Video(BaseModel):
    """A purchasable video."""

    id: str = Field(..., description="Video ID (slug)")
    title: str = Field(..., description="Display title")
    description: str = Field(default="", description="Long description")
    duration: int = Field(..., ge=0, description="Duration in seconds")
    price: int = Field(..., ge=0, description="Price in minor currency units (pesewas)")
    video_url: str = Field(..., description="Media URL, only served to entitled users")
    thumbnail_url: Optional[str] = Field(None, description="Thumbnail URL")
    level: str = Field(default="All Levels", description="Audience level")
    subject: str = Field(default="", description="Subject")
    created_at: Optional[datetime] = Field(None, description="Catalog insertion time")


class VideoSummary(BaseModel):
    """Public view of a video (no media URL)."""

    id: str
    title: str
    description: str
    duration: int
    price: int
    thumbnail_url: Optional[str] = None
    level: str
    subject: str

    @classmethod
    def from_video(cls, video: Video) -> "VideoSummary":
        return cls(**video.model_dump(exclude={"video_url", "created_at"}))


class PlaybackResponse(BaseModel):
    """
    Playback decision for one video.

    ``locked`` responses carry only preview metadata; ``media_url`` and
    ``expires_at`` are set only when a valid access grant exists.
    """

    video: VideoSummary
    locked: bool = Field(..., description="True when the user has no valid grant")
    media_url: Optional[str] = Field(None, description="Streaming URL")
    expires_at: Optional[datetime] = Field(None, description="When the current grant expires")


class VideoDetailResponse(VideoSummary):
    """Response of GET /api/videos/{video_id}."""

    has_access: Optional[bool] = Field(
        None, description="Whether the caller holds a valid grant; null for anonymous callers"
    )
