"""
Catalog endpoints.

Metadata is public; the media URL is only handed out by the playback
endpoint, and only while the caller holds a valid grant.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_access_service, get_catalog_service
from modules.access.interfaces import IAccessService
from shared.models import AuthenticatedUser

from .interfaces import ICatalogService
from .models import PlaybackResponse, VideoDetailResponse, VideoSummary

router = APIRouter()


@router.get("", response_model=list[VideoSummary])
async def list_videos(
    service: ICatalogService = Depends(get_catalog_service),
) -> list[VideoSummary]:
    """List the catalog, newest first."""
    return [VideoSummary.from_video(video) for video in await service.list_videos()]


@router.get("/featured", response_model=VideoSummary)
async def get_featured_video(
    service: ICatalogService = Depends(get_catalog_service),
) -> VideoSummary:
    return VideoSummary.from_video(await service.get_featured())


@router.get("/{video_id}", response_model=VideoDetailResponse)
async def get_video(
    video_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: ICatalogService = Depends(get_catalog_service),
    access: IAccessService = Depends(get_access_service),
) -> VideoDetailResponse:
    """Video metadata; signed-in callers also learn whether it is unlocked."""
    video = await service.get_video(video_id)
    has_access = None
    if user is not None:
        has_access = await access.check_access(user.id, video.id) is not None
    return VideoDetailResponse(**VideoSummary.from_video(video).model_dump(), has_access=has_access)


@router.get("/{video_id}/playback", response_model=PlaybackResponse)
async def get_playback(
    video_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICatalogService = Depends(get_catalog_service),
    access: IAccessService = Depends(get_access_service),
) -> PlaybackResponse:
    """
    Resolve playback for the current user.

    Without a valid grant the response is locked and carries preview
    metadata only.
    """
    video = await service.get_video(video_id)
    grant = await access.check_access(user.id, video.id)
    if grant is None:
        return PlaybackResponse(video=VideoSummary.from_video(video), locked=True)

    return PlaybackResponse(
        video=VideoSummary.from_video(video),
        locked=False,
        media_url=video.video_url,
        expires_at=grant.expires_at,
    )
