"""
Access endpoints.

Point-in-time entitlement checks and a Server-Sent Events stream that
pushes a fresh access snapshot whenever the user's grant changes.
"""

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_access_service
from shared.models import AuthenticatedUser

from .interfaces import IAccessService
from .models import AccessGrant, AccessStatusResponse

router = APIRouter()


@router.get("", response_model=list[AccessGrant])
async def list_access(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
) -> list[AccessGrant]:
    """List the current user's valid grants, latest expiry first."""
    return await service.list_active_access(user.id)


@router.get("/{video_id}", response_model=AccessStatusResponse)
async def get_access(
    video_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
) -> AccessStatusResponse:
    grant = await service.check_access(user.id, video_id)
    return AccessStatusResponse(video_id=video_id, has_access=grant is not None, grant=grant)


async def event_generator(video_id: str, user_id: str, service: IAccessService):
    """
    Generate SSE events for a (user, video) pair.

    Yields events in the format:
        event: access
        data: <AccessSnapshot json>
    """
    async for snapshot in service.watch_access(user_id, video_id):
        yield {
            "event": "access",
            "data": snapshot.model_dump_json(),
        }


@router.get("/{video_id}/stream")
async def stream_access(
    video_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccessService = Depends(get_access_service),
):
    """
    Stream access snapshots via SSE.

    The first event carries the current state; one more follows every
    change to the user's grants for this video. The subscription is
    released when the client disconnects.
    """
    return EventSourceResponse(
        event_generator(video_id, user.id, service),
        media_type="text/event-stream",
    )
