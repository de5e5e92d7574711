"""
Purchase endpoint.

Turns a Paystack reference the browser obtained at checkout into a
payment record, an access grant and updated profile statistics.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_purchase_service, get_user_service
from modules.users.interfaces import IUserService
from shared.models import AuthenticatedUser

from .interfaces import IPurchaseService
from .models import PurchaseRequest, PurchaseResult

router = APIRouter()


@router.post("", response_model=PurchaseResult, status_code=201)
async def create_purchase(
    request: PurchaseRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
    service: IPurchaseService = Depends(get_purchase_service),
) -> PurchaseResult:
    """
    Complete a purchase for the current user.

    Errors are rendered by the application exception handlers: 400 when
    the gateway did not confirm the charge, 409 when the reference was
    already used, 502 when the gateway is unreachable and 500 (with the
    stage reached) when a step after recording the payment failed.
    """
    # Stats are incremented on the profile row, so it has to exist first
    await users.ensure_profile(user)
    return await service.complete_purchase(user.id, request.reference, request.video_id)
