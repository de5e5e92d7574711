"""
Dashboard service.

Store outages on this page degrade to empty sections instead of failing
the request; the client shows an error toast for each entry in
``Dashboard.errors``.
"""

import logging
from typing import Optional

from shared.exceptions import StoreError, StreampassError
from shared.models import AuthenticatedUser
from modules.access.interfaces import IAccessService
from modules.catalog.interfaces import ICatalogService
from modules.catalog.models import Video, VideoSummary
from modules.payments.interfaces import IPaymentRepository
from modules.users.interfaces import IUserService
from modules.users.models import UserProfileResponse

from .models import Dashboard, DashboardSectionError, PaymentWithVideo

logger = logging.getLogger(__name__)


class DashboardService:
    """Assembles the account dashboard from independent reads."""

    def __init__(
        self,
        users: IUserService,
        payments: IPaymentRepository,
        access: IAccessService,
        catalog: ICatalogService,
    ):
        self._users = users
        self._payments = payments
        self._access = access
        self._catalog = catalog

    async def get_dashboard(self, user: AuthenticatedUser) -> Dashboard:
        dashboard = Dashboard()

        try:
            profile = await self._users.ensure_profile(user)
            dashboard.profile = UserProfileResponse.from_profile(profile)
        except StoreError as e:
            logger.error(f"Dashboard: failed to load profile for {user.id}: {e.message}")
            dashboard.errors.append(DashboardSectionError(section="profile"))

        try:
            dashboard.payments = await self._load_payments(user.id)
        except StoreError as e:
            logger.error(f"Dashboard: failed to load payments for {user.id}: {e.message}")
            dashboard.errors.append(DashboardSectionError(section="payments"))

        try:
            dashboard.active_access = await self._access.list_active_access(user.id)
        except StoreError as e:
            logger.error(f"Dashboard: failed to load active access for {user.id}: {e.message}")
            dashboard.errors.append(DashboardSectionError(section="active_access"))

        logger.debug(
            f"Dashboard for {user.id}: {len(dashboard.payments)} payments, "
            f"{len(dashboard.active_access)} active grants, {len(dashboard.errors)} errors"
        )
        return dashboard

    async def _load_payments(self, user_id: str) -> list[PaymentWithVideo]:
        payments = self._payments.list_for_user(user_id)
        videos: dict[str, Optional[Video]] = {}

        result = []
        for payment in payments:
            if payment.video_id not in videos:
                videos[payment.video_id] = await self._load_video(payment.video_id)
            video = videos[payment.video_id]
            result.append(
                PaymentWithVideo(
                    **payment.model_dump(),
                    video=VideoSummary.from_video(video) if video else None,
                )
            )
        return result

    async def _load_video(self, video_id: str) -> Optional[Video]:
        try:
            return await self._catalog.get_video(video_id)
        except StreampassError as e:
            logger.warning(f"Dashboard: could not load video {video_id}: {e.message}")
            return None
