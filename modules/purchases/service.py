"""
Purchase orchestration.

The only multi-step write sequence in the system. Each step is an
independent store call; there is no transaction across them and no
compensation when a later step fails.
"""

import logging
from typing import Optional

from shared.clock import Clock, utc_now
from shared.exceptions import StreampassError
from modules.access.interfaces import IAccessService
from modules.catalog.interfaces import ICatalogService
from modules.catalog.models import Video
from modules.payments.interfaces import IPaymentGateway, IPaymentRepository
from modules.payments.models import GatewayVerification, PaymentStatus
from modules.payments.exceptions import (
    AmountMismatchError,
    DuplicatePaymentReferenceError,
    PaymentNotSuccessfulError,
)
from modules.users.interfaces import IUserService

from .interfaces import IPurchaseService
from .models import PurchaseResult, PurchaseStage
from .exceptions import PurchaseIncompleteError

logger = logging.getLogger(__name__)


class PurchaseService(IPurchaseService):
    """
    Purchase flow: initiated -> gateway_confirmed -> recorded -> granted.

    A reference that is already recorded is refused before the gateway is
    called. Two concurrent submissions can both pass that read; the unique
    constraint on the reference then fails the second insert.

    Args:
        gateway: Payment gateway used to verify references
        payments: Payment record persistence
        access: Access-grant service
        users: Profile statistics
        catalog: Video lookups (price, default video)
        currency: Currency every price is expressed in
        clock: Time source; one reading is used for the whole purchase
    """

    def __init__(
        self,
        gateway: IPaymentGateway,
        payments: IPaymentRepository,
        access: IAccessService,
        users: IUserService,
        catalog: ICatalogService,
        currency: str = "GHS",
        clock: Clock = utc_now,
    ):
        self._gateway = gateway
        self._payments = payments
        self._access = access
        self._users = users
        self._catalog = catalog
        self._currency = currency
        self._clock = clock

    async def complete_purchase(
        self,
        user_id: str,
        reference: str,
        video_id: Optional[str] = None,
    ) -> PurchaseResult:
        video = await (
            self._catalog.get_video(video_id) if video_id else self._catalog.get_featured()
        )

        if self._payments.get_by_reference(reference) is not None:
            logger.warning(f"Reference {reference} already recorded; not verifying it again")
            raise DuplicatePaymentReferenceError(reference)

        # initiated -> gateway_confirmed
        verification = await self._gateway.verify(reference)
        if not verification.successful:
            logger.warning(
                f"Gateway reported status '{verification.status}' for reference {reference}"
            )
            raise PaymentNotSuccessfulError(reference, verification.status)
        self._check_amount(video, verification)

        # gateway_confirmed -> recorded
        verified_at = self._clock()
        expires_at = verified_at + self._access.access_duration
        payment = self._payments.create(
            user_id=user_id,
            video_id=video.id,
            amount=video.price,
            currency=self._currency,
            reference=reference,
            status=PaymentStatus.SUCCESSFUL,
            access_expires_at=expires_at,
            verified_at=verified_at,
        )
        logger.info(f"Recorded payment {payment.id} for reference {reference}")

        # recorded -> granted
        stage = PurchaseStage.RECORDED
        grant = None
        try:
            grant = await self._access.issue_grant(
                user_id=user_id,
                video_id=video.id,
                payment_id=payment.id,
                issued_at=verified_at,
            )
            stage = PurchaseStage.GRANTED
            profile = await self._users.record_purchase(user_id, video.price, videos=1)
        except StreampassError as e:
            logger.error(
                f"Purchase {reference} stopped after stage '{stage.value}': {e.message}"
            )
            raise PurchaseIncompleteError(
                stage,
                reference,
                payment.id,
                cause=e,
                grant_id=grant.id if grant else None,
            ) from e

        return PurchaseResult(
            stage=stage,
            payment=payment,
            grant=grant,
            total_spent=profile.total_spent,
            videos_watched=profile.videos_watched,
        )

    def _check_amount(self, video: Video, verification: GatewayVerification) -> None:
        paid_currency = verification.currency or self._currency
        if (
            verification.amount is None
            or verification.amount < video.price
            or paid_currency.upper() != self._currency.upper()
        ):
            raise AmountMismatchError(
                verification.reference,
                expected_amount=video.price,
                expected_currency=self._currency,
                paid_amount=verification.amount,
                paid_currency=verification.currency,
            )
