"""
Purchases module exceptions.
"""

from typing import Optional

from shared.exceptions import StreampassError

from .models import PurchaseStage


class PurchaseIncompleteError(StreampassError):
    """
    Raised when a step after the payment was recorded fails.

    Nothing is rolled back: the payment record exists, and depending on
    ``stage`` the grant may exist too.
    """

    def __init__(
        self,
        stage: PurchaseStage,
        reference: str,
        payment_id: str,
        cause: Optional[Exception] = None,
        grant_id: Optional[str] = None,
    ):
        super().__init__(
            f"Purchase stopped after stage '{stage.value}'",
            code="PURCHASE_INCOMPLETE",
            details={
                "stage": stage.value,
                "reference": reference,
                "payment_id": payment_id,
                "grant_id": grant_id,
                "cause": getattr(cause, "code", type(cause).__name__) if cause else None,
            },
        )
        self.stage = stage
