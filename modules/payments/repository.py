"""
Payment repository for database access.

Encapsulates Supabase queries and data mapping for the ``payments`` table.
The ``paystack_reference`` column carries a unique constraint; it is the
only guard against a reference being recorded twice.
"""

from datetime import datetime
from typing import Any, Optional

from shared.exceptions import DuplicateRecordError
from shared.repository import BaseRepository

from .models import Payment, PaymentStatus
from .exceptions import DuplicatePaymentReferenceError


class PaymentRepository(BaseRepository[Payment]):
    """
    Repository for payment records.

    Note: This repository does NOT perform authorization checks.
    """

    table_name = "payments"

    def create(
        self,
        user_id: str,
        video_id: str,
        amount: int,
        currency: str,
        reference: str,
        status: PaymentStatus,
        access_expires_at: datetime,
        verified_at: Optional[datetime] = None,
    ) -> Payment:
        data: dict[str, Any] = {
            "user_id": user_id,
            "video_id": video_id,
            "amount": amount,
            "currency": currency,
            "paystack_reference": reference,
            "status": status.value,
            "access_expires_at": access_expires_at.isoformat(),
        }
        if verified_at is not None:
            data["verified_at"] = verified_at.isoformat()

        try:
            result = self._execute(self._db.table(self.table_name).insert(data))
        except DuplicateRecordError as e:
            raise DuplicatePaymentReferenceError(reference) from e

        return self._map_to_payment(result.data[0])

    def get_by_reference(self, reference: str) -> Optional[Payment]:
        result = self._execute(
            self._db.table(self.table_name).select("*").eq("paystack_reference", reference)
        )
        if not result.data:
            return None
        return self._map_to_payment(result.data[0])

    def list_for_user(self, user_id: str) -> list[Payment]:
        result = self._execute(
            self._db.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        return [self._map_to_payment(row) for row in result.data]

    def update_status(
        self,
        payment_id: str,
        status: PaymentStatus,
        verified_at: datetime,
    ) -> None:
        self._execute(
            self._db.table(self.table_name)
            .update({"status": status.value, "verified_at": verified_at.isoformat()})
            .eq("id", payment_id)
        )

    def _map_to_payment(self, data: dict[str, Any]) -> Payment:
        """Map database row to Payment model."""
        return Payment(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            video_id=str(data["video_id"]),
            amount=int(data["amount"]),
            currency=data.get("currency") or "GHS",
            paystack_reference=data["paystack_reference"],
            status=PaymentStatus(data["status"]),
            access_expires_at=data["access_expires_at"],
            created_at=data["created_at"],
            verified_at=data.get("verified_at"),
        )
