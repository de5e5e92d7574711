import httpx
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from modules.access.repository import AccessRepository
from modules.access.service import AccessService
from shared.exceptions import StoreError

from tests.fakes import FakeClock

ROW = {
    "id": "g1",
    "user_id": "user-1",
    "video_id": "gis_documentary_001",
    "payment_id": "pay-1",
    "is_active": True,
    "expires_at": "2025-03-02T12:00:00+00:00",
    "created_at": "2025-03-01T12:00:00+00:00",
}


class TestAccessRepository:
    def test_find_active_filters(self):
        mock_db = MagicMock()
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.eq.return_value.eq.return_value.execute.return_value.data = [ROW]

        grants = AccessRepository(mock_db).find_active("user-1", "gis_documentary_001")

        assert grants[0].id == "g1"
        assert grants[0].expires_at == datetime(2025, 3, 2, 12, 0, tzinfo=timezone.utc)
        mock_db.table.assert_called_with("video_access")
        select.eq.assert_called_once_with("user_id", "user-1")
        select.eq.return_value.eq.assert_called_once_with("video_id", "gis_documentary_001")
        select.eq.return_value.eq.return_value.eq.assert_called_once_with("is_active", True)

    def test_create(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [ROW]
        expires_at = datetime(2025, 3, 2, 12, 0, tzinfo=timezone.utc)

        grant = AccessRepository(mock_db).create("user-1", "gis_documentary_001", "pay-1", expires_at)

        inserted = mock_db.table.return_value.insert.call_args.args[0]
        assert inserted["is_active"] is True
        assert inserted["expires_at"] == expires_at.isoformat()
        assert grant.payment_id == "pay-1"

    def test_deactivate(self):
        mock_db = MagicMock()

        AccessRepository(mock_db).deactivate("g1")

        mock_db.table.return_value.update.assert_called_once_with({"is_active": False})
        mock_db.table.return_value.update.return_value.eq.assert_called_once_with("id", "g1")

    def test_deactivate_unreachable_store(self):
        mock_db = MagicMock()
        mock_db.table.return_value.update.return_value.eq.return_value.execute.side_effect = (
            httpx.ReadTimeout("slow")
        )

        with pytest.raises(StoreError):
            AccessRepository(mock_db).deactivate("g1")


@pytest.mark.asyncio
class TestLazyCleanupAgainstStore:
    async def test_unreachable_store_during_cleanup_still_denies(self):
        expires_at = datetime(2025, 3, 2, 12, 0, tzinfo=timezone.utc)
        mock_db = MagicMock()
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.eq.return_value.eq.return_value.execute.return_value.data = [ROW]
        mock_db.table.return_value.update.return_value.eq.return_value.execute.side_effect = (
            httpx.ReadTimeout("slow")
        )
        service = AccessService(
            AccessRepository(mock_db),
            clock=FakeClock(expires_at + timedelta(milliseconds=1)),
        )

        assert await service.check_access("user-1", "gis_documentary_001") is None
        mock_db.table.return_value.update.assert_called_once_with({"is_active": False})
