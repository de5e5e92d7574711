import httpx
import pytest
from datetime import timedelta
from unittest.mock import MagicMock

from modules.access.repository import AccessRepository
from modules.access.service import AccessService
from modules.catalog.repository import VideoRepository
from modules.catalog.service import CatalogService
from modules.dashboard.models import DASHBOARD_ERROR_MESSAGE
from modules.dashboard.service import DashboardService
from modules.payments.repository import PaymentRepository
from modules.users.repository import UserRepository
from modules.users.service import UserService
from shared.models import AuthenticatedUser

from tests.fakes import FakeClock

USER = AuthenticatedUser(id="user-1", email="ama@example.com", full_name="Ama Mensah")


@pytest.mark.asyncio
class TestDashboard:
    async def _buy(self, user_service, gateway, purchase_service, reference: str):
        await user_service.ensure_profile(USER)
        gateway.succeed(reference)
        return await purchase_service.complete_purchase(USER.id, reference)

    async def test_full_dashboard(self, dashboard_service, user_service, gateway, purchase_service):
        result = await self._buy(user_service, gateway, purchase_service, "ref_abc123")

        dashboard = await dashboard_service.get_dashboard(USER)

        assert dashboard.errors == []
        assert dashboard.profile.total_spent == 10000
        assert dashboard.profile.display_name == "Ama Mensah"
        assert [p.id for p in dashboard.payments] == [result.payment.id]
        assert dashboard.payments[0].video.title == "Ghana International School Documentary"
        assert [g.id for g in dashboard.active_access] == [result.grant.id]

    async def test_first_visit_creates_profile(self, dashboard_service, user_repo):
        dashboard = await dashboard_service.get_dashboard(USER)

        assert dashboard.profile.total_spent == 0
        assert dashboard.payments == []
        assert "user-1" in user_repo.users

    async def test_payments_newest_first(
        self, dashboard_service, user_service, gateway, purchase_service, clock
    ):
        first = await self._buy(user_service, gateway, purchase_service, "ref_1")
        clock.advance(timedelta(hours=1))
        second = await self._buy(user_service, gateway, purchase_service, "ref_2")

        dashboard = await dashboard_service.get_dashboard(USER)

        assert [p.id for p in dashboard.payments] == [second.payment.id, first.payment.id]

    async def test_payments_outage_degrades(
        self, dashboard_service, user_service, gateway, purchase_service, payment_repo
    ):
        await self._buy(user_service, gateway, purchase_service, "ref_abc123")
        payment_repo.fail = True

        dashboard = await dashboard_service.get_dashboard(USER)

        assert dashboard.payments == []
        assert dashboard.profile is not None
        assert len(dashboard.active_access) == 1
        assert [(e.section, e.message) for e in dashboard.errors] == [
            ("payments", DASHBOARD_ERROR_MESSAGE)
        ]

    async def test_every_section_down(
        self, dashboard_service, user_repo, payment_repo, access_repo
    ):
        user_repo.fail = True
        payment_repo.fail = True
        access_repo.fail = True

        dashboard = await dashboard_service.get_dashboard(USER)

        assert dashboard.profile is None
        assert [e.section for e in dashboard.errors] == ["profile", "payments", "active_access"]

    async def test_missing_video_leaves_payment(
        self, dashboard_service, user_service, gateway, purchase_service, video_repo
    ):
        await self._buy(user_service, gateway, purchase_service, "ref_abc123")
        video_repo.videos.clear()

        dashboard = await dashboard_service.get_dashboard(USER)

        assert len(dashboard.payments) == 1
        assert dashboard.payments[0].video is None
        assert dashboard.errors == []

    async def test_expired_access_hidden(
        self, dashboard_service, user_service, gateway, purchase_service, clock
    ):
        await self._buy(user_service, gateway, purchase_service, "ref_abc123")
        clock.advance(timedelta(hours=25))

        dashboard = await dashboard_service.get_dashboard(USER)

        assert dashboard.active_access == []
        assert len(dashboard.payments) == 1


def _unreachable_db(error: Exception) -> MagicMock:
    """Supabase client whose every query fails before reaching the store."""
    query = MagicMock()
    for method in ("select", "insert", "update", "eq", "order"):
        getattr(query, method).return_value = query
    query.execute.side_effect = error
    db = MagicMock()
    db.table.return_value = query
    db.rpc.return_value = query
    return db


@pytest.mark.asyncio
class TestDashboardStoreOutage:
    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("down"), httpx.ReadTimeout("slow")],
    )
    async def test_unreachable_store_degrades_every_section(self, error):
        db = _unreachable_db(error)
        service = DashboardService(
            users=UserService(UserRepository(db)),
            payments=PaymentRepository(db),
            access=AccessService(AccessRepository(db), clock=FakeClock()),
            catalog=CatalogService(VideoRepository(db), featured_video_id="gis_documentary_001"),
        )

        dashboard = await service.get_dashboard(USER)

        assert dashboard.profile is None
        assert dashboard.payments == []
        assert dashboard.active_access == []
        assert [e.section for e in dashboard.errors] == ["profile", "payments", "active_access"]
