import pytest
from unittest.mock import MagicMock

from modules.users.exceptions import InvalidStatsIncrementError, UserNotFoundError
from modules.users.service import UserService, split_full_name
from shared.exceptions import DuplicateRecordError
from shared.models import AuthenticatedUser

from tests.fakes import FakeUserRepository


@pytest.fixture
def user() -> AuthenticatedUser:
    return AuthenticatedUser(id="user-1", email="ama@example.com", full_name="Ama Serwaa Mensah")


class TestSplitFullName:
    def test_first_and_rest(self):
        assert split_full_name("Ama Serwaa Mensah") == ("Ama", "Serwaa Mensah")

    def test_single_word(self):
        assert split_full_name("Ama") == ("Ama", "")

    def test_empty(self):
        assert split_full_name(None) == ("User", "")
        assert split_full_name("   ") == ("User", "")


@pytest.mark.asyncio
class TestEnsureProfile:
    async def test_creates_with_zeroed_stats(self, user_service, user_repo, user):
        profile = await user_service.ensure_profile(user)

        assert profile.first_name == "Ama"
        assert profile.last_name == "Serwaa Mensah"
        assert profile.total_spent == 0
        assert profile.videos_watched == 0
        assert user_repo.users["user-1"] == profile

    async def test_explicit_names_win(self, user_service, user):
        profile = await user_service.ensure_profile(user, first_name="Kofi", last_name="")
        assert profile.display_name == "Kofi"

    async def test_existing_profile_untouched(self, user_service, user_repo, user):
        await user_service.ensure_profile(user)
        await user_service.record_purchase("user-1", 10000)

        profile = await user_service.ensure_profile(user, first_name="Other")

        assert profile.first_name == "Ama"
        assert profile.total_spent == 10000

    async def test_concurrent_create_rereads(self, user):
        existing = MagicMock()
        repository = MagicMock()
        repository.get_by_id.side_effect = [None, existing]
        repository.create.side_effect = DuplicateRecordError("users")

        profile = await UserService(repository).ensure_profile(user)

        assert profile is existing

    async def test_duplicate_without_row_propagates(self, user):
        repository = MagicMock()
        repository.get_by_id.return_value = None
        repository.create.side_effect = DuplicateRecordError("users")

        with pytest.raises(DuplicateRecordError):
            await UserService(repository).ensure_profile(user)


@pytest.mark.asyncio
class TestRecordPurchase:
    async def test_increments(self, user_service, user):
        await user_service.ensure_profile(user)

        await user_service.record_purchase("user-1", 10000)
        profile = await user_service.record_purchase("user-1", 5000)

        assert profile.total_spent == 15000
        assert profile.videos_watched == 2

    async def test_unknown_user(self, user_service):
        with pytest.raises(UserNotFoundError):
            await user_service.record_purchase("ghost", 10000)

    async def test_negative_amount_rejected(self, user_service):
        with pytest.raises(InvalidStatsIncrementError):
            await user_service.record_purchase("user-1", -1)

    async def test_get_profile(self, user_service, user):
        assert await user_service.get_profile("user-1") is None
        await user_service.ensure_profile(user)
        assert (await user_service.get_profile("user-1")).email == "ama@example.com"
