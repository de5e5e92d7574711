import pytest
import jwt
from datetime import datetime, timedelta, timezone

from modules.auth.service import AuthService
from modules.auth.exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


def _token(secret: str = "test-secret", **overrides) -> str:
    payload = {
        "sub": "user-123",
        "email": "test@example.com",
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        "iat": datetime.now(timezone.utc),
        "aud": "authenticated",
        "role": "authenticated",
    }
    payload.update(overrides)
    return jwt.encode(payload, secret, algorithm="HS256")


class TestAuthService:
    @pytest.fixture
    def service(self):
        return AuthService(jwt_secret="test-secret")

    @pytest.mark.asyncio
    async def test_validate_valid_token(self, service):
        """Should validate a valid token and return user."""
        user = await service.validate_token(_token())
        assert user.id == "user-123"
        assert user.email == "test@example.com"
        assert user.role == "user"
        assert user.email_verified is False

    @pytest.mark.asyncio
    async def test_email_confirmation_and_name(self, service):
        token = _token(
            email_confirmed_at="2025-01-01T00:00:00Z",
            user_metadata={"full_name": "Ama Mensah"},
        )
        user = await service.validate_token(token)
        assert user.email_verified is True
        assert user.full_name == "Ama Mensah"

    @pytest.mark.asyncio
    async def test_validate_expired_token(self, service):
        """Should raise ExpiredTokenError for expired token."""
        token = _token(
            exp=datetime.now(timezone.utc) - timedelta(hours=1),
            iat=datetime.now(timezone.utc) - timedelta(hours=2),
        )
        with pytest.raises(ExpiredTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_invalid_token(self, service):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError, match="Invalid token"):
            await service.validate_token("not-a-valid-token")

    @pytest.mark.asyncio
    async def test_validate_missing_token(self, service):
        with pytest.raises(MissingTokenError):
            await service.validate_token("")

    @pytest.mark.asyncio
    async def test_validate_none_token(self, service):
        with pytest.raises(MissingTokenError):
            await service.validate_token(None)

    @pytest.mark.asyncio
    async def test_validate_wrong_secret(self, service):
        with pytest.raises(InvalidTokenError):
            await service.validate_token(_token(secret="wrong-secret"))

    @pytest.mark.asyncio
    async def test_validate_wrong_audience(self, service):
        with pytest.raises(InvalidTokenError):
            await service.validate_token(_token(aud="wrong-audience"))

    @pytest.mark.asyncio
    async def test_token_without_email(self, service):
        with pytest.raises(InvalidTokenError, match="email"):
            await service.validate_token(_token(email=None))

    @pytest.mark.asyncio
    async def test_unconfigured_secret(self):
        service = AuthService(jwt_secret="")
        with pytest.raises(AuthNotConfiguredError) as exc_info:
            await service.validate_token(_token())
        assert exc_info.value.message == "Server authentication not configured"
