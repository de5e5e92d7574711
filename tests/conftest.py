"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from fastapi.testclient import TestClient

from api import app
from api import dependencies as deps
from modules.access.feed import InMemoryAccessFeed
from modules.access.service import AccessService
from modules.auth.service import AuthService
from modules.catalog.service import CatalogService
from modules.dashboard.service import DashboardService
from modules.purchases.service import PurchaseService
from modules.users.service import UserService
from shared.config import Settings

from tests.fakes import (
    FakeAccessRepository,
    FakeClock,
    FakeGateway,
    FakePaymentRepository,
    FakeUserRepository,
    FakeVideoRepository,
)


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    full_name: Optional[str] = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        full_name: Optional display name placed in user_metadata
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if full_name:
        payload["user_metadata"] = {"full_name": full_name}
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_dependencies():
    """Reset the service container and route overrides around each test."""
    deps.reset_container()
    app.dependency_overrides.clear()
    yield
    deps.reset_container()
    app.dependency_overrides.clear()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


# In-memory world: fakes plus real services wired the way the container does


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def feed() -> InMemoryAccessFeed:
    return InMemoryAccessFeed()


@pytest.fixture
def video_repo() -> FakeVideoRepository:
    return FakeVideoRepository()


@pytest.fixture
def payment_repo(clock) -> FakePaymentRepository:
    return FakePaymentRepository(clock)


@pytest.fixture
def access_repo(clock, feed) -> FakeAccessRepository:
    return FakeAccessRepository(clock, feed)


@pytest.fixture
def user_repo(clock) -> FakeUserRepository:
    return FakeUserRepository(clock)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def catalog_service(video_repo) -> CatalogService:
    return CatalogService(video_repo, featured_video_id="gis_documentary_001")


@pytest.fixture
def access_service(access_repo, feed, clock) -> AccessService:
    return AccessService(access_repo, feed=feed, access_duration=timedelta(hours=24), clock=clock)


@pytest.fixture
def user_service(user_repo) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def purchase_service(gateway, payment_repo, access_service, user_service, catalog_service, clock) -> PurchaseService:
    return PurchaseService(
        gateway=gateway,
        payments=payment_repo,
        access=access_service,
        users=user_service,
        catalog=catalog_service,
        currency="GHS",
        clock=clock,
    )


@pytest.fixture
def dashboard_service(user_service, payment_repo, access_service, catalog_service) -> DashboardService:
    return DashboardService(
        users=user_service,
        payments=payment_repo,
        access=access_service,
        catalog=catalog_service,
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
        supabase_jwt_secret=TEST_JWT_SECRET,
        paystack_public_key="pk_test_123",
        paystack_secret_key="sk_test_123",
    )


@pytest.fixture
def client(
    test_settings,
    gateway,
    catalog_service,
    access_service,
    user_service,
    purchase_service,
    dashboard_service,
) -> TestClient:
    """TestClient whose dependencies resolve to the in-memory world."""
    app.dependency_overrides[deps.get_app_settings] = lambda: test_settings
    app.dependency_overrides[deps.get_auth_service] = lambda: AuthService(TEST_JWT_SECRET)
    app.dependency_overrides[deps.get_payment_gateway] = lambda: gateway
    app.dependency_overrides[deps.get_catalog_service] = lambda: catalog_service
    app.dependency_overrides[deps.get_access_service] = lambda: access_service
    app.dependency_overrides[deps.get_user_service] = lambda: user_service
    app.dependency_overrides[deps.get_purchase_service] = lambda: purchase_service
    app.dependency_overrides[deps.get_dashboard_service] = lambda: dashboard_service
    return TestClient(app)
