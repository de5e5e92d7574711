"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with their
collaborators passed in explicitly.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.catalog.interfaces import ICatalogService, IVideoRepository
    from modules.payments.interfaces import IPaymentGateway, IPaymentRepository
    from modules.access.interfaces import IAccessService, IAccessRepository, IAccessChangeFeed
    from modules.users.interfaces import IUserService, IUserRepository
    from modules.purchases.interfaces import IPurchaseService
    from modules.dashboard.service import DashboardService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear all cached services for
    testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._db: "Client | None" = None
        self._auth_service: "IAuthService | None" = None
        self._video_repository: "IVideoRepository | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._payment_gateway: "IPaymentGateway | None" = None
        self._payment_repository: "IPaymentRepository | None" = None
        self._access_repository: "IAccessRepository | None" = None
        self._access_feed: "IAccessChangeFeed | None" = None
        self._access_service: "IAccessService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._purchase_service: "IPurchaseService | None" = None
        self._dashboard_service: "DashboardService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Service-role Supabase client shared by all repositories."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.settings.supabase_jwt_secret)
        return self._auth_service

    @property
    def video_repository(self) -> "IVideoRepository":
        if self._video_repository is None:
            from modules.catalog.repository import VideoRepository
            self._video_repository = VideoRepository(self.db)
        return self._video_repository

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(
                repository=self.video_repository,
                featured_video_id=self.settings.featured_video_id,
            )
        return self._catalog_service

    @property
    def payment_gateway(self) -> "IPaymentGateway":
        """Get the Paystack gateway client."""
        if self._payment_gateway is None:
            from modules.payments.gateway import PaystackGateway
            self._payment_gateway = PaystackGateway(
                secret_key=self.settings.paystack_secret_key,
                base_url=self.settings.paystack_base_url,
                timeout=self.settings.paystack_timeout_seconds,
            )
        return self._payment_gateway

    @property
    def payment_repository(self) -> "IPaymentRepository":
        if self._payment_repository is None:
            from modules.payments.repository import PaymentRepository
            self._payment_repository = PaymentRepository(self.db)
        return self._payment_repository

    @property
    def access_repository(self) -> "IAccessRepository":
        if self._access_repository is None:
            from modules.access.repository import AccessRepository
            self._access_repository = AccessRepository(self.db)
        return self._access_repository

    @property
    def access_feed(self) -> "IAccessChangeFeed":
        if self._access_feed is None:
            from modules.access.feed import SupabaseRealtimeAccessFeed
            from shared.database import get_supabase_async_client
            self._access_feed = SupabaseRealtimeAccessFeed(get_supabase_async_client)
        return self._access_feed

    @property
    def access(self) -> "IAccessService":
        """Get the access service instance."""
        if self._access_service is None:
            from modules.access.service import AccessService
            self._access_service = AccessService(
                repository=self.access_repository,
                feed=self.access_feed,
                access_duration=timedelta(hours=self.settings.access_duration_hours),
            )
        return self._access_service

    @property
    def user_repository(self) -> "IUserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository)
        return self._user_service

    @property
    def purchases(self) -> "IPurchaseService":
        """Get the purchase service instance."""
        if self._purchase_service is None:
            from modules.purchases.service import PurchaseService
            self._purchase_service = PurchaseService(
                gateway=self.payment_gateway,
                payments=self.payment_repository,
                access=self.access,
                users=self.users,
                catalog=self.catalog,
                currency=self.settings.currency,
            )
        return self._purchase_service

    @property
    def dashboard(self) -> "DashboardService":
        """Get the dashboard service instance."""
        if self._dashboard_service is None:
            from modules.dashboard.service import DashboardService
            self._dashboard_service = DashboardService(
                users=self.users,
                payments=self.payment_repository,
                access=self.access,
                catalog=self.catalog,
            )
        return self._dashboard_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__(self._settings)


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for settings."""
    return get_container().settings


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_payment_gateway() -> "IPaymentGateway":
    """FastAPI dependency for the payment gateway."""
    return get_container().payment_gateway


def get_access_service() -> "IAccessService":
    """FastAPI dependency for access service."""
    return get_container().access


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_purchase_service() -> "IPurchaseService":
    """FastAPI dependency for purchase service."""
    return get_container().purchases


def get_dashboard_service() -> "DashboardService":
    """FastAPI dependency for dashboard service."""
    return get_container().dashboard
