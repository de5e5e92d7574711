"""
Database client factory for Supabase.

Provides the service-role client (backend operations bypass RLS) and an
async client used for realtime change notifications.
"""

from typing import Optional
from supabase import create_client, acreate_client, Client, AsyncClient

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None
_async_client: Optional[AsyncClient] = None


def _require_service_config() -> tuple[str, str]:
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return settings.supabase_url, settings.supabase_service_role_key


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Use this for backend operations that need full database access,
    such as recording payments and issuing access grants.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        url, key = _require_service_config()
        _service_client = create_client(url, key)

    return _service_client


async def get_supabase_async_client() -> AsyncClient:
    """
    Get the async Supabase client with service role.

    Realtime channels are only available on the async client, so the
    access change feed uses this one.
    """
    global _async_client

    if _async_client is None:
        url, key = _require_service_config()
        _async_client = await acreate_client(url, key)

    return _async_client


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    global _service_client, _async_client
    _service_client = None
    _async_client = None
