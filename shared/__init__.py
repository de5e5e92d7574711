"""
Shared infrastructure for Streampass backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with PostgREST error translation
- clock: Injectable time source

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_supabase_client,
    get_supabase_async_client,
    reset_client_cache,
)
from .exceptions import (
    StreampassError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    StoreError,
    DuplicateRecordError,
)
from .models import AuthenticatedUser
from .clock import Clock, utc_now

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_async_client",
    "reset_client_cache",
    "StreampassError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ExternalServiceError",
    "StoreError",
    "DuplicateRecordError",
    "AuthenticatedUser",
    "Clock",
    "utc_now",
]
