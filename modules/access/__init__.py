"""
Access module.

Access grants: issuing them, the entitlement check that gates playback,
lazy revocation on expiry, and live access snapshots.

Public API:
- IAccessService: Interface for the access-grant lifecycle
- IAccessRepository, IAccessChangeFeed: Injected collaborators
- AccessGrant, AccessSnapshot, AccessChange: Models
- InMemoryAccessFeed, SupabaseRealtimeAccessFeed: Change feeds
"""

from .interfaces import IAccessService, IAccessRepository, IAccessChangeFeed
from .models import AccessGrant, AccessSnapshot, AccessChange, AccessStatusResponse
from .feed import InMemoryAccessFeed, SupabaseRealtimeAccessFeed
from .exceptions import AccessError, ChangeFeedUnavailableError

__all__ = [
    # Interfaces
    "IAccessService",
    "IAccessRepository",
    "IAccessChangeFeed",
    # Models
    "AccessGrant",
    "AccessSnapshot",
    "AccessChange",
    "AccessStatusResponse",
    # Feeds
    "InMemoryAccessFeed",
    "SupabaseRealtimeAccessFeed",
    # Exceptions
    "AccessError",
    "ChangeFeedUnavailableError",
]
