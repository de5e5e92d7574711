"""
Access module exceptions.
"""

from shared.exceptions import StreampassError


class AccessError(StreampassError):
    """Base exception for access-grant errors."""

    pass


class ChangeFeedUnavailableError(AccessError):
    """Raised when live access updates are requested but no feed is wired."""

    def __init__(self):
        super().__init__(
            "Live access updates are not available",
            code="CHANGE_FEED_UNAVAILABLE",
        )
