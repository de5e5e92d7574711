"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user profile doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidStatsIncrementError(ValidationError):
    """Raised when a statistics increment would decrease a counter."""

    def __init__(self, amount: int, videos: int):
        super().__init__(
            f"Invalid statistics increment: amount={amount}, videos={videos}",
            code="INVALID_STATS_INCREMENT",
            details={"amount": amount, "videos": videos},
        )
