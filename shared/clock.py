"""
Clock helpers.

Services take a ``Clock`` in their constructor instead of calling
``datetime.now`` directly, so expiry logic can be tested at exact instants.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
