"""
Dashboard module.

Read-only account overview (profile, payment history, active access)
that degrades section by section when the store is unavailable.
"""

from .models import Dashboard, DashboardSectionError, PaymentWithVideo
from .service import DashboardService

__all__ = [
    "Dashboard",
    "DashboardSectionError",
    "PaymentWithVideo",
    "DashboardService",
]
