"""
Purchases module.

Orchestrates gateway verification, payment recording, grant issuance and
user statistics for one purchase.

Public API:
- IPurchaseService: Interface for completing purchases
- PurchaseStage, PurchaseRequest, PurchaseResult: Models
- PurchaseIncompleteError
"""

from .interfaces import IPurchaseService
from .models import PurchaseStage, PurchaseRequest, PurchaseResult
from .exceptions import PurchaseIncompleteError

__all__ = [
    "IPurchaseService",
    "PurchaseStage",
    "PurchaseRequest",
    "PurchaseResult",
    "PurchaseIncompleteError",
]
