"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST failures into the
shared exception hierarchy.
"""

from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DuplicateRecordError, StoreError


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() which maps APIError to DuplicateRecordError / StoreError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PaymentRepository(BaseRepository[Payment]):
            def get_by_reference(self, reference: str) -> Optional[Payment]:
                result = self._execute(
                    self._db.table("payments").select("*").eq("paystack_reference", reference)
                )
                if not result.data:
                    return None
                return self._map_to_payment(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query builder.

        Raises:
            DuplicateRecordError: If a unique constraint rejected the write.
            StoreError: For any other PostgREST failure, or when the store
                cannot be reached.
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(self.table_name, e.message or "Record already exists") from e
            raise StoreError(e.message or str(e), table=self.table_name) from e
        except httpx.HTTPError as e:
            raise StoreError(str(e) or type(e).__name__, table=self.table_name) from e
