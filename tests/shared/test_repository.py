"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

import httpx
from postgrest.exceptions import APIError

from shared.exceptions import DuplicateRecordError, StoreError
from shared.repository import BaseRepository


class SampleRepository(BaseRepository[dict]):
    table_name = "samples"

    def get_all(self) -> list[dict]:
        return self._execute(self._db.table(self.table_name).select("*")).data


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_query_result(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        repo = SampleRepository(mock_db)

        assert repo.get_all() == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("samples")

    def test_unique_violation_becomes_duplicate_record(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value violates unique constraint"}
        )

        with pytest.raises(DuplicateRecordError) as exc_info:
            SampleRepository(mock_db).get_all()

        assert exc_info.value.code == "DUPLICATE_RECORD"
        assert exc_info.value.details == {"table": "samples"}

    def test_other_api_errors_become_store_errors(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = APIError(
            {"code": "PGRST301", "message": "JWT expired"}
        )

        with pytest.raises(StoreError) as exc_info:
            SampleRepository(mock_db).get_all()

        assert exc_info.value.message == "JWT expired"
        assert exc_info.value.details["table"] == "samples"
        assert exc_info.value.service == "supabase"

    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")],
    )
    def test_transport_errors_become_store_errors(self, error):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = error

        with pytest.raises(StoreError) as exc_info:
            SampleRepository(mock_db).get_all()

        assert exc_info.value.details["table"] == "samples"
        assert exc_info.value.__cause__ is error
