from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from ticketing.booking.domain.entity import BookingDraft
from ticketing.booking.domain.value_object import Location
from ticketing.booking.infrastructure import DynamoDBDraftRepository
from ticketing.shared.domain.exception import SessionStoreException


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch("boto3.resource") as mock_resource:
        mock_resource.return_value.Table.return_value = table
        yield DynamoDBDraftRepository(table_name="SessionTable", ttl_seconds=60)


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException"}}, operation
    )


class TestDynamoDBDraftRepository:
    """DynamoDBDraftRepository のテスト（boto3 はモック）"""

    def test_store_writes_one_item_per_session(
        self, repository, table, session_id, create_draft
    ):
        draft = create_draft(9)

        repository.store(session_id, draft)

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "SESSION#session-123"
        assert item["SK"] == "DRAFT"
        assert item["origin"] == "Amsterdam Centraal"
        assert item["time_kind"] == "departure"
        assert item["travel_class"] == "first"
        assert item["payment_info"] == "tok_visa_4242"
        assert item["expires_at"] > 0

    def test_store_skips_unset_slots(self, repository, table, session_id):
        repository.store(session_id, BookingDraft(origin=Location("Berlin Hbf")))

        item = table.put_item.call_args.kwargs["Item"]
        assert item["origin"] == "Berlin Hbf"
        assert "destination" not in item
        assert "time_kind" not in item

    def test_load_returns_none_when_missing(self, repository, table, session_id):
        table.get_item.return_value = {}

        assert repository.load(session_id) is None
        table.get_item.assert_called_once_with(
            Key={"PK": "SESSION#session-123", "SK": "DRAFT"},
            ConsistentRead=True,
        )

    def test_load_restores_stored_draft(
        self, repository, table, session_id, create_draft
    ):
        draft = create_draft(9)
        repository.store(session_id, draft)
        stored = table.put_item.call_args.kwargs["Item"]
        table.get_item.return_value = {"Item": stored}

        loaded = repository.load(session_id)

        assert loaded == draft
        assert loaded.payment_info.get_secret_value() == "tok_visa_4242"

    def test_load_keeps_original_check_time(self, repository, table, session_id):
        """保存時点で未来だった時刻は、後から読んでも有効なまま"""
        checked_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
        table.get_item.return_value = {
            "Item": {
                "PK": "SESSION#session-123",
                "SK": "DRAFT",
                "origin": "Amsterdam Centraal",
                "destination": "Paris Nord",
                "time_kind": "arrival",
                "time_value": (checked_at + timedelta(hours=1)).isoformat(),
                "time_checked_at": checked_at.isoformat(),
            }
        }

        loaded = repository.load(session_id)

        assert loaded.stage == 3
        assert not loaded.time.is_departure

    def test_load_corrupt_item_raises(self, repository, table, session_id):
        table.get_item.return_value = {
            "Item": {"PK": "SESSION#session-123", "SK": "DRAFT", "origin": "Mars"}
        }

        with pytest.raises(SessionStoreException, match="corrupt"):
            repository.load(session_id)

    def test_load_client_error_raises(self, repository, table, session_id):
        table.get_item.side_effect = _client_error("GetItem")

        with pytest.raises(SessionStoreException):
            repository.load(session_id)

    def test_store_client_error_raises(self, repository, table, session_id):
        table.put_item.side_effect = _client_error("PutItem")

        with pytest.raises(SessionStoreException):
            repository.store(session_id, BookingDraft.empty())
