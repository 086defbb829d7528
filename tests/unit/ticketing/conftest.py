from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from ticketing.booking.domain.entity import BookingDraft
from ticketing.booking.domain.enum import TravelClass
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    Email,
    FutureTimestamp,
    Location,
    Name,
    PaymentInfo,
    PhoneNumber,
    TripId,
)
from ticketing.shared.domain import SessionId


@pytest.fixture
def session_id():
    """全テスト共通の SessionId フィクスチャ"""
    return SessionId(value="session-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def now():
    return datetime(2030, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def create_draft():
    """指定した段階まで埋めた BookingDraft を生成する Factory fixture"""

    def _factory(stage: int = 9) -> BookingDraft:
        departure = datetime.now(timezone.utc) + timedelta(minutes=30)
        values = {
            "origin": Location("Amsterdam Centraal"),
            "destination": Location("Paris Nord"),
            "time": DepartureOrArrival.departure(FutureTimestamp(value=departure)),
            "trip": TripId.generate(),
            "travel_class": TravelClass.FIRST,
            "name": Name("j"),
            "email": Email("j@example.com"),
            "phone_number": PhoneNumber("123-456"),
            "payment_info": PaymentInfo("tok_visa_4242"),
        }
        return BookingDraft(**dict(list(values.items())[:stage]))

    return _factory
