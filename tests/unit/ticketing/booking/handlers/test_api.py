from datetime import datetime, timedelta, timezone

import pytest

from ticketing.booking.domain.value_object import Location
from ticketing.shared.domain import SessionId
from ticketing.shared.domain.exception import SessionStoreException


def _future(minutes: int = 30) -> str:
    return (datetime.now(timezone.utc) + timedelta(minutes=minutes)).isoformat()


class TestDraftEndpoints:
    def test_get_draft_creates_empty_draft(self, call_api):
        status, body, session_id = call_api("GET", "/draft")

        assert status == 200
        assert body["status"] == "success"
        assert all(value is None for value in body["data"].values())
        assert session_id == "session-123"

    def test_session_id_is_issued_when_missing(self, call_api):
        status, _, session_id = call_api("GET", "/draft", session_id=None)

        assert status == 200
        assert session_id

    def test_set_origin(self, call_api, repository):
        status, body, _ = call_api("POST", "/origin", "Amsterdam Centraal")

        assert status == 200
        assert body["data"]["origin"] == "Amsterdam Centraal"
        assert repository.load(SessionId(value="session-123")).origin == Location(
            "Amsterdam Centraal"
        )

    def test_invalid_location(self, call_api):
        status, body, _ = call_api("POST", "/origin", "Paris")

        assert status == 400
        assert body["status"] == "error"
        assert body["code"] == "INVALID_FIELD"
        assert body["field"] == "origin"

    def test_out_of_order(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")

        status, body, _ = call_api("POST", "/class", "first")

        assert status == 400
        assert body["code"] == "SLOT_ORDER"
        assert body["field"] == "travel_class"
        assert body["prerequisite"] == "destination"
        assert body["message"] == "Cannot set travel_class: set destination first"

    @pytest.mark.parametrize("body", [None, 42, {"origin": "Berlin Hbf"}])
    def test_body_must_be_json_string(self, call_api, body):
        status, response, _ = call_api("POST", "/origin", body)

        assert status == 400
        assert response["code"] == "INVALID_BODY"

    def test_set_departure_in_the_past(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")
        call_api("POST", "/destination", "Paris Nord")

        status, body, _ = call_api("POST", "/departure", "2000-01-01T00:00:00Z")

        assert status == 400
        assert body["field"] == "time"

    def test_set_arrival(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")
        call_api("POST", "/destination", "Paris Nord")

        status, body, _ = call_api("POST", "/arrival", _future(180))

        assert status == 200
        assert list(body["data"]["time"]) == ["arrival"]


class TestTripsEndpoint:
    def test_list_trips_requires_time(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")
        call_api("POST", "/destination", "Paris Nord")

        status, body, _ = call_api("GET", "/trips")

        assert status == 400
        assert body["prerequisite"] == "time"

    def test_list_trips(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")
        call_api("POST", "/destination", "Paris Nord")
        call_api("POST", "/departure", _future())

        status, body, _ = call_api("GET", "/trips")

        assert status == 200
        assert body["count"] == len(body["data"]) == 10
        trip = body["data"][0]
        assert trip["origin"] == "Amsterdam Centraal"
        assert trip["destination"] == "Paris Nord"


class TestBookingFlow:
    def _fill_until_phone_number(self, call_api):
        call_api("POST", "/origin", "Amsterdam Centraal")
        call_api("POST", "/destination", "Paris Nord")
        call_api("POST", "/departure", _future())
        _, trips, _ = call_api("GET", "/trips")
        call_api("POST", "/trip", trips["data"][0]["trip_id"])
        call_api("POST", "/class", "second")
        call_api("POST", "/name", "j")
        call_api("POST", "/email", "j@example.com")
        call_api("POST", "/phone_number", "123-456")

    def test_book_trip(self, call_api, confirmation):
        self._fill_until_phone_number(call_api)

        status, body, _ = call_api("POST", "/book_trip", "tok_visa_4242")

        assert status == 200
        assert body["data"]["travel_class"] == "second"
        assert body["data"]["payment_info"] == "<SECRET>"
        confirmation.confirm.assert_called_once()

    def test_book_trip_confirmation_failure(self, call_api, confirmation):
        self._fill_until_phone_number(call_api)
        confirmation.confirm.side_effect = RuntimeError("downstream unavailable")

        status, body, _ = call_api("POST", "/book_trip", "tok_visa_4242")

        assert status == 502
        assert body["code"] == "BOOKING_FAILED"
        assert "tok_visa_4242" not in str(body)

    def test_session_store_failure(self, call_api, repository, monkeypatch):
        def _unavailable(session_id):
            raise SessionStoreException("DynamoDB unavailable")

        monkeypatch.setattr(repository, "load", _unavailable)

        status, body, _ = call_api("GET", "/draft")

        assert status == 500
        assert body["code"] == "SESSION_STORE_ERROR"
        assert body["message"] == "Internal server error"


class TestRequestHandling:
    def test_session_header_is_case_insensitive(self, call_api):
        status, _, session_id = call_api(
            "GET", "/draft", session_id="session-789", session_header="X-Session-Id"
        )

        assert status == 200
        assert session_id == "session-789"

    def test_unknown_route_is_not_found(self, call_api):
        status, body, _ = call_api("GET", "/nope")

        assert status == 404
        assert body["status"] == "error"
        assert body["code"] == "NOT_FOUND"
