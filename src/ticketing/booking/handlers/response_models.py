from __future__ import annotations

from pydantic import BaseModel

from ticketing.booking.domain.entity import BookingDraft, Trip


class DraftData(BaseModel):
    """ドラフト予約のレスポンスモデル（payment_info は伏せ字）"""

    origin: str | None = None
    destination: str | None = None
    time: dict[str, str] | None = None
    trip: str | None = None
    travel_class: str | None = None
    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    payment_info: str | None = None


class TripData(BaseModel):
    """列車便のレスポンスモデル"""

    trip_id: str
    origin: str
    destination: str
    departure: str
    arrival: str


class DraftResponse(BaseModel):
    """ドラフト取得・更新の成功レスポンスモデル"""

    status: str = "success"
    data: DraftData


class TripsResponse(BaseModel):
    """便一覧の成功レスポンスモデル"""

    status: str = "success"
    data: list[TripData]
    count: int


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    code: str
    message: str
    field: str | None = None
    prerequisite: str | None = None


def to_draft_response(draft: BookingDraft) -> dict:
    """BookingDraft をレスポンス辞書に変換する"""
    return DraftResponse(data=DraftData(**draft.to_dict())).model_dump()


def to_trips_response(trips: list[Trip]) -> dict:
    """Trip のリストをレスポンス辞書に変換する"""
    data = [
        TripData(
            trip_id=str(trip.id),
            origin=str(trip.origin),
            destination=str(trip.destination),
            departure=trip.departure.isoformat(),
            arrival=trip.arrival.isoformat(),
        )
        for trip in trips
    ]
    return TripsResponse(data=data, count=len(data)).model_dump()
