from collections.abc import Callable
from enum import IntEnum
from typing import Any

from ticketing.booking.domain.enum.travel_class import TravelClass
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    Email,
    Location,
    Name,
    PaymentInfo,
    PhoneNumber,
    TripId,
)


class Slot(IntEnum):
    """ドラフト予約の項目（入力必須順）

    スロット k は、それより前の全スロットが設定済みの場合のみ設定できる。
    """

    ORIGIN = 0
    DESTINATION = 1
    TIME = 2
    TRIP = 3
    TRAVEL_CLASS = 4
    NAME = 5
    EMAIL = 6
    PHONE_NUMBER = 7
    PAYMENT_INFO = 8

    @property
    def field_name(self) -> str:
        """BookingDraft 上の属性名"""
        return self.name.lower()

    @property
    def prerequisites(self) -> tuple["Slot", ...]:
        return tuple(Slot(i) for i in range(self.value))

    def parse(self, raw: Any) -> Any:
        """生の入力値を値オブジェクトに変換する

        すでに値オブジェクトであればそのまま返す。

        Raises:
            ValueError: 値が検証に失敗した場合
        """
        value_type, build = _PARSERS[self]
        if isinstance(raw, value_type):
            return raw
        return build(raw)


_PARSERS: dict[Slot, tuple[type, Callable[[Any], Any]]] = {
    Slot.ORIGIN: (Location, Location),
    Slot.DESTINATION: (Location, Location),
    Slot.TIME: (DepartureOrArrival, DepartureOrArrival.from_dict),
    Slot.TRIP: (TripId, TripId.from_string),
    Slot.TRAVEL_CLASS: (TravelClass, TravelClass),
    Slot.NAME: (Name, Name),
    Slot.EMAIL: (Email, Email),
    Slot.PHONE_NUMBER: (PhoneNumber, PhoneNumber),
    Slot.PAYMENT_INFO: (PaymentInfo, PaymentInfo),
}
