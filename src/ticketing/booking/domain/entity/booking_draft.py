from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ticketing.booking.domain.enum import Slot, TravelClass
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    Email,
    Location,
    Name,
    PaymentInfo,
    PhoneNumber,
    TripId,
)
from ticketing.shared.domain.exception import (
    FieldValidationException,
    SlotOrderException,
)


@dataclass(frozen=True)
class BookingDraft:
    """ドラフト予約（集約）

    - 9つのスロットを Slot の順に埋めていく
    - 遷移は常に新しいスナップショットを返し、自身は変更しない
    - payment_info は repr / to_dict で伏せ字になる
    """

    origin: Location | None = None
    destination: Location | None = None
    time: DepartureOrArrival | None = None
    trip: TripId | None = None
    travel_class: TravelClass | None = None
    name: Name | None = None
    email: Email | None = None
    phone_number: PhoneNumber | None = None
    payment_info: PaymentInfo | None = None

    @classmethod
    def empty(cls) -> BookingDraft:
        return cls()

    def get(self, slot: Slot) -> Any:
        return getattr(self, slot.field_name)

    @property
    def stage(self) -> int:
        """先頭から連続して設定済みのスロット数（0〜9）"""
        for slot in Slot:
            if self.get(slot) is None:
                return slot.value
        return len(Slot)

    @property
    def is_complete(self) -> bool:
        return self.stage == len(Slot)

    def check_ready_for(self, slot: Slot) -> None:
        """slot より前のスロットがすべて設定済みか確認する

        Raises:
            SlotOrderException: 未設定の前提スロットがある場合
        """
        if self.stage >= slot.value:
            return
        missing = Slot(self.stage)
        raise SlotOrderException(
            field=slot.field_name, prerequisite=missing.field_name
        )

    def with_value(self, slot: Slot, raw: Any) -> BookingDraft:
        """slot に値を設定した新しいスナップショットを返す

        順序チェックを先に行い、その後で値を検証する。

        Raises:
            SlotOrderException: 前提スロットが未設定の場合
            FieldValidationException: 値が検証に失敗した場合
        """
        self.check_ready_for(slot)
        try:
            value = slot.parse(raw)
        except ValueError as e:
            raise FieldValidationException(
                field=slot.field_name, reason=str(e)
            ) from e
        return replace(self, **{slot.field_name: value})

    def to_dict(self) -> dict[str, Any]:
        """表示用の辞書（payment_info は伏せ字）"""
        return {
            "origin": _render(self.origin),
            "destination": _render(self.destination),
            "time": self.time.to_dict() if self.time else None,
            "trip": _render(self.trip),
            "travel_class": _render(self.travel_class),
            "name": _render(self.name),
            "email": _render(self.email),
            "phone_number": _render(self.phone_number),
            "payment_info": _render(self.payment_info),
        }


def _render(value: object | None) -> str | None:
    return None if value is None else str(value)
