from datetime import datetime
from typing import Any

from ticketing.booking.domain.entity import BookingDraft, Trip
from ticketing.booking.domain.enum import Slot
from ticketing.booking.domain.repository import (
    BookingConfirmation,
    DraftRepository,
)
from ticketing.booking.domain.service import list_matching
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    FutureTimestamp,
    TimeKind,
)
from ticketing.shared.domain import SessionId
from ticketing.shared.domain.exception import BookingConfirmationException


class TicketMachineService:
    """乗車券購入のユースケース

    各操作はセッションストアに対して読み取り→遷移→書き込みを1回だけ行う。
    遷移そのものは BookingDraft の純粋なメソッドに任せる。
    """

    def __init__(
        self, repository: DraftRepository, confirmation: BookingConfirmation
    ) -> None:
        self._repository = repository
        self._confirmation = confirmation

    def init_or_get(self, session_id: SessionId) -> BookingDraft:
        """ドラフトを取得する。なければ空のドラフトを作成して保存する"""
        draft = self._repository.load(session_id)
        if draft is None:
            draft = BookingDraft.empty()
            self._repository.store(session_id, draft)
        return draft

    def set_field(
        self, session_id: SessionId, slot: Slot, raw: Any
    ) -> BookingDraft:
        """スロットに値を設定する

        失敗時は何も保存しない。ドラフトが未作成の場合は空として扱う。

        Raises:
            SlotOrderException: 前提スロットが未設定の場合
            FieldValidationException: 値が検証に失敗した場合
        """
        current = self._repository.load(session_id) or BookingDraft.empty()
        updated = current.with_value(slot, raw)
        self._repository.store(session_id, updated)
        return updated

    def set_origin(self, session_id: SessionId, origin: Any) -> BookingDraft:
        return self.set_field(session_id, Slot.ORIGIN, origin)

    def set_destination(
        self, session_id: SessionId, destination: Any
    ) -> BookingDraft:
        return self.set_field(session_id, Slot.DESTINATION, destination)

    def set_departure(self, session_id: SessionId, departure: Any) -> BookingDraft:
        return self._set_time(session_id, TimeKind.DEPARTURE, departure)

    def set_arrival(self, session_id: SessionId, arrival: Any) -> BookingDraft:
        return self._set_time(session_id, TimeKind.ARRIVAL, arrival)

    def set_trip(self, session_id: SessionId, trip_id: Any) -> BookingDraft:
        return self.set_field(session_id, Slot.TRIP, trip_id)

    def set_travel_class(
        self, session_id: SessionId, travel_class: Any
    ) -> BookingDraft:
        return self.set_field(session_id, Slot.TRAVEL_CLASS, travel_class)

    def set_name(self, session_id: SessionId, name: Any) -> BookingDraft:
        return self.set_field(session_id, Slot.NAME, name)

    def set_email(self, session_id: SessionId, email: Any) -> BookingDraft:
        return self.set_field(session_id, Slot.EMAIL, email)

    def set_phone_number(
        self, session_id: SessionId, phone_number: Any
    ) -> BookingDraft:
        return self.set_field(session_id, Slot.PHONE_NUMBER, phone_number)

    def finalize(self, session_id: SessionId, payment_info: Any) -> BookingDraft:
        """支払い情報を保存し、予約確定の副作用を実行する

        副作用が失敗しても保存済みのドラフトはそのまま残るため、再実行できる。

        Raises:
            BookingConfirmationException: 予約確定の副作用が失敗した場合
        """
        draft = self.set_field(session_id, Slot.PAYMENT_INFO, payment_info)
        try:
            self._confirmation.confirm(session_id, draft)
        except Exception as e:
            raise BookingConfirmationException(
                "Booking confirmation failed. Payment info is saved; "
                "retry booking"
            ) from e
        return draft

    def list_trips(
        self, session_id: SessionId, now: datetime | None = None
    ) -> list[Trip]:
        """出発地・目的地・時刻に合う便を返す（ドラフトは変更しない）

        Raises:
            SlotOrderException: 出発地・目的地・時刻のいずれかが未設定の場合
        """
        draft = self._repository.load(session_id) or BookingDraft.empty()
        draft.check_ready_for(Slot.TRIP)
        return list(
            list_matching(draft.origin, draft.destination, draft.time, now=now)
        )

    def _set_time(
        self, session_id: SessionId, kind: TimeKind, raw: Any
    ) -> BookingDraft:
        # 検証は順序チェックの後に行うため、ここではワイヤ形式に揃えるだけ
        if isinstance(raw, FutureTimestamp):
            value: Any = DepartureOrArrival(kind=kind, timestamp=raw)
        elif isinstance(raw, datetime):
            value = {kind.value: raw.isoformat()}
        else:
            value = {kind.value: raw}
        return self.set_field(session_id, Slot.TIME, value)
