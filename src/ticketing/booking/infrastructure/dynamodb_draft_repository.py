import os
import time
from datetime import datetime

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ticketing.booking.domain.entity import BookingDraft
from ticketing.booking.domain.enum import TravelClass
from ticketing.booking.domain.repository import DraftRepository
from ticketing.booking.domain.value_object import (
    DepartureOrArrival,
    Email,
    FutureTimestamp,
    Location,
    Name,
    PaymentInfo,
    PhoneNumber,
    TimeKind,
    TripId,
)
from ticketing.shared.domain import SessionId
from ticketing.shared.domain.exception import SessionStoreException

DEFAULT_DRAFT_TTL_SECONDS = 3600


class DynamoDBDraftRepository(DraftRepository):
    """DynamoDBを使用したDraftRepository の具象実装

    1セッション = 1アイテム（PK=SESSION#<id>, SK=DRAFT）。
    保存のたびにアイテム全体を置き換える（後勝ち）。
    """

    def __init__(
        self, table_name: str | None = None, ttl_seconds: int | None = None
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.ttl_seconds = ttl_seconds or int(
            os.getenv("DRAFT_TTL_SECONDS", str(DEFAULT_DRAFT_TTL_SECONDS))
        )
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def load(self, session_id: SessionId) -> BookingDraft | None:
        """セッションIDでドラフトを取得する"""
        try:
            response = self.table.get_item(
                Key=self._key(session_id),
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise SessionStoreException(
                f"Failed to load draft for session {session_id}"
            ) from e

        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(session_id, item)

    def store(self, session_id: SessionId, draft: BookingDraft) -> None:
        """ドラフトを保存する"""
        item = {
            **self._key(session_id),
            "entity_type": "DRAFT",
            "session_id": str(session_id),
            "expires_at": int(time.time()) + self.ttl_seconds,
            **self._to_attributes(draft),
        }
        try:
            self.table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            raise SessionStoreException(
                f"Failed to store draft for session {session_id}"
            ) from e

    @staticmethod
    def _key(session_id: SessionId) -> dict:
        return {"PK": f"SESSION#{session_id}", "SK": "DRAFT"}

    @staticmethod
    def _to_attributes(draft: BookingDraft) -> dict:
        """ドラフトを DynamoDB の属性に変換する（未設定の項目は書き込まない）"""
        attributes: dict = {}
        if draft.origin is not None:
            attributes["origin"] = str(draft.origin)
        if draft.destination is not None:
            attributes["destination"] = str(draft.destination)
        if draft.time is not None:
            attributes["time_kind"] = draft.time.kind.value
            attributes["time_value"] = draft.time.timestamp.value.isoformat()
            attributes["time_checked_at"] = (
                draft.time.timestamp.checked_at.isoformat()
            )
        if draft.trip is not None:
            attributes["trip"] = str(draft.trip)
        if draft.travel_class is not None:
            attributes["travel_class"] = draft.travel_class.value
        if draft.name is not None:
            attributes["name"] = str(draft.name)
        if draft.email is not None:
            attributes["email"] = str(draft.email)
        if draft.phone_number is not None:
            attributes["phone_number"] = str(draft.phone_number)
        if draft.payment_info is not None:
            attributes["payment_info"] = draft.payment_info.get_secret_value()
        return attributes

    def _to_entity(self, session_id: SessionId, item: dict) -> BookingDraft:
        """DynamoDB アイテムをドラフトに変換する（全項目を再検証する）"""
        try:
            return BookingDraft(
                origin=_optional(item, "origin", Location),
                destination=_optional(item, "destination", Location),
                time=_time(item),
                trip=_optional(item, "trip", TripId.from_string),
                travel_class=_optional(item, "travel_class", TravelClass),
                name=_optional(item, "name", Name),
                email=_optional(item, "email", Email),
                phone_number=_optional(item, "phone_number", PhoneNumber),
                payment_info=_optional(item, "payment_info", PaymentInfo),
            )
        except (KeyError, ValueError) as e:
            raise SessionStoreException(
                f"Stored draft for session {session_id} is corrupt"
            ) from e


def _optional(item: dict, key: str, build):
    raw = item.get(key)
    return None if raw is None else build(raw)


def _time(item: dict) -> DepartureOrArrival | None:
    if "time_kind" not in item:
        return None
    timestamp = FutureTimestamp(
        value=datetime.fromisoformat(item["time_value"]),
        checked_at=datetime.fromisoformat(item["time_checked_at"]),
    )
    return DepartureOrArrival(kind=TimeKind(item["time_kind"]), timestamp=timestamp)
