import os
from datetime import datetime, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ticketing.booking.domain.entity import BookingDraft
from ticketing.booking.domain.repository import BookingConfirmation
from ticketing.shared.domain import SessionId
from ticketing.shared.utils import get_logger

logger = get_logger()


class LoggingBookingConfirmation(BookingConfirmation):
    """予約確定をログに出力するだけの実装"""

    def confirm(self, session_id: SessionId, draft: BookingDraft) -> None:
        logger.info(
            "Trip booked",
            extra={"session_id": str(session_id), "draft": draft.to_dict()},
        )


class DynamoDBBookingConfirmation(BookingConfirmation):
    """予約確定レコードを DynamoDB に書き込む実装

    レコードには伏せ字済みのドラフトのみ保存する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def confirm(self, session_id: SessionId, draft: BookingDraft) -> None:
        confirmed_at = datetime.now(timezone.utc).isoformat()
        item = {
            "PK": f"SESSION#{session_id}",
            "SK": f"CONFIRMATION#{confirmed_at}",
            "entity_type": "CONFIRMATION",
            "session_id": str(session_id),
            "confirmed_at": confirmed_at,
            "booking": draft.to_dict(),
        }
        try:
            self.table.put_item(Item=item)
        except (BotoCoreError, ClientError):
            logger.exception(
                "Failed to write booking confirmation",
                extra={"session_id": str(session_id)},
            )
            raise
        logger.info(
            "Booking confirmation recorded",
            extra={"session_id": str(session_id), "confirmed_at": confirmed_at},
        )


def create_booking_confirmation(mode: str | None = None) -> BookingConfirmation:
    """CONFIRMATION_MODE（log / dynamodb）に応じた実装を返す"""
    mode = mode or os.getenv("CONFIRMATION_MODE", "log")
    if mode == "dynamodb":
        return DynamoDBBookingConfirmation()
    if mode == "log":
        return LoggingBookingConfirmation()
    raise ValueError(f"Unknown CONFIRMATION_MODE: {mode}")
