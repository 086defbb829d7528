from abc import ABC, abstractmethod

from ticketing.booking.domain.entity import BookingDraft
from ticketing.shared.domain import SessionId


class BookingConfirmation(ABC):
    """予約確定時の副作用（確認レコードの出力・通知など）"""

    @abstractmethod
    def confirm(self, session_id: SessionId, draft: BookingDraft) -> None:
        """予約確定を通知する。失敗時は例外を送出する"""
        raise NotImplementedError
