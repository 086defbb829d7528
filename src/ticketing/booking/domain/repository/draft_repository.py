from abc import ABC, abstractmethod

from ticketing.booking.domain.entity import BookingDraft
from ticketing.shared.domain import SessionId


class DraftRepository(ABC):
    """ドラフト予約を保存するセッションストアのインターフェース

    - 1操作につき load と store を1回ずつ呼ぶ（読み取り→変更→書き込み）
    - 同一セッションへの同時書き込みは後勝ちでよい
    - 到達不能・データ破損は SessionStoreException で通知する
    """

    @abstractmethod
    def load(self, session_id: SessionId) -> BookingDraft | None:
        """セッションのドラフトを取得する（存在しなければ None）"""
        raise NotImplementedError

    @abstractmethod
    def store(self, session_id: SessionId, draft: BookingDraft) -> None:
        """ドラフト全体を置き換えて保存する"""
        raise NotImplementedError
