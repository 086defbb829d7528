from threading import Lock

from ticketing.booking.domain.entity import BookingDraft
from ticketing.booking.domain.repository import DraftRepository
from ticketing.shared.domain import SessionId


class InMemoryDraftRepository(DraftRepository):
    """プロセス内の辞書に保存する DraftRepository

    ローカル実行とテスト用。ドラフトは不変なのでそのまま保持してよい。
    """

    def __init__(self) -> None:
        self._drafts: dict[SessionId, BookingDraft] = {}
        self._lock = Lock()

    def load(self, session_id: SessionId) -> BookingDraft | None:
        with self._lock:
            return self._drafts.get(session_id)

    def store(self, session_id: SessionId, draft: BookingDraft) -> None:
        with self._lock:
            self._drafts[session_id] = draft
