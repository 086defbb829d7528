from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FutureTimestamp:
    """未来の日時（タイムゾーン付き）

    生成時点の現在時刻（checked_at）より厳密に後であること。
    checked_at は比較に含めない。保存済みの値を読み戻すときは元の
    checked_at で再検証するため、後から時刻が過ぎても読み出しは失敗しない。
    境界ちょうど（== now）は拒否する。
    """

    value: datetime
    checked_at: datetime = field(default_factory=_utcnow, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise ValueError(f"Expected a datetime, got {type(self.value).__name__}")
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise ValueError("Timestamp must be timezone-aware")
        if not self.value > self.checked_at:
            raise ValueError("Arrival or departure time is in the past")

    def __str__(self) -> str:
        return self.value.isoformat()

    def __add__(self, other: timedelta) -> FutureTimestamp:
        return FutureTimestamp(value=self.value + other, checked_at=self.checked_at)

    @classmethod
    def from_string(cls, s: str, now: datetime | None = None) -> FutureTimestamp:
        """ISO 8601 形式の文字列から生成"""
        if not isinstance(s, str):
            raise ValueError(f"Expected an ISO 8601 string, got {type(s).__name__}")
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        if now is None:
            return cls(value=dt)
        return cls(value=dt, checked_at=now)
