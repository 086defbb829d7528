from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .future_timestamp import FutureTimestamp


class TimeKind(str, Enum):
    """ユーザーが指定した時刻の種別"""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"


@dataclass(frozen=True)
class DepartureOrArrival:
    """出発時刻または到着時刻のどちらか一方

    ワイヤ形式: {"departure": "<ISO 8601>"} または {"arrival": "<ISO 8601>"}
    """

    kind: TimeKind
    timestamp: FutureTimestamp

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TimeKind):
            raise ValueError(f"Invalid time kind: {self.kind!r}")
        if not isinstance(self.timestamp, FutureTimestamp):
            raise ValueError("timestamp must be a FutureTimestamp")

    def __str__(self) -> str:
        return f"{self.kind.value} {self.timestamp}"

    @property
    def is_departure(self) -> bool:
        return self.kind == TimeKind.DEPARTURE

    @classmethod
    def departure(cls, timestamp: FutureTimestamp) -> DepartureOrArrival:
        return cls(kind=TimeKind.DEPARTURE, timestamp=timestamp)

    @classmethod
    def arrival(cls, timestamp: FutureTimestamp) -> DepartureOrArrival:
        return cls(kind=TimeKind.ARRIVAL, timestamp=timestamp)

    @classmethod
    def from_dict(
        cls, data: dict, now: datetime | None = None
    ) -> DepartureOrArrival:
        """ワイヤ形式の辞書から生成する（キーはちょうど1つ）"""
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(
                "Expected exactly one of 'departure' or 'arrival'"
            )
        ((key, raw),) = data.items()
        try:
            kind = TimeKind(key)
        except ValueError as e:
            raise ValueError(
                f"Unknown time kind: {key!r}. Expected 'departure' or 'arrival'"
            ) from e
        return cls(kind=kind, timestamp=FutureTimestamp.from_string(raw, now=now))

    def to_dict(self) -> dict[str, str]:
        return {self.kind.value: str(self.timestamp)}
