from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class SessionId:
    """セッションID

    ドラフト予約を保存するキー。発行方法はトランスポート層の責務。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("SessionId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> SessionId:
        """新しいセッションIDを発行する"""
        return cls(value=str(uuid4()))
