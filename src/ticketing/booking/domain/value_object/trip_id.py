from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class TripId:
    """列車便ID

    カタログが発行し、利用者はそれをそのまま送り返す。
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError(f"Invalid trip id: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> TripId:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, s: str) -> TripId:
        if not isinstance(s, str):
            raise ValueError("Invalid trip id: expected a string")
        try:
            return cls(value=UUID(s))
        except ValueError as e:
            raise ValueError(f"Invalid trip id: {s!r}") from e
