from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Location:
    """駅名

    許可リストに含まれる駅のみ。大文字小文字・空白の正規化は行わない。
    例: "Amsterdam Centraal"
    """

    value: str

    VALID_LOCATIONS: ClassVar[frozenset[str]] = frozenset(
        {
            "Amsterdam Centraal",
            "Paris Nord",
            "Berlin Hbf",
            "London Waterloo",
        }
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid_location(
            self.value
        ):
            raise ValueError(f"Unknown station: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def is_valid_location(cls, location: str) -> bool:
        return location in cls.VALID_LOCATIONS
