import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PhoneNumber:
    """電話番号

    3桁-3桁の形式。例: 123-456
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9]{3}-[0-9]{3}$")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.PATTERN.fullmatch(
            self.value
        ):
            raise ValueError(
                f"Invalid phone number format: {self.value!r}. "
                "Expected format: 123-456"
            )

    def __str__(self) -> str:
        return self.value
