import os
import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Name:
    """乗客名

    NAME_PATTERN 環境変数で形式を差し替えられる（既定は英小文字1文字）。
    環境変数は検証のたびに読み込む。
    """

    value: str

    DEFAULT_PATTERN: ClassVar[str] = r"^[a-z]$"

    def __post_init__(self) -> None:
        pattern = self.pattern()
        if not isinstance(self.value, str) or not pattern.fullmatch(self.value):
            raise ValueError(
                f"Invalid name: {self.value!r}. Expected to match {pattern.pattern}"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def pattern(cls) -> re.Pattern[str]:
        return re.compile(os.getenv("NAME_PATTERN", cls.DEFAULT_PATTERN))
