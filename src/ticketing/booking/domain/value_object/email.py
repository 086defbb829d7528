from dataclasses import dataclass
from typing import ClassVar

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class Email:
    """メールアドレス

    形式チェックのみ行い、到達可能性は確認しない。
    入力された文字列は正規化せずそのまま保持する。
    """

    value: str

    _ADAPTER: ClassVar[TypeAdapter[str]] = TypeAdapter(EmailStr)

    def __post_init__(self) -> None:
        try:
            self._ADAPTER.validate_python(self.value)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid email address: {self.value!r}") from e

    def __str__(self) -> str:
        return self.value
