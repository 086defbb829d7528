from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class PaymentInfo:
    """支払いトークン（不透明な値）

    どんな文字列も受け付けるが、表示・デバッグ出力では常に伏せ字になる。
    生の値は get_secret_value() からのみ取り出せる。
    """

    _token: str = field(repr=False)

    REDACTED: ClassVar[str] = "<SECRET>"

    def __post_init__(self) -> None:
        if not isinstance(self._token, str):
            raise ValueError("Payment info must be a string")

    def __str__(self) -> str:
        return self.REDACTED

    def __repr__(self) -> str:
        return f"PaymentInfo({self.REDACTED!r})"

    def get_secret_value(self) -> str:
        return self._token
