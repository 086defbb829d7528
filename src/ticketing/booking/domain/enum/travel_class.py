from enum import Enum


class TravelClass(str, Enum):
    """座席クラス

    ワイヤ表現は小文字のみ。その他のトークンは ValueError。
    """

    FIRST = "first"
    SECOND = "second"

    def __str__(self) -> str:
        return self.value
