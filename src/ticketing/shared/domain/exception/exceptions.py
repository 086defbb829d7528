class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class FieldValidationException(DomainException):
    """入力値が値オブジェクトの検証に失敗した場合"""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class SlotOrderException(DomainException):
    """前提となるスロットが未設定のまま後続スロットを設定しようとした場合"""

    def __init__(self, field: str, prerequisite: str) -> None:
        super().__init__(f"Cannot set {field}: set {prerequisite} first")
        self.field = field
        self.prerequisite = prerequisite


class BookingConfirmationException(DomainException):
    """支払い情報の保存後、予約確定の副作用が失敗した場合（再実行可能）"""

    pass


class SessionStoreException(DomainException):
    """セッションストアに到達できない、またはデータが壊れている場合"""

    pass
