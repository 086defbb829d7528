from pydantic import RootModel


class FieldValueRequest(RootModel[str]):
    """スロット設定リクエスト（本文は JSON 文字列そのもの）

    例: "Amsterdam Centraal", "2030-01-01T10:00:00Z", "first"
    """

    model_config = {
        "json_schema_extra": {
            "examples": ["Amsterdam Centraal", "2030-01-01T10:00:00Z", "first"]
        }
    }
