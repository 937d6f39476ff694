"""例外定義."""

# 入力不足エラーの固定メッセージ。UI 側はこの文字列で判定する
NAME_TOKENS_REQUIRED_MESSAGE = "at least two name tokens required"


class ResultLookupError(Exception):
    pass


class ValidationError(ResultLookupError):
    """検索語の氏名トークンが 2 つ未満."""

    def __init__(self, message: str = NAME_TOKENS_REQUIRED_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class StoreError(ResultLookupError):
    """結果ストアへの問い合わせ失敗（通信・クエリエラー）."""
