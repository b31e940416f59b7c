"""マークアップレンダラーに関する例外"""


class MarkupError(Exception):
    """マークアップ関連のエラーの基底クラス"""


class InvalidThemeError(MarkupError, ValueError):
    """未知のテーマ名が指定された場合のエラー"""

    def __init__(self, value: object) -> None:
        """初期化

        Args:
            value: 指定されたテーマ値
        """
        super().__init__(f"Unknown theme: {value!r} (expected 'light' or 'dark')")
        self.value = value
