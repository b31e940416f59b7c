"""表示テーマ"""

from enum import Enum

from discord_markup.markup.exceptions import InvalidThemeError


class Theme(str, Enum):
    """プレビューの表示テーマ（出力のCSSクラスのみに影響し、パースには影響しない）"""

    LIGHT = "light"
    DARK = "dark"

    @property
    def is_light(self) -> bool:
        return self is Theme.LIGHT

    @classmethod
    def parse(cls, value: "Theme | str") -> "Theme":
        """Themeまたは文字列（大文字小文字は区別しない）からThemeを得る

        Raises:
            InvalidThemeError: light/dark 以外が指定された場合
        """
        if isinstance(value, Theme):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidThemeError(value)


def theme_class(base: str, theme: Theme) -> str:
    """テーマに応じたCSSクラス文字列を返す（light時のみ " light" を付与）"""
    return f"{base} light" if theme.is_light else base
