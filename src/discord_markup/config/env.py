"""環境変数設定"""

import os

from pydantic import BaseModel, Field, ValidationError

from discord_markup.markup.theme import Theme


class EnvConfig(BaseModel):
    """環境変数設定（未設定の項目はNone）"""

    theme: Theme | None = Field(default=None, description="DISCORD_MARKUP_THEME")
    extended: bool | None = Field(default=None, description="DISCORD_MARKUP_EXTENDED")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: 環境変数の値が不正な場合
    """
    values: dict[str, str] = {}
    if theme := os.environ.get("DISCORD_MARKUP_THEME"):
        values["theme"] = theme.strip().lower()
    if extended := os.environ.get("DISCORD_MARKUP_EXTENDED"):
        values["extended"] = extended.strip()

    try:
        return EnvConfig(**values)
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
