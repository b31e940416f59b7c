"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from discord_markup.config.app import AppConfig, load_app_config
from discord_markup.config.env import load_env_config
from discord_markup.markup.theme import Theme


class Config(BaseModel):
    """統合設定クラス（アプリケーション設定 + 環境変数による上書き）"""

    theme: Theme = Field(default=Theme.DARK, description="プレビューのテーマ（light / dark）")
    extended: bool = Field(default=False, description="メンション・絵文字・タイムスタンプを変換するか")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path) -> Config:
    """YAMLファイルと環境変数から統合設定を読み込む

    YAMLファイルが存在しない場合はデフォルト値を使う。環境変数はYAMLより優先する。

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: YAMLファイルまたは環境変数の値が不正な場合
    """
    # .envファイルを読み込み
    load_dotenv()

    app_config = load_app_config(config_path) if config_path.exists() else AppConfig()
    env_config = load_env_config()

    return Config(
        theme=env_config.theme if env_config.theme is not None else app_config.theme,
        extended=env_config.extended if env_config.extended is not None else app_config.extended,
    )
