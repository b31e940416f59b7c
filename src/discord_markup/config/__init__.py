"""設定管理モジュール"""

from discord_markup.config.app import AppConfig, load_app_config
from discord_markup.config.config import Config, load_config
from discord_markup.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
