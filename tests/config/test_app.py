from pathlib import Path

import pytest
import yaml

from discord_markup.config.app import AppConfig, load_app_config
from discord_markup.markup.theme import Theme


class TestAppConfig:
    """AppConfig Pydanticモデルのテスト"""

    def test_valid_app_config(self) -> None:
        """正常な設定でAppConfigが作成できること"""
        config = AppConfig(theme=Theme.LIGHT, extended=True)
        assert config.theme is Theme.LIGHT
        assert config.extended is True

    def test_default_values(self) -> None:
        """デフォルト値が正しく設定されること"""
        config = AppConfig()
        assert config.theme is Theme.DARK
        assert config.extended is False

    def test_theme_from_string(self) -> None:
        """テーマを文字列で指定できること"""
        config = AppConfig(theme="light")  # type: ignore[arg-type]
        assert config.theme is Theme.LIGHT

    def test_reject_unknown_theme(self) -> None:
        """未知のテーマでエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(theme="blue")  # type: ignore[arg-type]

    def test_reject_unknown_fields(self) -> None:
        """未知のフィールドでエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(unknown_field="value")  # type: ignore[call-arg]


class TestLoadAppConfig:
    """load_app_config関数のテスト"""

    def test_load_from_yaml_file(self, tmp_path: Path) -> None:
        """YAMLファイルから正しく読み込めること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"theme": "light", "extended": True}))

        config = load_app_config(config_file)
        assert config.theme is Theme.LIGHT
        assert config.extended is True

    def test_load_with_default_values(self, tmp_path: Path) -> None:
        """一部の値のみ指定した場合、デフォルト値が使われること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"extended": True}))

        config = load_app_config(config_file)
        assert config.theme is Theme.DARK  # デフォルト値
        assert config.extended is True

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """空のYAMLファイルの場合はデフォルト値になること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        config = load_app_config(config_file)
        assert config == AppConfig()

    def test_load_fails_when_file_not_exists(self) -> None:
        """ファイルが存在しない場合にエラーになること"""
        with pytest.raises(FileNotFoundError):
            load_app_config(Path("/nonexistent/config.yaml"))

    def test_load_fails_when_invalid_yaml(self, tmp_path: Path) -> None:
        """不正なYAMLの場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content:")

        with pytest.raises(ValueError, match="Invalid YAML file"):
            load_app_config(config_file)

    def test_load_fails_when_not_mapping(self, tmp_path: Path) -> None:
        """YAMLがマッピングでない場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- light\n- dark\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_app_config(config_file)

    def test_reject_unknown_fields_in_yaml(self, tmp_path: Path) -> None:
        """YAMLに未知のフィールドがある場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"theme": "dark", "unknown_field": "value"}))

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_app_config(config_file)

    def test_reject_unknown_theme_in_yaml(self, tmp_path: Path) -> None:
        """YAMLのテーマが不正な場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("theme: blue\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_app_config(config_file)
