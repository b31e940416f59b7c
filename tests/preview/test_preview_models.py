import pytest
from pydantic import ValidationError

from discord_markup.preview.models import EmbedDraft, EmbedField, MessageDraft, WebhookProfile


class TestWebhookProfile:
    """WebhookProfileのテスト"""

    def test_default_values(self) -> None:
        """デフォルト値が正しく設定されること"""
        profile = WebhookProfile()
        assert profile.name == "Webhook"
        assert profile.avatar_url is None

    def test_name_too_long(self) -> None:
        """名前が80文字を超えるとエラー"""
        with pytest.raises(ValidationError):
            WebhookProfile(name="x" * 81)


class TestEmbedDraft:
    """EmbedDraftのテスト"""

    def test_empty_embed_has_no_content(self) -> None:
        """色やURLのみでは内容なしとみなすこと"""
        embed = EmbedDraft(url="https://example.com", color="#FF0000")
        assert embed.has_content is False

    def test_title_is_content(self) -> None:
        """タイトルがあれば内容ありとみなすこと"""
        assert EmbedDraft(title="t").has_content is True

    def test_visible_fields(self) -> None:
        """名前と値の両方があるフィールドのみ表示対象"""
        embed = EmbedDraft(
            fields=[
                EmbedField(name="a", value="1"),
                EmbedField(name="", value="2"),
                EmbedField(name="c", value=""),
            ]
        )
        assert embed.visible_fields == [EmbedField(name="a", value="1")]
        assert embed.has_content is True

    def test_only_empty_fields_is_not_content(self) -> None:
        """空のフィールドのみなら内容なし"""
        embed = EmbedDraft(fields=[EmbedField(name="", value="")])
        assert embed.has_content is False

    @pytest.mark.parametrize("color", ["red", "#FFF", "5865F2", "#GGGGGG"])
    def test_invalid_color(self, color: str) -> None:
        """#RRGGBB形式でない色はエラー"""
        with pytest.raises(ValidationError):
            EmbedDraft(color=color)

    def test_description_limit(self) -> None:
        """説明文は4096文字まで"""
        EmbedDraft(description="x" * 4096)
        with pytest.raises(ValidationError):
            EmbedDraft(description="x" * 4097)

    def test_title_limit(self) -> None:
        """タイトルは256文字まで"""
        with pytest.raises(ValidationError):
            EmbedDraft(title="x" * 257)

    def test_field_count_limit(self) -> None:
        """フィールドは25個まで"""
        fields = [EmbedField(name="n", value="v")] * 26
        with pytest.raises(ValidationError):
            EmbedDraft(fields=fields)

    def test_field_value_limit(self) -> None:
        """フィールド値は1024文字まで"""
        with pytest.raises(ValidationError):
            EmbedField(name="n", value="x" * 1025)


class TestMessageDraft:
    """MessageDraftのテスト"""

    def test_empty_draft(self) -> None:
        """本文も埋め込みもなければ空"""
        assert MessageDraft().is_empty is True
        assert MessageDraft(content="   ").is_empty is True
        assert MessageDraft(embed=EmbedDraft()).is_empty is True

    def test_content_or_embed_is_not_empty(self) -> None:
        """本文か埋め込みがあれば空ではない"""
        assert MessageDraft(content="hi").is_empty is False
        assert MessageDraft(embed=EmbedDraft(description="d")).is_empty is False

    def test_content_limit(self) -> None:
        """本文は2000文字まで"""
        MessageDraft(content="x" * 2000)
        with pytest.raises(ValidationError):
            MessageDraft(content="x" * 2001)
