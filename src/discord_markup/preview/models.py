"""メッセージプレビューの入力モデル

Discord APIの文字数上限をpydanticのバリデーションで表す。
"""

from pydantic import BaseModel, Field

DEFAULT_EMBED_COLOR = "#5865F2"


class WebhookProfile(BaseModel, frozen=True):
    name: str = Field(default="Webhook", min_length=1, max_length=80)
    avatar_url: str | None = None


class EmbedField(BaseModel, frozen=True):
    name: str = Field(max_length=256)
    value: str = Field(max_length=1024)
    inline: bool = False


class EmbedDraft(BaseModel, frozen=True):
    title: str = Field(default="", max_length=256)
    description: str = Field(default="", max_length=4096)
    url: str = ""
    color: str = Field(default=DEFAULT_EMBED_COLOR, pattern=r"^#[0-9a-fA-F]{6}$")
    image_url: str = ""
    thumbnail_url: str = ""
    author_name: str = Field(default="", max_length=256)
    author_icon_url: str = ""
    footer_text: str = Field(default="", max_length=2048)
    footer_icon_url: str = ""
    fields: list[EmbedField] = Field(default_factory=list, max_length=25)

    @property
    def visible_fields(self) -> list[EmbedField]:
        """名前と値の両方が入っているフィールドのみ"""
        return [field for field in self.fields if field.name and field.value]

    @property
    def has_content(self) -> bool:
        """表示する内容があるか（色やURLだけでは表示しない）"""
        return bool(
            self.title
            or self.description
            or self.image_url
            or self.thumbnail_url
            or self.author_name
            or self.footer_text
            or self.visible_fields
        )


class MessageDraft(BaseModel, frozen=True):
    content: str = Field(default="", max_length=2000)
    embed: EmbedDraft | None = None

    @property
    def is_empty(self) -> bool:
        has_embed = self.embed is not None and self.embed.has_content
        return not self.content.strip() and not has_embed
