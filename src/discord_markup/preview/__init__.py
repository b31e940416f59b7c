"""メッセージプレビューモジュール"""

from discord_markup.preview.builder import build_embed_html, build_message_html, is_image_url, is_valid_url
from discord_markup.preview.models import EmbedDraft, EmbedField, MessageDraft, WebhookProfile

__all__ = [
    "EmbedDraft",
    "EmbedField",
    "MessageDraft",
    "WebhookProfile",
    "build_embed_html",
    "build_message_html",
    "is_image_url",
    "is_valid_url",
]
