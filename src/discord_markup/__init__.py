"""Discord webhookメッセージのプレビュー用マークアップレンダラー"""

from discord_markup.markup import InvalidThemeError, MarkupError, MarkupRenderer, Theme, render_markup
from discord_markup.preview import EmbedDraft, EmbedField, MessageDraft, WebhookProfile, build_message_html

__all__ = [
    "EmbedDraft",
    "EmbedField",
    "InvalidThemeError",
    "MarkupError",
    "MarkupRenderer",
    "MessageDraft",
    "Theme",
    "WebhookProfile",
    "build_message_html",
    "render_markup",
]
