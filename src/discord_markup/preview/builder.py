"""Discord風メッセージプレビューのHTML生成"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from discord_markup.markup.escaper import escape_html
from discord_markup.markup.renderer import MarkupRenderer
from discord_markup.markup.spans import is_valid_link_url
from discord_markup.markup.theme import Theme, theme_class
from discord_markup.markup.timestamps import format_message_time
from discord_markup.preview.models import EmbedDraft, EmbedField, MessageDraft, WebhookProfile

logger = logging.getLogger(__name__)

DEFAULT_AVATAR = "assets/default-avatar.png"
IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg")
IMAGE_HOSTS: tuple[str, ...] = ("cdn.discordapp.com", "media.discordapp.net")

PLACEHOLDER_HTML = '<div class="preview-placeholder"><p>Your message preview will appear here</p></div>'


def is_valid_url(url: str) -> bool:
    """スキームとホストを持つ絶対URLかを判定する（空文字はFalse）"""
    return bool(url) and is_valid_link_url(url)


def is_image_url(url: str) -> bool:
    """画像として表示してよいURLかを判定する（拡張子またはDiscordのCDN）"""
    if not is_valid_url(url):
        return False
    lowered = url.lower()
    return any(ext in lowered for ext in IMAGE_EXTENSIONS) or any(host in lowered for host in IMAGE_HOSTS)


def _build_author(embed: EmbedDraft, theme: Theme) -> str:
    icon = ""
    if is_valid_url(embed.author_icon_url):
        icon = f'<img src="{escape_html(embed.author_icon_url)}" alt="" class="discord-embed-author-icon">'
    return f'<div class="{theme_class("discord-embed-author", theme)}">{icon}{escape_html(embed.author_name)}</div>'


def _build_field(field: EmbedField, renderer: MarkupRenderer, theme: Theme) -> str:
    css = "discord-embed-field discord-embed-field-inline" if field.inline else "discord-embed-field"
    return (
        f'<div class="{css}">'
        f'<div class="{theme_class("discord-embed-field-name", theme)}">{escape_html(field.name)}</div>'
        f'<div class="{theme_class("discord-embed-field-value", theme)}">{renderer.render(field.value, theme)}</div>'
        "</div>"
    )


def _build_footer(embed: EmbedDraft, theme: Theme) -> str:
    icon = ""
    if is_valid_url(embed.footer_icon_url):
        icon = f'<img src="{escape_html(embed.footer_icon_url)}" alt="" class="discord-embed-footer-icon">'
    return f'<div class="{theme_class("discord-embed-footer", theme)}">{icon}{escape_html(embed.footer_text)}</div>'


def build_embed_html(embed: EmbedDraft, renderer: MarkupRenderer, theme: Theme) -> str:
    """埋め込み（embed）部分のHTMLを生成する

    タイトル・フィールド名・フッターはエスケープのみ行い、
    説明文とフィールド値はマークアップとしてレンダリングする。
    """
    parts = [f'<div class="{theme_class("discord-embed", theme)}" style="border-left-color: {embed.color};">']

    if embed.thumbnail_url:
        if is_image_url(embed.thumbnail_url):
            parts.append(
                f'<img src="{escape_html(embed.thumbnail_url)}" alt="Thumbnail" class="discord-embed-thumbnail">'
            )
        else:
            logger.debug("Thumbnail skipped, not an image URL: %r", embed.thumbnail_url)

    if embed.author_name:
        parts.append(_build_author(embed, theme))

    if embed.title:
        title = escape_html(embed.title)
        if is_valid_url(embed.url):
            title = f'<a href="{escape_html(embed.url)}" target="_blank" rel="noopener noreferrer">{title}</a>'
        parts.append(f'<div class="{theme_class("discord-embed-title", theme)}">{title}</div>')

    if embed.description:
        description = renderer.render(embed.description, theme)
        parts.append(f'<div class="{theme_class("discord-embed-description", theme)}">{description}</div>')

    fields = embed.visible_fields
    if fields:
        parts.append('<div class="discord-embed-fields">')
        parts.extend(_build_field(field, renderer, theme) for field in fields)
        parts.append("</div>")

    if embed.image_url:
        if is_image_url(embed.image_url):
            parts.append(f'<img src="{escape_html(embed.image_url)}" alt="Embed Image" class="discord-embed-image">')
        else:
            logger.debug("Image skipped, not an image URL: %r", embed.image_url)

    if embed.footer_text:
        parts.append(_build_footer(embed, theme))

    parts.append("</div>")
    return "".join(parts)


def build_message_html(
    profile: WebhookProfile,
    draft: MessageDraft,
    *,
    renderer: MarkupRenderer,
    theme: Theme | str = Theme.DARK,
    posted_at: datetime | None = None,
    now: datetime | None = None,
) -> str:
    """Webhookの投稿プレビューHTMLを生成する

    Args:
        profile: 投稿者として表示するWebhookの名前とアバター
        draft: メッセージ本文と埋め込み
        renderer: 本文・説明文のレンダリングに使うレンダラー
        theme: light / dark
        posted_at: ヘッダーに表示する投稿時刻（省略時はnow）
        now: 「Today at」判定の基準時刻（省略時は現在時刻）

    Returns:
        HTML文字列（下書きが空の場合はプレースホルダー）
    """
    resolved = Theme.parse(theme)
    if draft.is_empty:
        return PLACEHOLDER_HTML

    if now is None:
        now = datetime.now(timezone.utc)
    if posted_at is None:
        posted_at = now

    name = escape_html(profile.name)
    avatar = escape_html(profile.avatar_url) if profile.avatar_url else DEFAULT_AVATAR

    parts = [
        f'<div class="{theme_class("discord-message", resolved)}">',
        f'<img src="{avatar}" alt="{name}" class="discord-avatar">',
        '<div class="discord-content">',
        '<div class="discord-header">',
        f'<span class="{theme_class("discord-username", resolved)}">{name}</span>',
        f'<span class="{theme_class("discord-timestamp", resolved)}">{format_message_time(posted_at, now)}</span>',
        "</div>",
    ]

    if draft.content.strip():
        content = renderer.render(draft.content, resolved)
        parts.append(f'<div class="{theme_class("discord-message-text", resolved)}">{content}</div>')

    if draft.embed is not None and draft.embed.has_content:
        parts.append(build_embed_html(draft.embed, renderer, resolved))

    parts.append("</div>")
    parts.append("</div>")
    return "".join(parts)
