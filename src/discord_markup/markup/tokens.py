"""拡張モード用のトークン（メンション・カスタム絵文字・タイムスタンプ）

エスケープ済みテキスト（&lt;...&gt;）に対して動くスパン規則として定義する。
メンションは実際のユーザー等を解決せず、汎用のラベルで表示する。
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from discord_markup.markup.spans import InnerRenderer, SpanRule
from discord_markup.markup.timestamps import DEFAULT_STYLE, format_timestamp, to_datetime

logger = logging.getLogger(__name__)

EMOJI_CDN_URL = "https://cdn.discordapp.com/emojis"

Clock = Callable[[], datetime]


def _constant(html: str) -> Callable[[re.Match[str], InnerRenderer], str]:
    def render(match: re.Match[str], inner: InnerRenderer) -> str:
        return html

    return render


def _render_emoji(match: re.Match[str], inner: InnerRenderer) -> str:
    animated, name, emoji_id = match.group(1), match.group(2), match.group(3)
    extension = "gif" if animated else "png"
    return f'<img src="{EMOJI_CDN_URL}/{emoji_id}.{extension}" alt=":{name}:" class="discord-emoji">'


def _accept_timestamp(match: re.Match[str]) -> bool:
    try:
        to_datetime(int(match.group(1)))
    except ValueError:
        logger.debug("Timestamp left as text, out of range: %s", match.group(1))
        return False
    return True


USER_MENTION_RULE = SpanRule(
    name="user_mention",
    pattern=re.compile(r"&lt;@!?(\d+)&gt;"),
    render=_constant('<span class="discord-mention">@User</span>'),
)

ROLE_MENTION_RULE = SpanRule(
    name="role_mention",
    pattern=re.compile(r"&lt;@&amp;(\d+)&gt;"),
    render=_constant('<span class="discord-mention discord-role-mention">@Role</span>'),
)

CHANNEL_MENTION_RULE = SpanRule(
    name="channel_mention",
    pattern=re.compile(r"&lt;#(\d+)&gt;"),
    render=_constant('<span class="discord-mention">#channel</span>'),
)

CUSTOM_EMOJI_RULE = SpanRule(
    name="custom_emoji",
    pattern=re.compile(r"&lt;(a?):(\w+):(\d+)&gt;"),
    render=_render_emoji,
)

TIMESTAMP_PATTERN = re.compile(r"&lt;t:(-?\d+)(?::([tTdDfFR]))?&gt;")


def build_timestamp_rule(clock: Clock) -> SpanRule:
    """タイムスタンプ規則を作る。相対表記(R)の基準時刻はclockから得る"""

    def render(match: re.Match[str], inner: InnerRenderer) -> str:
        epoch = int(match.group(1))
        style = match.group(2) or DEFAULT_STYLE
        now = clock()
        text = format_timestamp(epoch, style, now=now)
        title = format_timestamp(epoch, "F", now=now)
        return f'<span class="discord-timestamp" title="{title}">{text}</span>'

    return SpanRule(name="timestamp", pattern=TIMESTAMP_PATTERN, render=render, accept=_accept_timestamp)


def build_token_rules(clock: Clock) -> tuple[SpanRule, ...]:
    """拡張モードで最初の段として使うスパン規則の列を返す"""
    return (
        ROLE_MENTION_RULE,
        USER_MENTION_RULE,
        CHANNEL_MENTION_RULE,
        CUSTOM_EMOJI_RULE,
        build_timestamp_rule(clock),
    )
