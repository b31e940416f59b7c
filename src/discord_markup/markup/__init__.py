"""Discord風マークアップのレンダリング"""

from discord_markup.markup.blocks import normalize_line_breaks, transform_blocks
from discord_markup.markup.escaper import escape_html
from discord_markup.markup.exceptions import InvalidThemeError, MarkupError
from discord_markup.markup.renderer import MarkupRenderer, render_markup
from discord_markup.markup.spans import DEFAULT_SPAN_TIERS, SpanRule, SpanTransformer, is_valid_link_url
from discord_markup.markup.theme import Theme
from discord_markup.markup.timestamps import format_message_time, format_timestamp

__all__ = [
    "DEFAULT_SPAN_TIERS",
    "InvalidThemeError",
    "MarkupError",
    "MarkupRenderer",
    "SpanRule",
    "SpanTransformer",
    "Theme",
    "escape_html",
    "format_message_time",
    "format_timestamp",
    "is_valid_link_url",
    "normalize_line_breaks",
    "render_markup",
    "transform_blocks",
]
