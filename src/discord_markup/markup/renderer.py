"""Discord風マークアップ→HTMLレンダラー

エスケープ → スパン変換 → 引用ブロック変換 → 改行の正規化 の順で適用する。
レンダラーは状態を持たないため、1つのインスタンスを共有して呼び出し側に渡してよい。

出力に再度renderを適用すると二重にエスケープされるため、
生のテキストに対してちょうど1回だけ適用すること。
"""

from __future__ import annotations

from datetime import datetime, timezone

from discord_markup.markup.blocks import normalize_line_breaks, transform_blocks
from discord_markup.markup.escaper import escape_html
from discord_markup.markup.spans import DEFAULT_SPAN_TIERS, SpanTransformer
from discord_markup.markup.theme import Theme
from discord_markup.markup.tokens import Clock, build_token_rules


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MarkupRenderer:
    """Discord風マークアップのレンダラー"""

    def __init__(self, *, extended: bool = False, clock: Clock | None = None) -> None:
        """初期化

        Args:
            extended: メンション・カスタム絵文字・タイムスタンプも変換するか
            clock: 相対タイムスタンプの基準時刻を返す関数（タイムゾーン付き）
        """
        self._extended = extended
        tiers = DEFAULT_SPAN_TIERS
        if extended:
            tiers = (build_token_rules(clock or _utc_now), *tiers)
        self._spans = SpanTransformer(tiers)

    @property
    def extended(self) -> bool:
        return self._extended

    def render(self, text: str | None, theme: Theme | str = Theme.DARK) -> str:
        """テキストをプレビュー用のHTMLに変換する

        Args:
            text: ユーザーが入力したテキスト（Noneや空文字は空文字を返す）
            theme: light / dark

        Returns:
            HTML文字列

        Raises:
            InvalidThemeError: themeが light / dark 以外の場合
        """
        resolved = Theme.parse(theme)
        if not text:
            return ""

        rendered = escape_html(text)
        rendered = self._spans.transform(rendered)
        rendered = transform_blocks(rendered, resolved)
        return normalize_line_breaks(rendered)


_BASIC_RENDERER = MarkupRenderer()
_EXTENDED_RENDERER = MarkupRenderer(extended=True)


def render_markup(text: str | None, theme: Theme | str = Theme.DARK, *, extended: bool = False) -> str:
    """MarkupRenderer.renderの関数版"""
    renderer = _EXTENDED_RENDERER if extended else _BASIC_RENDERER
    return renderer.render(text, theme)
