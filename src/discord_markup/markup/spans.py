"""インライン（スパン）変換モジュール

エスケープ済みテキストからコード領域を切り出し、残りにスパン規則を優先度の段ごとに適用する。
段の順は スポイラー → リンク → 強調（打ち消し・太字・下線・斜体）で、拡張モードでは
メンションなどのトークンが最初の段になる。

各段でマッチした範囲はプレースホルダーに置き換えて確保し、後の段からは1文字として扱う。
そのため先に確保したスポイラーやリンクのURLに強調のデリミタが含まれていても壊れない。
同じ段の中では最も手前のマッチを採用し、同じ位置なら並び順（二重デリミタが先）で決める。
スパン内部は全段を再帰的に適用し、最後にプレースホルダーを確保したHTMLに展開する。
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# コード領域（フェンス付きコードブロック または インラインコード）
CODE_PATTERN = re.compile(r"(```[\s\S]*?```|`[^`\n]+`)")
# フェンス先頭行の言語指定（```py など）
CODE_LANGUAGE_PATTERN = re.compile(r"([\w+#.-]+)\n")

LINK_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# 確保済みスパンのプレースホルダー（私用領域の文字で番号を囲む）
PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"
PLACEHOLDER_PATTERN = re.compile(f"{PLACEHOLDER_OPEN}(\\d+){PLACEHOLDER_CLOSE}")

# これより深い入れ子の内側は変換せず文字列のまま残す
MAX_SPAN_DEPTH = 32

InnerRenderer = Callable[[str], str]


@dataclass(frozen=True)
class SpanRule:
    """インラインのマークアップ規則

    Attributes:
        name: ルール名（ログ用）
        pattern: エスケープ済みテキストに対するパターン
        render: マッチと内側を再帰変換する関数を受け取り、HTMLを返す
        accept: マッチを採用するかを判定する関数（Falseなら文字列のまま残す）
    """

    name: str
    pattern: re.Pattern[str]
    render: Callable[[re.Match[str], InnerRenderer], str]
    accept: Callable[[re.Match[str]], bool] | None = None

    def find(self, text: str, pos: int) -> re.Match[str] | None:
        """pos以降で採用可能な最初のマッチを返す"""
        start = pos
        while True:
            match = self.pattern.search(text, start)
            if match is None:
                return None
            if self.accept is None or self.accept(match):
                return match
            start = match.start() + 1


SpanTier = Sequence[SpanRule]


def is_valid_link_url(url: str) -> bool:
    """リンク先として有効な絶対URL（http/https かつホストあり）かを判定する"""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme.lower() in LINK_SCHEMES and bool(parsed.netloc)


def _wrap(open_tag: str, close_tag: str) -> Callable[[re.Match[str], InnerRenderer], str]:
    def render(match: re.Match[str], inner: InnerRenderer) -> str:
        return f"{open_tag}{inner(match.group(1))}{close_tag}"

    return render


def _render_link(match: re.Match[str], inner: InnerRenderer) -> str:
    label, url = match.group(1), match.group(2)
    return f'<a href="{url}" class="discord-link" target="_blank" rel="noopener noreferrer">{inner(label)}</a>'


def _accept_link(match: re.Match[str]) -> bool:
    url = match.group(2)
    # 先の段で確保したスパンを含むURLはリンクにしない
    if PLACEHOLDER_OPEN not in url and is_valid_link_url(url):
        return True
    logger.debug("Link left as text, invalid URL: %r", url)
    return False


SPOILER_RULE = SpanRule(
    name="spoiler",
    pattern=re.compile(r"\|\|(.+?)\|\|"),
    render=_wrap(
        '<span class="discord-spoiler" onclick="this.classList.toggle(\'revealed\')" title="Click to reveal spoiler">',
        "</span>",
    ),
)

LINK_RULE = SpanRule(
    name="link",
    pattern=re.compile(r"\[([^\]\n]+?)\]\(([^)\s]+)\)"),
    render=_render_link,
    accept=_accept_link,
)

STRIKETHROUGH_RULE = SpanRule(
    name="strikethrough",
    pattern=re.compile(r"~~(.+?)~~(?!~)"),
    render=_wrap('<span class="discord-strikethrough">', "</span>"),
)

BOLD_RULE = SpanRule(
    name="bold",
    pattern=re.compile(r"\*\*(.+?)\*\*(?!\*)"),
    render=_wrap('<strong class="discord-bold">', "</strong>"),
)

UNDERLINE_RULE = SpanRule(
    name="underline",
    pattern=re.compile(r"__(.+?)__(?!_)"),
    render=_wrap('<u class="discord-underline">', "</u>"),
)

ITALIC_STAR_RULE = SpanRule(
    name="italic",
    pattern=re.compile(r"(?<!\*)\*(?!\*)([^*\n]+?)\*(?!\*)"),
    render=_wrap('<em class="discord-italic">', "</em>"),
)

# snake_case の単語中の _ は斜体にしない
ITALIC_UNDERSCORE_RULE = SpanRule(
    name="italic",
    pattern=re.compile(r"(?<![\w_])_(?!_)([^_\n]+?)_(?![\w_])"),
    render=_wrap('<em class="discord-italic">', "</em>"),
)

# 段の並びが優先順位（同じ段の中では並び順が同じ位置での優先順位）
DEFAULT_SPAN_TIERS: tuple[SpanTier, ...] = (
    (SPOILER_RULE,),
    (LINK_RULE,),
    (
        STRIKETHROUGH_RULE,
        BOLD_RULE,
        UNDERLINE_RULE,
        ITALIC_STAR_RULE,
        ITALIC_UNDERSCORE_RULE,
    ),
)


def render_code(part: str) -> str:
    """CODE_PATTERNにマッチしたコード領域をHTMLにする。

    中身はエスケープ済みなのでそれ以上変換しない。コードブロック内の改行は<br>として出力し、
    後段の行単位の処理（引用判定・空行削除）がブロック内部に及ばないようにする。
    """
    if part.startswith("```"):
        content = part[3:-3]
        language = ""
        lang_match = CODE_LANGUAGE_PATTERN.match(content)
        if lang_match:
            language = lang_match.group(1)
            content = content[lang_match.end():]
        content = content.strip("\n").replace("\n", "<br>")
        code_open = f'<code class="language-{language}">' if language else "<code>"
        return f'<div class="discord-code-block">{code_open}{content}</code></div>'
    return f'<span class="discord-code-inline">{part[1:-1]}</span>'


class _SpanPass:
    """1つのテキスト片を変換する間だけ、確保したスパンのHTMLを保持する"""

    def __init__(self, tiers: tuple[SpanTier, ...]) -> None:
        self._tiers = tiers
        self._claimed: list[str] = []

    def render(self, text: str) -> str:
        return self._expand(self._claim(text, 0))

    def _claim(self, text: str, depth: int) -> str:
        if depth > MAX_SPAN_DEPTH:
            return text
        for tier in self._tiers:
            text = self._claim_tier(text, tier, depth)
        return text

    def _claim_tier(self, text: str, tier: SpanTier, depth: int) -> str:
        def inner(content: str) -> str:
            return self._claim(content, depth + 1)

        result: list[str] = []
        pos = 0
        # 各ルールの次のマッチ。posより手前から始まるものだけ探し直す
        pending = [rule.find(text, 0) for rule in tier]

        while True:
            best: tuple[SpanRule, re.Match[str]] | None = None
            for i, rule in enumerate(tier):
                match = pending[i]
                if match is not None and match.start() < pos:
                    match = pending[i] = rule.find(text, pos)
                if match is not None and (best is None or match.start() < best[1].start()):
                    best = (rule, match)
            if best is None:
                break
            rule, match = best
            result.append(text[pos:match.start()])
            result.append(self._placeholder(rule.render(match, inner)))
            pos = match.end()

        result.append(text[pos:])
        return "".join(result)

    def _placeholder(self, html: str) -> str:
        self._claimed.append(html)
        return f"{PLACEHOLDER_OPEN}{len(self._claimed) - 1}{PLACEHOLDER_CLOSE}"

    def _expand(self, text: str) -> str:
        return PLACEHOLDER_PATTERN.sub(lambda m: self._expand(self._claimed[int(m.group(1))]), text)


class SpanTransformer:
    """スパン規則の段を適用するトランスフォーマー（状態を持たない）"""

    def __init__(self, tiers: Sequence[SpanTier] = DEFAULT_SPAN_TIERS) -> None:
        self._tiers = tuple(tuple(tier) for tier in tiers)

    def transform(self, text: str) -> str:
        """エスケープ済みテキストのスパンをHTMLに変換する

        Args:
            text: escape_html済みのテキスト

        Returns:
            変換後のテキスト（改行はコードブロック内を除きそのまま残る）
        """
        # 入力中のプレースホルダー文字は文字参照にして、確保済みスパンと区別する
        text = text.replace(PLACEHOLDER_OPEN, "&#xe000;").replace(PLACEHOLDER_CLOSE, "&#xe001;")
        parts = CODE_PATTERN.split(text)
        result: list[str] = []

        for i, part in enumerate(parts):
            if i % 2 == 1:
                result.append(render_code(part))
            else:
                result.append(_SpanPass(self._tiers).render(part))

        return "".join(result)
