"""ブロック（引用）変換と改行の正規化"""

from discord_markup.markup.theme import Theme, theme_class

# escape_html後の "> "
QUOTE_PREFIX = "&gt; "
LINE_BREAK = "<br>"


def _quote_block(lines: list[str], theme: Theme) -> str:
    return f'<div class="{theme_class("discord-quote", theme)}">{LINE_BREAK.join(lines)}</div>'


def transform_blocks(text: str, theme: Theme = Theme.DARK) -> str:
    """連続する引用行を1つの引用ブロックにまとめる。

    引用の外/内の2状態で行を走査する。引用行は本文をバッファに溜め、
    引用でない行が来た時点でバッファを引用ブロックとして出力する。
    空行（空白のみの行を含む）は出力しない。
    コードブロックはスパン変換で1行になっているため、引用行で開いたブロックは全体が引用に入る。

    Args:
        text: スパン変換済みのテキスト
        theme: 引用ブロックのCSSクラスを決めるテーマ

    Returns:
        行を改行で連結したテキスト
    """
    result: list[str] = []
    quote_lines: list[str] = []
    in_quote = False

    for line in text.split("\n"):
        if line.startswith(QUOTE_PREFIX):
            in_quote = True
            quote_lines.append(line[len(QUOTE_PREFIX):])
            continue

        if in_quote:
            result.append(_quote_block(quote_lines, theme))
            in_quote = False
            quote_lines = []
        if line.strip():
            result.append(line)

    # 末尾が引用のまま終わった場合
    if in_quote:
        result.append(_quote_block(quote_lines, theme))

    return "\n".join(result)


def normalize_line_breaks(text: str) -> str:
    """残っている改行をすべて<br>に置換する（transform_blocksの後に適用する）"""
    return text.replace("\n", LINE_BREAK)
