"""HTMLエスケープ処理"""


def escape_html(text: str) -> str:
    """テキスト内の &, <, >, " をエスケープする。

    レンダリングの最初に一度だけ適用する。&は他の置換結果を壊さないよう最初に置換する。
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
