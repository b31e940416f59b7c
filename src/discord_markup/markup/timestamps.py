"""Discordのタイムスタンプ表記のフォーマット"""

from __future__ import annotations

from datetime import datetime, timezone

TIMESTAMP_STYLES = "tTdDfFR"
DEFAULT_STYLE = "f"

# 相対表記の単位（秒数, 単数形）
_RELATIVE_UNITS: tuple[tuple[int, str], ...] = (
    (365 * 24 * 3600, "year"),
    (30 * 24 * 3600, "month"),
    (24 * 3600, "day"),
    (3600, "hour"),
    (60, "minute"),
    (1, "second"),
)


def to_datetime(epoch: int) -> datetime:
    """UnixエポックをUTCのdatetimeに変換する

    Raises:
        ValueError: 表現できない範囲のエポックの場合
    """
    try:
        return datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        msg = f"Timestamp out of range: {epoch}"
        raise ValueError(msg) from e


def _time(dt: datetime, *, seconds: bool = False) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    if seconds:
        return f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"
    return f"{hour}:{dt.minute:02d} {suffix}"


def _short_date(dt: datetime) -> str:
    return f"{dt.month:02d}/{dt.day:02d}/{dt.year}"


def _long_date(dt: datetime) -> str:
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def format_relative(dt: datetime, now: datetime) -> str:
    """nowを基準にした相対表記（in 3 hours / 3 hours ago）を返す"""
    delta = int((dt - now).total_seconds())
    if delta == 0:
        return "just now"

    amount = abs(delta)
    for unit_seconds, unit in _RELATIVE_UNITS:
        if amount >= unit_seconds:
            count = amount // unit_seconds
            label = f"{count} {unit}" if count == 1 else f"{count} {unit}s"
            return f"in {label}" if delta > 0 else f"{label} ago"

    return "just now"


def format_timestamp(epoch: int, style: str = DEFAULT_STYLE, *, now: datetime | None = None) -> str:
    """UnixエポックをDiscordクライアントと同じ表記（en-US, UTC）にフォーマットする

    Args:
        epoch: Unixエポック秒
        style: t, T, d, D, f, F, R のいずれか
        now: 相対表記(R)の基準時刻（省略時は現在時刻）

    Returns:
        フォーマット済みの文字列

    Raises:
        ValueError: 未知のスタイル、または範囲外のエポックの場合
    """
    if len(style) != 1 or style not in TIMESTAMP_STYLES:
        msg = f"Unknown timestamp style: {style!r}"
        raise ValueError(msg)

    dt = to_datetime(epoch)

    if style == "t":
        return _time(dt)
    if style == "T":
        return _time(dt, seconds=True)
    if style == "d":
        return _short_date(dt)
    if style == "D":
        return _long_date(dt)
    if style == "f":
        return f"{_long_date(dt)} {_time(dt)}"
    if style == "F":
        return f"{dt.strftime('%A')}, {_long_date(dt)} {_time(dt)}"

    if now is None:
        now = datetime.now(timezone.utc)
    return format_relative(dt, now)


def format_message_time(posted_at: datetime, now: datetime) -> str:
    """メッセージヘッダー用の時刻表記（Today at 4:20 PM / 10/18/2026 4:20 PM）"""
    if posted_at.date() == now.date():
        return f"Today at {_time(posted_at)}"
    return f"{_short_date(posted_at)} {_time(posted_at)}"
