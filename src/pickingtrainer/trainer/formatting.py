"""表示用フォーマット関数"""

import html
from datetime import datetime, timezone


def format_duration(ms: float) -> str:
    """ミリ秒を「M分S秒」/「S秒」に整形する"""
    seconds = int(ms // 1000)
    minutes = seconds // 60
    remaining_seconds = seconds % 60

    if minutes > 0:
        return f"{minutes}分{remaining_seconds}秒"
    return f"{seconds}秒"


def format_date(iso_string: str) -> str:
    """ISO-8601 の日時をローカル時刻の「Y/M/D H:MM」に整形する。

    日付のみの文字列はブラウザと同じく UTC の0時として扱う。
    """
    dt = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
    if dt.tzinfo is None and "T" not in iso_string and " " not in iso_string:
        dt = dt.replace(tzinfo=timezone.utc)
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return f"{dt.year}/{dt.month}/{dt.day} {dt.hour}:{dt.minute:02d}"


def escape_html(text: str) -> str:
    """HTML特殊文字 (& < > " ') をエスケープする"""
    return html.escape(text, quote=True)
