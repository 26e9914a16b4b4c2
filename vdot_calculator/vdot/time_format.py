"""
VDOT Calculator - Time Parsing/Formatting
時間文字列と秒の相互変換
"""
import re
from typing import List, Optional

import pandas as pd

_NON_DIGITS = re.compile(r"\D+")


def _split_tokens(text: str) -> List[str]:
    """数字以外の文字の連続で分割（末尾の空トークンは捨てる）"""
    tokens = _NON_DIGITS.split(text)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def _parse_token(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def _combine(parts: List[int]) -> Optional[int]:
    if len(parts) == 3:
        # H:MM:SS
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    elif len(parts) == 2:
        # M:SS
        return parts[0] * 60 + parts[1]
    elif len(parts) == 1:
        return parts[0]
    return None


def try_parse_time_string(text: str) -> Optional[int]:
    """時間文字列を秒に変換（厳密版）

    Args:
        text: 時間文字列 (例: "1:02:03", "20:00", "45")

    Returns:
        秒数（数値でないトークンがある、またはトークン数が1〜3でない場合はNone）
    """
    if text is None or pd.isna(text):
        return None

    parts = [_parse_token(token) for token in _split_tokens(str(text))]
    if any(part is None for part in parts):
        return None

    return _combine(parts)


def parse_time_string(text: str) -> int:
    """時間文字列を秒に変換

    区切り文字は ":" "." 空白など数字以外なら何でもよい。
    数値として読めないトークンは0として扱い、エラーは出さない。
    "3:45.5" は3トークンとなり 3時間45分5秒 と解釈される。

    Args:
        text: 時間文字列 (例: "1:02:03", "20:00", "45")

    Returns:
        秒数（解釈できない場合は0）
    """
    seconds = try_parse_time_string(text)
    if seconds is not None:
        return seconds

    if text is None or pd.isna(text):
        return 0

    # 読めないトークンは0とみなす
    parts = [_parse_token(token) or 0 for token in _split_tokens(str(text))]
    seconds = _combine(parts)
    return seconds if seconds is not None else 0


def _format_minutes_seconds(seconds: int) -> str:
    minutes, remainder = divmod(int(seconds), 60)
    padding = "0" if remainder < 10 else ""
    return f"{minutes}'{padding}{remainder}"


def format_seconds_as_pace(seconds: Optional[int]) -> str:
    """1kmあたりのペース（秒）を "M'SS" 形式に変換

    Args:
        seconds: ペース（秒/km）

    Returns:
        ペース文字列 (例: "4'05")
    """
    if seconds is None:
        return "N/A"
    return _format_minutes_seconds(seconds)


def format_race_time(seconds: Optional[int]) -> str:
    """レースタイム（秒）を "M'SS" 形式に変換

    1時間を超える場合も分で表記する (例: 5500秒 → "91'40")。

    Args:
        seconds: タイム（秒）、予測できなかった場合はNone

    Returns:
        タイム文字列（Noneの場合は "N/A"）
    """
    if seconds is None:
        return "N/A"
    return _format_minutes_seconds(seconds)
