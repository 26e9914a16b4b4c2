"""
VDOT Calculator - Configuration
アプリケーション全体の設定値を管理
"""
from typing import Optional

# =============================================
# アプリ情報
# =============================================
APP_NAME = "VDOTランニング計算機"
APP_VERSION = "1.0.0"

# =============================================
# レース予測設定
# =============================================
# 予測対象の標準距離（メートル、昇順）
STANDARD_RACE_DISTANCES = (800, 1500, 3000, 5000, 10000, 21095)

# タイム予測の探索上限（秒、この値は含まない）
# 1秒刻みで4時間まで探索する
PREDICTION_SEARCH_LIMIT_SECONDS = 4 * 60 * 60

# =============================================
# トレーニングペース設定
# =============================================
# 強度レベル: (レベル名, (VDOT倍率の下限, 上限))
# 順序は出力の並び順としてそのまま使う
EFFORT_LEVELS = (
    ("easy", (0.59, 0.74)),
    ("marathon", (0.75, 0.84)),
    ("threshold", (0.83, 0.88)),
    ("interval", (0.95, 1.00)),
    ("maximal", (1.00, 1.05)),
)

EFFORT_LEVEL_LABELS = {
    "easy": "E（イージー）",
    "marathon": "M（マラソン）",
    "threshold": "T（閾値）",
    "interval": "I（インターバル）",
    "maximal": "R（最大）",
}

# =============================================
# 入力フォーム
# =============================================
RACE_DISTANCE_OPTIONS = {
    "800m": 800,
    "1500m": 1500,
    "3000m": 3000,
    "5km": 5000,
    "10km": 10000,
    "ハーフマラソン": 21095,
}


def get_distance_meters(label: str) -> Optional[float]:
    """距離ラベルをメートルに変換

    ラベルに一致しない場合は数値（メートル）として解釈する。

    Args:
        label: 距離ラベル（例: "5km", "ハーフマラソン", "4000"）

    Returns:
        距離（メートル、変換できない場合はNone）
    """
    if label in RACE_DISTANCE_OPTIONS:
        return float(RACE_DISTANCE_OPTIONS[label])

    try:
        meters = float(str(label).strip())
    except ValueError:
        return None

    return meters if meters > 0 else None
