"""
VDOT Calculator - Race Predictor
VDOTから各距離のタイムを予測し、ペース処方とまとめて返す
"""
from typing import List, Optional, Tuple

from ..config import PREDICTION_SEARCH_LIMIT_SECONDS, STANDARD_RACE_DISTANCES
from .calculator import estimate_vdot
from .paces import training_paces
from .time_format import format_race_time


def predict_duration(vdot: float, distance: float) -> Optional[int]:
    """VDOTから指定距離の理論上のベストタイムを予測

    1秒から順に探索し、必要なVDOTが与えられたVDOT以下になる最初の秒数を返す。
    タイムが長いほど必要なVDOTは下がる（単調減少）ことを前提としている。

    Args:
        vdot: VDOT値
        distance: 距離（メートル）

    Returns:
        予測タイム（秒）。4時間未満で見つからない場合はNone
    """
    for seconds in range(1, PREDICTION_SEARCH_LIMIT_SECONDS):
        if estimate_vdot(distance, seconds) <= vdot:
            return seconds
    return None


def race_predictions(distance: float, duration_seconds: int) -> List[Tuple[int, str]]:
    """レース結果から標準距離の予測タイムを計算

    Args:
        distance: 距離（メートル）
        duration_seconds: タイム（秒）

    Returns:
        [(距離, タイム文字列), ...] 距離の昇順。予測できない距離は "N/A"
    """
    vdot = estimate_vdot(distance, duration_seconds)
    return [
        (race_distance, format_race_time(predict_duration(vdot, race_distance)))
        for race_distance in STANDARD_RACE_DISTANCES
    ]


def predict_and_prescribe(distance: float, duration_seconds: int) -> tuple:
    """トレーニングペースとレース予測をまとめて返す

    Returns:
        (training_pacesの結果, race_predictionsの結果)
    """
    return (
        training_paces(distance, duration_seconds),
        race_predictions(distance, duration_seconds),
    )
