"""
VDOT Calculator - Training Paces
VDOTから強度別のトレーニングペースを計算
"""
from typing import List, Tuple

from ..config import EFFORT_LEVELS
from .calculator import estimate_vdot
from .physiology import velocity_from_oxygen_cost
from .time_format import format_seconds_as_pace


def velocity_to_pace_seconds(velocity: float) -> int:
    """速度（メートル/分）を1kmあたりのペース（秒、切り捨て）に変換"""
    return int(60 * 1000 / velocity)


def pace_seconds_to_velocity(pace_seconds: float) -> int:
    """1kmあたりのペース（秒）を速度（メートル/分、切り捨て）に変換"""
    return int(1000 / (pace_seconds / 60))


def effort_pace(multiplier: float, vdot: float) -> str:
    """VDOTに倍率をかけた強度のペースを求める

    Args:
        multiplier: VDOTに対する倍率（例: 0.59）
        vdot: VDOT値

    Returns:
        ペース文字列 (例: "5'53")
    """
    velocity = velocity_from_oxygen_cost(multiplier * vdot)
    return format_seconds_as_pace(velocity_to_pace_seconds(velocity))


def training_paces_for_vdot(vdot: float) -> List[Tuple[str, List[str]]]:
    """VDOTから強度別のペース範囲を計算

    Returns:
        [(強度レベル名, [下限倍率のペース, 上限倍率のペース]), ...]
        easy, marathon, threshold, interval, maximal の順
    """
    return [
        (level, [effort_pace(low, vdot), effort_pace(high, vdot)])
        for level, (low, high) in EFFORT_LEVELS
    ]


def training_paces(distance: float, duration_seconds: int) -> List[Tuple[str, List[str]]]:
    """レース結果からトレーニングペースを処方

    Args:
        distance: 距離（メートル）
        duration_seconds: タイム（秒）
    """
    vdot = estimate_vdot(distance, duration_seconds)
    return training_paces_for_vdot(vdot)
