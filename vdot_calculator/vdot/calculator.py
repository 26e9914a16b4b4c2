"""
VDOT Calculator - VDOT Estimator
レース結果からVDOTを計算するロジック
"""
from .physiology import oxygen_cost, race_velocity, sustainable_fraction
from .time_format import format_race_time


def estimate_vdot(distance: float, duration_seconds: float) -> float:
    """レースの距離とタイムからVDOTを算出

    タイムが0の場合はZeroDivisionErrorがそのまま送出される。
    呼び出し側で0秒を除外すること。

    Args:
        distance: 距離（メートル）
        duration_seconds: タイム（秒）

    Returns:
        VDOT値
    """
    velocity = race_velocity(distance, duration_seconds)
    return oxygen_cost(velocity) / sustainable_fraction(duration_seconds)


def explain_vdot(distance: float, duration_seconds: int) -> dict:
    """VDOTを計算し、計算過程を含めて返す

    Args:
        distance: 距離（メートル）
        duration_seconds: タイム（秒）

    Returns:
        dict: {
            "vdot": 計算されたVDOT値,
            "velocity": 平均速度（メートル/分）,
            "vo2": 酸素摂取量,
            "fraction": 維持可能な%VO2max,
            "calculation_log": 計算過程の説明
        }
    """
    velocity = race_velocity(distance, duration_seconds)
    vo2 = oxygen_cost(velocity)
    fraction = sustainable_fraction(duration_seconds)
    vdot = vo2 / fraction

    calculation_log = (
        f"【計算過程】\n"
        f"入力: {distance:g}m / {format_race_time(duration_seconds)} ({duration_seconds}秒)\n"
        f"平均速度: {distance:g} ÷ ({duration_seconds} ÷ 60) = {velocity:.2f} m/分\n"
        f"酸素摂取量: -4.60 + 0.182258 × {velocity:.2f} + 0.000104 × {velocity:.2f}² = {vo2:.2f}\n"
        f"%VO2max: {fraction:.4f}\n"
        f"VDOT: {vo2:.2f} ÷ {fraction:.4f} = {vdot:.2f}"
    )

    return {
        "vdot": vdot,
        "velocity": velocity,
        "vo2": vo2,
        "fraction": fraction,
        "calculation_log": calculation_log,
    }
