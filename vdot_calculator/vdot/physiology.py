"""
VDOT Calculator - Physiology Model
速度・酸素摂取量・持続可能な%VO2maxの回帰式（ジャック・ダニエルズ / ギルバート）
"""
import math


def sustainable_fraction(duration_seconds: float) -> float:
    """指定した時間だけ維持できるVO2maxの割合を返す

    時間が長くなるほど0.8に近づき、ごく短い運動では1.0付近になる。
    0以下の時間は数学的には計算できるが、生理学的な意味はない。

    Args:
        duration_seconds: 運動時間（秒）

    Returns:
        VO2maxに対する割合
    """
    minutes = duration_seconds / 60
    return (
        0.8
        + 0.1894393 * math.exp(-0.012778 * minutes)
        + 0.2989558 * math.exp(-0.1932605 * minutes)
    )


def oxygen_cost(velocity: float) -> float:
    """指定した速度で走るときの酸素摂取量（mL/kg/分）

    Args:
        velocity: 速度（メートル/分）
    """
    return -4.60 + 0.182258 * velocity + 0.000104 * velocity ** 2


def velocity_from_oxygen_cost(vo2: float) -> float:
    """酸素摂取量から理論上の速度（メートル/分）を求める

    oxygen_costの近似逆関数。往復変換では誤差が残る。
    """
    return 29.54 + 5.000663 * vo2 - 0.007546 * vo2 ** 2


def race_velocity(distance: float, duration_seconds: float) -> float:
    """距離とタイムから平均速度（メートル/分）を計算"""
    return distance / (duration_seconds / 60)
