"""
VDOT Calculator - UI Components
計算結果を表示するUIコンポーネント
"""
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from ..config import APP_NAME, APP_VERSION, EFFORT_LEVEL_LABELS, get_distance_meters
from ..vdot.time_format import parse_time_string


def read_race_form(distance_label: str, custom_distance: str, time_text: str) -> Tuple[Optional[float], int]:
    """入力フォームの値を距離（メートル）とタイム（秒）に変換

    距離を直接入力した場合はラベルより優先する。

    Args:
        distance_label: 選択された距離ラベル
        custom_distance: 直接入力された距離（メートル、空なら未入力）
        time_text: 入力されたタイム文字列

    Returns:
        (距離（認識できない場合はNone）, タイム（秒、解釈できない場合は0）)
    """
    custom_distance = (custom_distance or "").strip()
    distance = get_distance_meters(custom_distance if custom_distance else distance_label)
    duration_seconds = parse_time_string((time_text or "").strip())
    return distance, duration_seconds


def training_paces_frame(paces: List[Tuple[str, List[str]]]) -> pd.DataFrame:
    """トレーニングペースの結果を表示用データフレームに変換

    Args:
        paces: training_pacesの結果

    Returns:
        列: 強度, 下限ペース, 上限ペース（強度レベル順）
    """
    rows = [
        {
            "強度": EFFORT_LEVEL_LABELS.get(level, level),
            "下限ペース (/km)": low,
            "上限ペース (/km)": high,
        }
        for level, (low, high) in paces
    ]
    return pd.DataFrame(rows, columns=["強度", "下限ペース (/km)", "上限ペース (/km)"])


def race_predictions_frame(predictions: List[Tuple[int, str]]) -> pd.DataFrame:
    """レース予測の結果を表示用データフレームに変換

    Args:
        predictions: race_predictionsの結果

    Returns:
        列: 距離 (m), 予測タイム（距離の昇順）
    """
    return pd.DataFrame(predictions, columns=["距離 (m)", "予測タイム"])


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.title(f"🏃 {APP_NAME}")
    st.caption(f"Version {APP_VERSION}")
    st.markdown("ジャック・ダニエルズのVDOT理論に基づく、タイム予測とトレーニングペース")


def render_footer() -> None:
    """フッターを表示"""
    st.markdown("---")
    st.caption(f"{APP_NAME} v{APP_VERSION}")


def render_vdot_display(vdot_info: dict) -> None:
    """VDOT値と計算過程を表示

    Args:
        vdot_info: explain_vdotの結果
    """
    st.metric("VDOT", f"{vdot_info['vdot']:.1f}")
    with st.expander("📐 VDOT計算過程を確認"):
        st.code(vdot_info.get("calculation_log", "計算ログなし"))


def render_results(paces: List[Tuple[str, List[str]]], predictions: List[Tuple[int, str]]) -> None:
    """ペース表と予測タイム表を並べて表示"""
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### 🏃 トレーニングペース")
        st.dataframe(training_paces_frame(paces), hide_index=True, use_container_width=True)
    with col2:
        st.markdown("### ⏱ 予測タイム")
        st.dataframe(race_predictions_frame(predictions), hide_index=True, use_container_width=True)
