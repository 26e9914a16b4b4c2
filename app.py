"""
VDOTランニング計算機 - Streamlit App
レース結果からVDOTを計算し、タイム予測とトレーニングペースを表示
"""
import streamlit as st

from vdot_calculator.config import APP_NAME, APP_VERSION, RACE_DISTANCE_OPTIONS
from vdot_calculator.ui.components import (
    read_race_form,
    render_header,
    render_footer,
    render_vdot_display,
    render_results,
)
from vdot_calculator.vdot import explain_vdot, predict_and_prescribe

st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="wide",
)


def main():
    """メイン処理"""
    render_header()

    with st.form("race_form"):
        col1, col2, col3 = st.columns(3)
        with col1:
            distance_label = st.selectbox("レース距離", list(RACE_DISTANCE_OPTIONS.keys()), index=3)
        with col2:
            custom_distance = st.text_input("距離を直接入力（m、任意）", placeholder="例: 4000")
        with col3:
            time_text = st.text_input("タイム", placeholder="例: 20:00, 1:32:10")
        submitted = st.form_submit_button("計算する", type="primary")

    if not submitted:
        render_footer()
        return

    distance, duration_seconds = read_race_form(distance_label, custom_distance, time_text)

    if distance is None:
        st.error(f"距離 '{custom_distance}' を認識できません（メートルで入力してください）")
    elif duration_seconds <= 0:
        st.error("タイムを入力してください（例: 20:00）")
    else:
        render_vdot_display(explain_vdot(distance, duration_seconds))
        paces, predictions = predict_and_prescribe(distance, duration_seconds)
        render_results(paces, predictions)

    render_footer()


if __name__ == "__main__":
    main()
