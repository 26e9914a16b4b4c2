"""
VDOT Calculator - UI Components Tests
"""
import sys
import os

# プロジェクトルートをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vdot_calculator.ui.components import read_race_form, training_paces_frame, race_predictions_frame
from vdot_calculator.vdot import predict_and_prescribe


class TestFrames:
    """表示用データフレームのテスト"""

    def test_training_paces_frame(self):
        """強度ごとに1行"""
        paces, _ = predict_and_prescribe(5000, 1200)
        df = training_paces_frame(paces)

        assert df.shape == (5, 3)
        assert df.iloc[0]["強度"] == "E（イージー）"
        assert df.iloc[0]["下限ペース (/km)"] == paces[0][1][0]

    def test_race_predictions_frame(self):
        """距離ごとに1行"""
        _, predictions = predict_and_prescribe(5000, 1200)
        df = race_predictions_frame(predictions)

        assert df.shape == (6, 2)
        assert list(df["距離 (m)"]) == [800, 1500, 3000, 5000, 10000, 21095]
        assert df.iloc[3]["予測タイム"] == "20'00"


class TestReadRaceForm:
    """read_race_form関数のテスト"""

    def test_label_and_time(self):
        """選択ラベルとタイム"""
        assert read_race_form("5km", "", "20:00") == (5000.0, 1200)

    def test_surrounding_spaces(self):
        """前後の空白は無視される"""
        assert read_race_form("ハーフマラソン", "", " 1:32:10") == (21095.0, 5530)
        assert read_race_form("5km", "", " 20:00 ") == (5000.0, 1200)

    def test_custom_distance_overrides_label(self):
        """直接入力した距離が優先される"""
        assert read_race_form("5km", " 4000 ", "16:00") == (4000.0, 960)

    def test_invalid_custom_distance(self):
        """認識できない距離はNone"""
        distance, _ = read_race_form("5km", "4km走", "16:00")
        assert distance is None

    def test_empty_time(self):
        """タイム未入力は0秒"""
        assert read_race_form("5km", "", "") == (5000.0, 0)
        assert read_race_form("5km", None, None) == (5000.0, 0)
