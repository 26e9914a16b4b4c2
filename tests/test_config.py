"""
VDOT Calculator - Configuration Tests
"""
import sys
import os

# プロジェクトルートをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vdot_calculator.config import (
    EFFORT_LEVELS,
    EFFORT_LEVEL_LABELS,
    PREDICTION_SEARCH_LIMIT_SECONDS,
    STANDARD_RACE_DISTANCES,
    get_distance_meters,
)


class TestGetDistanceMeters:
    """get_distance_meters関数のテスト"""

    def test_labels(self):
        """距離ラベルの変換"""
        assert get_distance_meters("5km") == 5000.0
        assert get_distance_meters("ハーフマラソン") == 21095.0

    def test_numeric_string(self):
        """数値はメートルとして扱う"""
        assert get_distance_meters("4000") == 4000.0
        assert get_distance_meters(" 1609.34 ") == 1609.34

    def test_invalid(self):
        """無効な距離はNone"""
        assert get_distance_meters("100マイル") is None
        assert get_distance_meters("0") is None
        assert get_distance_meters("-5") is None


class TestTables:
    """固定テーブルのテスト"""

    def test_effort_levels(self):
        """強度レベルの順序と倍率"""
        assert [level for level, _ in EFFORT_LEVELS] == ["easy", "marathon", "threshold", "interval", "maximal"]
        for _, (low, high) in EFFORT_LEVELS:
            assert low < high
        assert set(EFFORT_LEVEL_LABELS) == {level for level, _ in EFFORT_LEVELS}

    def test_standard_distances_ascending(self):
        """標準距離は昇順"""
        assert list(STANDARD_RACE_DISTANCES) == sorted(STANDARD_RACE_DISTANCES)

    def test_search_limit(self):
        """探索上限は4時間"""
        assert PREDICTION_SEARCH_LIMIT_SECONDS == 14400
