"""
VDOT Calculator
ジャック・ダニエルズのVDOT理論に基づくタイム予測とトレーニングペース
"""
