"""
VDOT Calculator - UI Package
"""
