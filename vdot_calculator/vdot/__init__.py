"""
VDOT Calculator - VDOT Package
VDOTの計算、タイム予測とペース処方
"""
from .physiology import (
    sustainable_fraction,
    oxygen_cost,
    velocity_from_oxygen_cost,
    race_velocity,
)
from .time_format import (
    parse_time_string,
    try_parse_time_string,
    format_seconds_as_pace,
    format_race_time,
)
from .calculator import (
    estimate_vdot,
    explain_vdot,
)
from .paces import (
    velocity_to_pace_seconds,
    pace_seconds_to_velocity,
    effort_pace,
    training_paces,
    training_paces_for_vdot,
)
from .predictor import (
    predict_duration,
    race_predictions,
    predict_and_prescribe,
)
