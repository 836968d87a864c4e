"""
engine/
-------
Input validation, playback & recording layer.

    from engine import Stepper, Recorder, parse_array
"""

from engine.inputs import (
    InputError,
    parse_array,
    parse_probability,
    parse_seed,
    parse_target,
    prepare_search_input,
    random_array,
    validate_array,
    validate_target,
)
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "InputError",
    "parse_array",
    "parse_probability",
    "parse_seed",
    "parse_target",
    "prepare_search_input",
    "random_array",
    "validate_array",
    "validate_target",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
]
