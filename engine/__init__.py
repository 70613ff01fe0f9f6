"""
engine/
-------
Playback, replay & recording layer.

    from engine import Stepper, Recorder, compare
    from engine import replay_array, array_frames, graph_frames
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.replay   import (
    ArrayFrame, GraphFrame,
    replay_array, array_frames, graph_frames,
    visit_order, final_distances,
)
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "ArrayFrame",
    "GraphFrame",
    "replay_array",
    "array_frames",
    "graph_frames",
    "visit_order",
    "final_distances",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
