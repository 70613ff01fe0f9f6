"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object a view interacts with during playback.
It holds a finished step sequence (algorithms run to completion before
playback starts), the display frame after every step, and exposes a
play/pause/next/prev/seek/speed API.

State machine:
    IDLE  →  start()  →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → FINISHED
    any     →  reset()  →  IDLE

Position:
    current_idx == -1   nothing applied yet (the input as given)
    current_idx == k    steps[0..k] applied; frames[k + 1] is on screen

Because every frame is computed up front, stepping backwards is an index
change — the algorithm is never re-run.  Playback only ever moves
between steps, never into the middle of one.

Thread safety:
  NOT thread-safe.  Drive it from one thread / event loop.
"""

import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step), per view
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, Dict[str, float]] = {
    "array": {"slow": 1.0, "medium": 0.5, "fast": 0.2},
    "graph": {"slow": 1.5, "medium": 1.0, "fast": 0.5},
    "tree":  {"medium": 0.8},
    "list":  {"medium": 0.3},
}

MIN_SPEED = 0.02


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The full, immutable step sequence (Steps or, for tree
                      traversals, node ids).
        frames      : Optional display frames; frames[i + 1] is the view after steps[i].
        current_idx : Index of the last applied step (-1 = none).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(item) fired whenever the position changes
                      onto a step.  A view hooks its re-render here.
    """

    def __init__(
        self,
        family: str = "array",
        on_step: Optional[Callable[[Any], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.family:      str                = family
        self.steps:       Sequence[Any]      = ()
        self.frames:      Optional[List[Any]] = None
        self.current_idx: int                = -1
        self.state:       StepperState       = StepperState.IDLE
        self.speed:       float              = self._presets().get("medium", 0.5)
        self.on_step:     Optional[Callable[[Any], None]] = on_step

        self._clock      = clock
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, steps: Sequence[Any], frames: Optional[List[Any]] = None) -> None:
        """Load a finished step sequence, positioned before the first step."""
        if frames is not None and len(frames) != len(steps) + 1:
            raise ValueError("frames must hold one entry per step plus the initial frame")
        self.steps       = tuple(steps)
        self.frames      = frames
        self.current_idx = -1
        self.state       = StepperState.FINISHED if not self.steps else StepperState.PAUSED

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self.steps       = ()
        self.frames      = None
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.steps):
            self._finish()
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.steps) - 1:
            self._finish()
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if nothing is applied."""
        if self.current_idx < 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Seek to any position in [-1, len(steps) - 1]."""
        if not -1 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if idx == len(self.steps) - 1:
            self._finish()
        elif self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to before the first step."""
        self.goto_step(-1)

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)
        self._finish()

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = self._clock()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = self._clock()
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        presets = self._presets()
        self.speed = presets.get(preset, presets.get("medium", 0.5))

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    def scale_speed(self, factor: float) -> None:
        """factor 2 → twice as fast, 0.5 → half as fast."""
        if factor <= 0:
            raise ValueError("speed factor must be positive")
        self.set_speed_value(self.speed / factor)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Any]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def current_frame(self) -> Optional[Any]:
        if self.frames is None:
            return None
        return self.frames[self.current_idx + 1]

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def progress(self) -> float:
        """Fraction of steps applied, 0.0 … 1.0."""
        if not self.steps:
            return 1.0 if self.state == StepperState.FINISHED else 0.0
        return (self.current_idx + 1) / len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _presets(self) -> Dict[str, float]:
        return SPEED_PRESETS.get(self.family, SPEED_PRESETS["array"])

    def _finish(self) -> None:
        if self.state != StepperState.IDLE:
            self.state = StepperState.FINISHED

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step and 0 <= idx < len(self.steps):
            self.on_step(self.steps[idx])
