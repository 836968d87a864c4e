"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object a front-end interacts with during playback.
It holds an already-computed list of Steps (the algorithms run to
completion before playback starts) and exposes a play/pause/next/prev/
speed API over it.

State machine:
    IDLE     →  load()   →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PLAYING  →  (last step reached) → FINISHED
    any      →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive tick() from a single event loop
  or timer thread.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

import config
from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


SPEED_PRESETS = config.SPEED_PRESETS


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The full trace being played back.
        current_idx : Index into `steps` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current
                      step changes.  A front-end hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.steps:       List[Step]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = config.DEFAULT_SPEED
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Attach a finished trace and show its first step."""
        self.steps       = list(steps)
        self.current_idx = -1
        if not self.steps:
            self.state = StepperState.IDLE
            return
        self.state = StepperState.PAUSED
        self._goto(0)
        self._check_finished()

    def reset(self) -> None:
        """Back to IDLE; caller must load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.current_idx + 1 >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        self._check_finished()
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index.  Out-of-range indices are refused."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        elif self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        if not self.steps:
            return
        self._goto(0)
        self.state = StepperState.PAUSED
        self._check_finished()

    def jump_to_end(self) -> None:
        if not self.steps:
            return
        self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

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
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and `speed`
        seconds have elapsed since the last advance, moves one step.
        Returns True if a step was taken.  `now` defaults to
        time.monotonic(); pass it explicitly to drive playback from a
        simulated clock.
        """
        if self.state != StepperState.PLAYING:
            return False
        if now is None:
            now = time.monotonic()
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, config.DEFAULT_SPEED)

    def set_speed_value(self, seconds: float) -> None:
        self.speed = min(config.MAX_SPEED, max(config.MIN_SPEED, float(seconds)))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _check_finished(self) -> None:
        if self.current_idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step:
            self.on_step(self.steps[idx])
