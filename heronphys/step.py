"""How often physics steps run and how far each one advances the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

from heronphys.physics_time import PhysicsTime

DurationLike = Union[float, int, timedelta]


def _seconds(value: DurationLike) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected seconds or a timedelta, got {type(value).__name__}")
    return float(value)


def _positive_duration(value: DurationLike) -> float:
    seconds = _seconds(value)
    if not (math.isfinite(seconds) and seconds > 0.0):
        raise ValueError(f"Invalid duration: {value!r}")
    return seconds


class StepDurationKind(Enum):
    """How the length of a physics step is determined."""

    EXACT = "exact"
    MAX_DELTA_TIME = "max_delta_time"


@dataclass(frozen=True)
class PhysicsStepDuration:
    """How much simulation time one physics step advances, in seconds.

    With ``EXACT`` the step always advances by ``duration``; with
    ``MAX_DELTA_TIME`` it advances by the frame's delta time, capped at
    ``duration``.
    """

    kind: StepDurationKind
    duration: float

    def exact(self, delta_time: DurationLike) -> float:
        """The step length in seconds, given this frame's delta time."""
        if self.kind is StepDurationKind.EXACT:
            return self.duration
        return min(_seconds(delta_time), self.duration)


class _Mode(Enum):
    MAX_DELTA_TIME = "max_delta_time"
    EVERY_FRAME = "every_frame"
    TIMER = "timer"


class PhysicsSteps:
    """Controls how many physics steps are performed per second.

    A physics update runs at most once per frame, so a step rate higher than
    the frame rate slows the simulation down. This tunes precision and cost,
    not the speed of the simulation; see ``PhysicsTime`` for that.
    """

    def __init__(self) -> None:
        self._mode = _Mode.MAX_DELTA_TIME
        self._duration = 0.2
        self._elapsed = 0.0
        self._just_finished = False

    @classmethod
    def _build(cls, mode: _Mode, duration: float) -> PhysicsSteps:
        steps = cls()
        steps._mode = mode
        steps._duration = duration
        return steps

    def __repr__(self) -> str:
        return f"PhysicsSteps(mode={self._mode.value}, duration={self._duration!r})"

    @classmethod
    def from_steps_per_second(cls, steps_per_second: float) -> PhysicsSteps:
        """Run at the given number of steps per second.

        Raises ``ValueError`` if the rate is NaN, infinite, zero or negative.
        """
        if not (math.isfinite(steps_per_second) and steps_per_second > 0.0):
            raise ValueError(f"Invalid steps per second: {steps_per_second}")
        return cls._build(_Mode.TIMER, 1.0 / steps_per_second)

    @classmethod
    def from_delta_time(cls, duration: DurationLike) -> PhysicsSteps:
        """Wait for ``duration`` between physics steps.

        Raises ``ValueError`` if the duration is not positive.
        """
        return cls._build(_Mode.TIMER, _positive_duration(duration))

    @classmethod
    def every_frame(cls, duration: DurationLike) -> PhysicsSteps:
        """Step every frame, always advancing by ``duration``; meant for tests.

        Raises ``ValueError`` if the duration is not positive.
        """
        return cls._build(_Mode.EVERY_FRAME, _positive_duration(duration))

    @classmethod
    def from_max_delta_time(cls, max_delta: DurationLike) -> PhysicsSteps:
        """Step every frame by the frame's delta time, capped at ``max_delta``."""
        return cls._build(_Mode.MAX_DELTA_TIME, _seconds(max_delta))

    def is_step_frame(self) -> bool:
        """True if the current frame performs a physics step."""
        if self._mode is _Mode.TIMER:
            return self._just_finished
        return True

    def duration(self) -> PhysicsStepDuration:
        """The time that elapses in each physics step."""
        if self._mode is _Mode.MAX_DELTA_TIME:
            return PhysicsStepDuration(StepDurationKind.MAX_DELTA_TIME, self._duration)
        return PhysicsStepDuration(StepDurationKind.EXACT, self._duration)

    def update(self, delta: DurationLike) -> None:
        """Advance the step timer by the frame's delta time."""
        seconds = _seconds(delta)
        if seconds < 0.0:
            raise ValueError(f"Negative delta time: {delta!r}")
        if self._mode is not _Mode.TIMER:
            return
        self._just_finished = False
        self._elapsed += seconds
        if self._elapsed >= self._duration:
            self._just_finished = True
            self._elapsed %= self._duration


def should_run(physics_steps: PhysicsSteps, physics_time: PhysicsTime) -> bool:
    """True if the physics systems should run in the current frame."""
    return physics_steps.is_step_frame() and physics_time.scale > 0.0