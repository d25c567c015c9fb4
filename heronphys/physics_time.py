"""Time scale of the physics simulation."""

from __future__ import annotations

from typing import Optional


def _check_scale(scale: float) -> float:
    if not scale >= 0.0:
        raise ValueError(f"Negative scale: {scale}")
    return scale


class PhysicsTime:
    """Controls the physics time scale, with pause and resume."""

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = _check_scale(scale)
        self._previous_scale: Optional[float] = None

    def __repr__(self) -> str:
        return f"PhysicsTime(scale={self._scale!r})"

    def pause(self) -> None:
        """Set the scale to zero, remembering the current one."""
        self._previous_scale = self._scale
        self._scale = 0.0

    def resume(self) -> None:
        """Restore the scale in effect before the last pause."""
        if self._previous_scale is not None:
            self._scale = self._previous_scale
            self._previous_scale = None

    @property
    def scale(self) -> float:
        """The time scale; setting it to a negative value raises ``ValueError``."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = _check_scale(value)