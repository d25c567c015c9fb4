"""Constraints on rotations caused by forces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RotationConstraints:
    """Which axes forces may rotate a rigid body around; all allowed by default."""

    allow_x: bool = True
    allow_y: bool = True
    allow_z: bool = True

    @classmethod
    def lock(cls) -> RotationConstraints:
        """Lock rotations around all axes."""
        return cls(False, False, False)

    @classmethod
    def allow(cls) -> RotationConstraints:
        """Allow rotations around all axes."""
        return cls(True, True, True)

    @classmethod
    def restrict_to_x_only(cls) -> RotationConstraints:
        """Allow rotation around the x axis only."""
        return cls(True, False, False)

    @classmethod
    def restrict_to_y_only(cls) -> RotationConstraints:
        """Allow rotation around the y axis only."""
        return cls(False, True, False)

    @classmethod
    def restrict_to_z_only(cls) -> RotationConstraints:
        """Allow rotation around the z axis only."""
        return cls(False, False, True)