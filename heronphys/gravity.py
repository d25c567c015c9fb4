"""The world's gravity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from heronphys.mathutils import Vec2, Vec3


@dataclass(frozen=True)
class Gravity:
    """World gravity as an acceleration vector; zero by default."""

    vector: Vec3 = Vec3.ZERO

    @classmethod
    def from_vector(cls, v: Union[Vec2, Vec3]) -> Gravity:
        """Gravity from a 3D vector, or a 2D vector extended with ``z = 0``."""
        if isinstance(v, Vec2):
            v = v.extend(0.0)
        if not isinstance(v, Vec3):
            raise TypeError(f"expected Vec2 or Vec3, got {type(v).__name__}")
        return cls(v)