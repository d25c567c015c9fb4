"""Physics data for games: shapes, layers, motion, step timing, events and debug wireframes."""

__version__ = "0.1.0"

__all__ = [
    "constraints",
    "debug",
    "events",
    "gravity",
    "layers",
    "mathutils",
    "physics_time",
    "shapes",
    "step",
    "velocity",
    "wireframe",
]