[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heronphys"
version = "0.1.0"
description = "Physics data for games: collision shapes and layers, velocities, gravity, step timing, collision events and debug wireframes"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "gamedev", "collision", "simulation", "rigid-body", "wireframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heronphys"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
