[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bravoengine"
version = "0.1.0"
description = "Building blocks of a small 2D game engine: geometry, components, events, A* pathfinding, camera shake, audio control, JSON save games and UI buttons."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "2d", "pathfinding", "a-star", "save game", "components", "ui"]
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
    "Typing :: Typed",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bravoengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
