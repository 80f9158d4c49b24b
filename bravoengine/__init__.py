"""Building blocks for a small 2D game engine: geometry, components, events,
pathfinding, camera, audio control, save games and UI."""

__version__ = "0.1.0"

__all__ = [
    "audio",
    "camera",
    "components",
    "events",
    "geometry",
    "pathfinding",
    "savegame",
    "sprite",
    "ui",
]