"""Visualization subsystem package."""

from .adapters import EventCanvas, build_insertion_events, build_tour_events
from .events import compute_scene_bounds

__version__ = "0.1"

__all__ = [
    "__version__",
    "EventCanvas",
    "build_insertion_events",
    "build_tour_events",
    "compute_scene_bounds",
]
