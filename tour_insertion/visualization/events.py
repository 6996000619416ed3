"""Shared event schema for tour visualizations."""

from __future__ import annotations

from typing import Dict, Iterable, Literal, Optional, Tuple, TypedDict

Coord = Tuple[float, float]


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    x_min: float
    y_min: float
    x_max: float
    y_max: float


class AlgoInfoEvent(TypedDict):
    type: Literal["algo_info"]
    name: str
    case: Optional[str]


class AddPointEvent(TypedDict):
    type: Literal["add_point"]
    id: int
    x: float
    y: float


class InsertPointEvent(TypedDict):
    type: Literal["insert_point"]
    id: int
    x: float
    y: float
    after: Optional[int]
    cost: float


class DrawSegmentEvent(TypedDict):
    type: Literal["draw_segment"]
    x1: float
    y1: float
    x2: float
    y2: float


class TourInfoEvent(TypedDict):
    type: Literal["tour_info"]
    heuristic: str
    size: int
    length: float


class DoneEvent(TypedDict):
    type: Literal["done"]


EventDict = Dict[str, object]


def compute_scene_bounds(
    coords: Iterable[Coord],
    margin: float = 0.1,
) -> Tuple[float, float, float, float]:
    """Compute ``(x_min, y_min, x_max, y_max)`` for the scene with a fractional margin."""
    pts = list(coords)
    if not pts:
        return -1.0, -1.0, 1.0, 1.0

    xs = [x for x, _ in pts]
    ys = [y for _, y in pts]
    span_x = max(max(xs) - min(xs), 1e-6)
    span_y = max(max(ys) - min(ys), 1e-6)
    pad = max(max(span_x, span_y) * margin, 0.5)
    return min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad


__all__ = [
    "EventDict",
    "SetSceneEvent",
    "AlgoInfoEvent",
    "AddPointEvent",
    "InsertPointEvent",
    "DrawSegmentEvent",
    "TourInfoEvent",
    "DoneEvent",
    "compute_scene_bounds",
]
