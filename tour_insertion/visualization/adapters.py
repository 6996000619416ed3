"""Adapters converting tours and insertion traces into renderer-friendly events."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from tour_insertion.algs.geometry import Point
from tour_insertion.algs.heuristics import HEURISTICS
from tour_insertion.algs.tour import Tour
from tour_insertion.visualization.events import (
    AddPointEvent,
    AlgoInfoEvent,
    DoneEvent,
    DrawSegmentEvent,
    InsertPointEvent,
    SetSceneEvent,
    TourInfoEvent,
    compute_scene_bounds,
)

SCENE_MARGIN = 0.1


class EventCanvas:
    """Drawing surface for :meth:`Tour.draw` that records ``draw_segment`` events."""

    def __init__(self, events: Optional[List[dict]] = None) -> None:
        self.events: List[dict] = [] if events is None else events

    def draw_segment(self, a: Point, b: Point) -> None:
        self.events.append(
            DrawSegmentEvent(type="draw_segment", x1=a.x, y1=a.y, x2=b.x, y2=b.y)
        )


def build_scene_events(
    points: Iterable[Point],
    *,
    margin: float = SCENE_MARGIN,
) -> List[dict]:
    pts = list(points)
    x_min, y_min, x_max, y_max = compute_scene_bounds((p.as_tuple() for p in pts), margin=margin)
    return [SetSceneEvent(type="set_scene", x_min=x_min, y_min=y_min, x_max=x_max, y_max=y_max)]


def build_tour_events(tour: Tour, heuristic: str = "fixed") -> List[dict]:
    """Events that show a finished tour: scene, its points, its edges."""
    pts = tour.points()
    events = build_scene_events(pts)
    events.append(AlgoInfoEvent(type="algo_info", name=heuristic, case=None))
    for idx, p in enumerate(pts):
        events.append(
            InsertPointEvent(
                type="insert_point",
                id=idx,
                x=p.x,
                y=p.y,
                after=idx - 1 if idx else None,
                cost=0.0,
            )
        )
    tour.draw(EventCanvas(events))
    events.append(
        TourInfoEvent(type="tour_info", heuristic=heuristic, size=tour.size(), length=tour.length())
    )
    events.append(DoneEvent(type="done"))
    return events


def build_insertion_events(points: Iterable[Point], heuristic: str = "smallest") -> List[dict]:
    """Replay a tour construction one insertion at a time."""
    if heuristic not in HEURISTICS:
        raise ValueError(f"Unknown heuristic {heuristic!r}; expected one of {HEURISTICS}")

    pts = list(points)
    events = build_scene_events(pts)
    events.append(AlgoInfoEvent(type="algo_info", name=heuristic, case=None))
    for idx, p in enumerate(pts):
        events.append(AddPointEvent(type="add_point", id=idx, x=p.x, y=p.y))

    tour = Tour()
    insert = tour.insert_nearest if heuristic == "nearest" else tour.insert_smallest
    for idx, p in enumerate(pts):
        debug: Dict[str, Any] = {}
        insert(p, debug=debug)
        events.append(
            InsertPointEvent(
                type="insert_point",
                id=idx,
                x=p.x,
                y=p.y,
                after=debug["after"],
                cost=float(debug["cost"]),
            )
        )

    tour.draw(EventCanvas(events))
    events.append(
        TourInfoEvent(type="tour_info", heuristic=heuristic, size=tour.size(), length=tour.length())
    )
    events.append(DoneEvent(type="done"))
    return events


__all__ = [
    "EventCanvas",
    "SCENE_MARGIN",
    "build_scene_events",
    "build_tour_events",
    "build_insertion_events",
]
