import json
import math

import pytest

from tour_insertion import Point, build_tour
from tour_insertion.visualization.adapters import (
    EventCanvas,
    build_insertion_events,
    build_tour_events,
)
from tour_insertion.visualization.events import compute_scene_bounds
from tests.test_utils import DEMO_POINTS


def _assert_common_structure(events, expected_points):
    assert events, "event list should not be empty"
    assert events[0]["type"] == "set_scene"
    inserts = [ev for ev in events if ev["type"] == "insert_point"]
    assert len(inserts) == expected_points
    done_indices = [idx for idx, ev in enumerate(events) if ev["type"] == "done"]
    assert done_indices == [len(events) - 1]


def _assert_json_and_finite(events):
    def _check(value):
        if isinstance(value, dict):
            for item in value.values():
                _check(item)
        elif isinstance(value, (list, tuple)):
            for item in value:
                _check(item)
        elif isinstance(value, float):
            assert math.isfinite(value)

    for ev in events:
        json.dumps(ev)  # ensure serialisable
        _check(ev)


@pytest.mark.parametrize("heuristic", ["nearest", "smallest"])
def test_insertion_events_structure(heuristic: str) -> None:
    points = [Point(x, y) for x, y in DEMO_POINTS]
    events = build_insertion_events(points, heuristic)
    _assert_common_structure(events, expected_points=len(points))

    algo = next(ev for ev in events if ev["type"] == "algo_info")
    assert algo["name"] == heuristic
    adds = [ev for ev in events if ev["type"] == "add_point"]
    assert [ev["id"] for ev in adds] == list(range(len(points)))

    inserts = [ev for ev in events if ev["type"] == "insert_point"]
    assert inserts[0]["after"] is None
    for n, ev in enumerate(inserts[1:], 1):
        assert 0 <= ev["after"] < n

    info = next(ev for ev in events if ev["type"] == "tour_info")
    tour = build_tour(points, heuristic)
    assert info["size"] == tour.size()
    assert info["length"] == tour.length()

    segments = [ev for ev in events if ev["type"] == "draw_segment"]
    assert len(segments) == tour.size()
    _assert_json_and_finite(events)


def test_tour_events_draw_every_edge(square) -> None:
    events = build_tour_events(square, heuristic="fixed")
    _assert_common_structure(events, expected_points=4)
    segments = [(ev["x1"], ev["y1"], ev["x2"], ev["y2"]) for ev in events if ev["type"] == "draw_segment"]
    assert segments == [
        (100.0, 100.0, 500.0, 100.0),
        (500.0, 100.0, 500.0, 500.0),
        (500.0, 500.0, 100.0, 500.0),
        (100.0, 500.0, 100.0, 100.0),
    ]
    _assert_json_and_finite(events)


def test_empty_input_still_produces_scene() -> None:
    events = build_insertion_events([], "smallest")
    assert [ev["type"] for ev in events] == ["set_scene", "algo_info", "tour_info", "done"]
    assert events[2]["size"] == 0


def test_unknown_heuristic_rejected() -> None:
    with pytest.raises(ValueError):
        build_insertion_events([Point(0, 0)], "random")


def test_event_canvas_appends_to_shared_list() -> None:
    events = [{"type": "marker"}]
    canvas = EventCanvas(events)
    canvas.draw_segment(Point(0, 0), Point(1, 2))
    assert events[-1] == {"type": "draw_segment", "x1": 0.0, "y1": 0.0, "x2": 1.0, "y2": 2.0}


def test_scene_bounds_pad_the_extent() -> None:
    x_min, y_min, x_max, y_max = compute_scene_bounds([(0.0, 0.0), (10.0, 5.0)], margin=0.1)
    assert (x_min, y_min, x_max, y_max) == (-1.0, -1.0, 11.0, 6.0)
    assert compute_scene_bounds([]) == (-1.0, -1.0, 1.0, 1.0)
