from __future__ import annotations

import copy
import math
import pickle

import pytest

from tour_insertion.algs.geometry import Point
from tour_insertion.algs.tour import four_point_tour
from tests.test_utils import RecordingCanvas


def test_distance_is_euclidean_and_symmetric() -> None:
    a, b = Point(0.0, 0.0), Point(3.0, 4.0)
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0
    assert a.distance_to(a) == 0.0


def test_point_is_immutable_and_hashable() -> None:
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5.0  # type: ignore[misc]
    assert p == Point(1.0, 2.0)
    assert len({p, Point(1.0, 2.0)}) == 1
    assert p.as_tuple() == (1.0, 2.0)
    assert tuple(p) == (1.0, 2.0)


@pytest.mark.parametrize("x,y", [(math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0)])
def test_point_rejects_non_finite(x: float, y: float) -> None:
    with pytest.raises(ValueError):
        Point(x, y)


def test_text_form() -> None:
    assert str(Point(100, 500)) == "(100.0, 500.0)"
    assert repr(Point(0.5, -2)) == "Point(0.5, -2.0)"


def test_draw_to_delegates_to_canvas() -> None:
    a, b = Point(0, 0), Point(1, 1)
    canvas = RecordingCanvas()
    a.draw_to(b, canvas)
    assert canvas.segments == [(a, b)]


def test_point_copies_and_pickles() -> None:
    p = Point(1, 2)
    assert copy.copy(p) == p
    assert copy.deepcopy(p) == p
    restored = pickle.loads(pickle.dumps(p))
    assert restored == p
    assert isinstance(restored, Point)
    with pytest.raises(AttributeError):
        restored.x = 3.0  # type: ignore[misc]


def test_tour_deepcopy_is_independent() -> None:
    tour = four_point_tour(Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3))
    clone = copy.deepcopy(tour)
    clone.insert_smallest(Point(2, -1))
    assert tour.size() == 4
    assert clone.size() == 5
    assert clone.points()[:1] == tour.points()[:1]
    assert pickle.loads(pickle.dumps(tour)).points() == tour.points()
