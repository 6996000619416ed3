"""Tour construction drivers: one insertion per input point, in input order."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import tour_insertion.algs.geometry as geometry
from tour_insertion.algs.geometry import Point, log
from tour_insertion.algs.tour import Tour

__all__ = ["HEURISTICS", "build_tour", "nearest_insertion", "smallest_insertion"]

HEURISTICS: Tuple[str, ...] = ("nearest", "smallest")


def build_tour(
    points: Iterable[Point],
    heuristic: str = "smallest",
    *,
    tour: Optional[Tour] = None,
) -> Tour:
    if heuristic not in HEURISTICS:
        raise ValueError(f"Unknown heuristic {heuristic!r}; expected one of {HEURISTICS}")

    result = Tour() if tour is None else tour
    insert = result.insert_nearest if heuristic == "nearest" else result.insert_smallest
    for p in points:
        insert(p)
    if geometry.VERBOSE:
        log(f"{heuristic}: built tour of {result.size()} points, length {result.length():.6f}")
    return result


def nearest_insertion(points: Iterable[Point]) -> Tour:
    return build_tour(points, "nearest")


def smallest_insertion(points: Iterable[Point]) -> Tour:
    return build_tour(points, "smallest")
