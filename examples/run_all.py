#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for the two insertion heuristics.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints:

  1. The 4-point square debug tour (size, length, points)
  2. A 10-point tour built with smallest-increase insertion
  3. The same points with nearest-neighbour insertion
"""

from __future__ import annotations

import time
from typing import List, Tuple

import tour_insertion.algs.geometry as geometry
from tour_insertion import Point, Tour, four_point_tour

# Activate verbose internal logging so the user can see each splice.
geometry.VERBOSE = True

SEP = "=" * 80

POINTS: List[Tuple[float, float]] = [
    (110.0, 225.0),
    (283.0, 379.0),
    (306.0, 360.0),
    (343.0, 110.0),
    (552.0, 199.0),
    (490.0, 285.0),
    (397.0, 566.0),
    (325.0, 554.0),
    (157.0, 443.0),
    (161.0, 280.0),
]


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def run_square_example() -> None:
    _hdr("Square debug tour a -> b -> c -> d -> a")
    a = Point(100.0, 100.0)
    b = Point(500.0, 100.0)
    c = Point(500.0, 500.0)
    d = Point(100.0, 500.0)
    square = four_point_tour(a, b, c, d)
    print(f"Number of points = {square.size()}")
    print(f"Tour length = {square.length()}")
    print(square)


def _run_heuristic(name: str) -> None:
    _hdr(f"{name.capitalize()} insertion over {len(POINTS)} points")
    tour = Tour()
    insert = tour.insert_smallest if name == "smallest" else tour.insert_nearest
    t0 = time.perf_counter()
    for x, y in POINTS:
        insert(Point(x, y))
    dt = time.perf_counter() - t0
    print(f"Number of points = {tour.size()}")
    print(f"Tour length = {tour.length()}")
    print(f"Elapsed: {dt:.6f} s")


def main() -> None:
    run_square_example()
    _run_heuristic("smallest")
    _run_heuristic("nearest")


if __name__ == "__main__":
    main()
