"""Algorithm package entry points."""

from __future__ import annotations

import tour_insertion.algs.heuristics as heuristics
from tour_insertion.algs.geometry import Point
from tour_insertion.algs.heuristics import (
    HEURISTICS,
    build_tour,
    nearest_insertion,
    smallest_insertion,
)
from tour_insertion.algs.tour import Empty, NonEmpty, Tour, four_point_tour

__all__ = [
    "Point",
    "Tour",
    "Empty",
    "NonEmpty",
    "four_point_tour",
    "HEURISTICS",
    "build_tour",
    "nearest_insertion",
    "smallest_insertion",
    "heuristics",
]
