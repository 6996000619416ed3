"""Greedy insertion heuristics for building tours point by point."""

from __future__ import annotations

from tour_insertion.algs.heuristics.insertion import (
    HEURISTICS,
    build_tour,
    nearest_insertion,
    smallest_insertion,
)

__all__ = [
    "HEURISTICS",
    "build_tour",
    "nearest_insertion",
    "smallest_insertion",
]
