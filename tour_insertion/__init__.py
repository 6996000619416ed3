# Core types
from .algs.geometry import Point, VERBOSE
from .algs.tour import Tour, four_point_tour

# Heuristic drivers
from .algs.heuristics import (
    HEURISTICS,
    build_tour,
    nearest_insertion,
    smallest_insertion,
)

# Constants
from .common.constants import (
    DEFAULT_SEED,
    EPS_GEOM,
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)

__all__ = [
    # geometry
    "Point",
    "VERBOSE",
    # tour
    "Tour",
    "four_point_tour",
    # heuristics
    "HEURISTICS",
    "build_tour",
    "nearest_insertion",
    "smallest_insertion",
    # constants
    "EPS_GEOM",
    "TOL_NUM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
