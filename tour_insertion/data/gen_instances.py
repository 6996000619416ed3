"""Synthetic point clouds for tour construction.

Sampling goes through a ``numpy.random.Generator`` so the same seed always
reproduces the same cloud.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np

from tour_insertion.algs.geometry import Point


@dataclass(frozen=True)
class PointCloudConfig:
    """Canvas extent and number of points to draw."""

    width: float = 600.0
    height: float = 600.0
    count: int = 100

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width) and self.width > 0.0):
            raise ValueError("width must be positive and finite")
        if not (math.isfinite(self.height) and self.height > 0.0):
            raise ValueError("height must be positive and finite")
        if self.count < 0:
            raise ValueError("count must be non-negative")


def draw_points(config: PointCloudConfig, rng: np.random.Generator) -> List[Point]:
    xs = rng.uniform(0.0, config.width, size=config.count)
    ys = rng.uniform(0.0, config.height, size=config.count)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
