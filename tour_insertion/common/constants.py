from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Geometry tolerance: retain source of truth from the geometry module.
from tour_insertion.algs.geometry import EPS as _GEOM_EPS

EPS_GEOM: float = _GEOM_EPS
TOL_NUM: float = 1e-6
DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "data": 5150,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a numpy Generator, falling back to ``DEFAULT_SEED``."""
    return np.random.default_rng(DEFAULT_SEED if seed is None else seed)


__all__ = [
    "EPS_GEOM",
    "TOL_NUM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    "make_rng",
]
