"""
Planar point primitive shared by the tour and the renderers.
"""

from __future__ import annotations
import math
from typing import Any, Tuple

VERBOSE: bool = False
EPS: float = 1e-9


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


class Point:
    """Immutable point in the plane."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float) -> None:
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError("Point coordinates must be finite")
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Point is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance between this point and ``other``."""
        return math.hypot(self._x - other._x, self._y - other._y)

    def draw_to(self, other: "Point", canvas) -> None:
        """Ask ``canvas`` to draw the segment from this point to ``other``."""
        canvas.draw_segment(self, other)

    def as_tuple(self) -> Tuple[float, float]:
        return self._x, self._y

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __reduce__(self):
        # rebuild through __init__; __setattr__ refuses slot restoration
        return (Point, (self._x, self._y))

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"

    def __str__(self) -> str:
        return f"({self._x!r}, {self._y!r})"
