"""
Circular tour with the two greedy insertion heuristics.

Nodes live in an arena of parallel lists (``_points[i]`` and ``_next[i]``),
so a link is always an index into the arena. The tour is either ``Empty`` or
``NonEmpty(first)``; ``first`` is fixed by the first insertion and only ever
used as the traversal anchor.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import tour_insertion.algs.geometry as geometry
from tour_insertion.algs.geometry import Point, log

__all__ = ["Tour", "Empty", "NonEmpty", "four_point_tour"]


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class NonEmpty:
    first: int


TourState = Union[Empty, NonEmpty]


def _require_point(p: Any) -> Point:
    if not isinstance(p, Point):
        raise TypeError(f"expected a Point, got {type(p).__name__}")
    return p


class Tour:
    """Mutable closed tour of points."""

    def __init__(self) -> None:
        self._points: List[Point] = []
        self._next: List[int] = []
        self._state: TourState = Empty()

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Tour":
        """Link ``points`` into a cycle in the given order, skipping the heuristics."""
        tour = cls()
        pts = [_require_point(p) for p in points]
        if not pts:
            return tour
        tour._points = pts
        tour._next = [(i + 1) % len(pts) for i in range(len(pts))]
        tour._state = NonEmpty(0)
        return tour

    # ------------------------------------------------------------------ traversal
    @property
    def first(self) -> Optional[Point]:
        if isinstance(self._state, NonEmpty):
            return self._points[self._state.first]
        return None

    def _walk(self) -> Iterator[int]:
        """Yield node indices once around the cycle, starting at ``first``."""
        if isinstance(self._state, Empty):
            return
        start = self._state.first
        node = start
        while True:
            yield node
            node = self._next[node]
            if node == start:
                break

    def __iter__(self) -> Iterator[Point]:
        for node in self._walk():
            yield self._points[node]

    def points(self) -> List[Point]:
        return list(self)

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Consecutive point pairs, ending with the wraparound edge."""
        for node in self._walk():
            yield self._points[node], self._points[self._next[node]]

    # ------------------------------------------------------------------ queries
    def size(self) -> int:
        """Number of points in the tour."""
        total = 0
        for _ in self._walk():
            total += 1
        return total

    def __len__(self) -> int:
        return self.size()

    def length(self) -> float:
        """Closed-tour length, including the edge back to ``first``."""
        if isinstance(self._state, Empty):
            return 0.0
        total = 0.0
        for a, b in self.edges():
            total += a.distance_to(b)
        return total

    def __str__(self) -> str:
        return "".join(f"{p}\n" for p in self)

    def __repr__(self) -> str:
        return f"Tour(size={self.size()}, length={self.length():.6f})"

    def draw(self, canvas) -> None:
        """Draw every edge of the tour onto ``canvas``."""
        for a, b in self.edges():
            a.draw_to(b, canvas)

    def check_cycle(self) -> None:
        """Raise ``RuntimeError`` unless the arena forms exactly one cycle."""
        n = len(self._points)
        if len(self._next) != n:
            raise RuntimeError("point and link arenas differ in size")
        if isinstance(self._state, Empty):
            if n:
                raise RuntimeError("empty tour holds nodes")
            return
        start = self._state.first
        if not 0 <= start < n:
            raise RuntimeError(f"first index {start} out of range")
        seen = set()
        node = start
        for _ in range(n):
            nxt = self._next[node]
            if not 0 <= nxt < n:
                raise RuntimeError(f"node {node} links outside the arena ({nxt})")
            if node in seen:
                raise RuntimeError(f"node {node} revisited before closing the cycle")
            seen.add(node)
            node = nxt
        if node != start or len(seen) != n:
            raise RuntimeError("links do not form a single cycle over every node")

    # ------------------------------------------------------------------ insertion
    def _splice_after(self, node: int, p: Point) -> int:
        new = len(self._points)
        self._points.append(p)
        self._next.append(self._next[node])
        self._next[node] = new
        return new

    def _start(self, p: Point) -> None:
        self._points.append(p)
        self._next.append(0)
        self._state = NonEmpty(0)

    def insert_nearest(self, p: Point, debug: Optional[Dict[str, Any]] = None) -> None:
        """Insert ``p`` right after the closest point already in the tour."""
        p = _require_point(p)
        if isinstance(self._state, Empty):
            self._start(p)
            if debug is not None:
                debug.update(after=None, cost=0.0, scanned=0)
            if geometry.VERBOSE:
                log(f"nearest: {p} starts the tour")
            return

        d_min = math.inf
        near = -1
        near_pos = -1
        scanned = 0
        for pos, node in enumerate(self._walk()):
            scanned += 1
            d = self._points[node].distance_to(p)
            if d < d_min:
                d_min = d
                near = node
                near_pos = pos

        self._splice_after(near, p)
        if debug is not None:
            debug.update(after=near_pos, cost=d_min, scanned=scanned)
        if geometry.VERBOSE:
            log(f"nearest: {p} after {self._points[near]} (d={d_min:.6f})")

    def insert_smallest(self, p: Point, debug: Optional[Dict[str, Any]] = None) -> None:
        """Insert ``p`` into the edge whose replacement grows the tour the least."""
        p = _require_point(p)
        if isinstance(self._state, Empty):
            self._start(p)
            if debug is not None:
                debug.update(after=None, cost=0.0, scanned=0)
            if geometry.VERBOSE:
                log(f"smallest: {p} starts the tour")
            return

        current = self.length()
        len_min = math.inf
        near = -1
        near_pos = -1
        scanned = 0
        for pos, node in enumerate(self._walk()):
            scanned += 1
            a = self._points[node]
            b = self._points[self._next[node]]
            removed = a.distance_to(b)
            added = a.distance_to(p) + b.distance_to(p)
            total = current - removed + added
            if total < len_min:
                len_min = total
                near = node
                near_pos = pos

        self._splice_after(near, p)
        if debug is not None:
            debug.update(after=near_pos, cost=len_min, scanned=scanned)
        if geometry.VERBOSE:
            log(f"smallest: {p} after {self._points[near]} (len={len_min:.6f})")


def four_point_tour(a: Point, b: Point, c: Point, d: Point) -> Tour:
    """The 4-cycle a -> b -> c -> d -> a, for debugging and fixtures."""
    return Tour.from_points((a, b, c, d))
