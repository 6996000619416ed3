"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

Coord = Tuple[float, float]

BACKGROUND_COLOR = (18, 18, 24)
PENDING_POINT_COLOR = (110, 110, 130)
TOUR_POINT_COLOR = (230, 230, 230)
TOUR_EDGE_COLOR = (90, 200, 255)
DRAWN_EDGE_COLOR = (70, 200, 110)
INSERT_HIGHLIGHT_COLOR = (255, 215, 0)

MARGIN_RATIO = 0.05


@dataclass
class PointState:
    point_id: int
    x: float
    y: float


@dataclass
class InsertHighlight:
    point_id: int
    color: Tuple[int, int, int]
    ttl: float


class BaseScene:
    """Coordinate transforms and basic draw helpers for the pygame renderer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.x_min = 0.0
        self.y_min = 0.0
        self.x_max = 1.0
        self.y_max = 1.0
        self.margin = int(min(width, height) * MARGIN_RATIO)
        self.scale = 1.0
        self.pending: Dict[int, PointState] = {}
        self.order: List[PointState] = []
        self.drawn: List[Tuple[Coord, Coord]] = []

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, x_min: float, y_min: float, x_max: float, y_max: float) -> None:
        if x_min >= x_max:
            x_max = x_min + 1.0
        if y_min >= y_max:
            y_max = y_min + 1.0
        self.x_min, self.y_min, self.x_max, self.y_max = x_min, y_min, x_max, y_max
        usable_w = self.width - 2 * self.margin
        usable_h = self.height - 2 * self.margin
        # uniform scale keeps distances proportional on screen
        self.scale = min(usable_w / (x_max - x_min), usable_h / (y_max - y_min))

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = self.margin + int((x - self.x_min) * self.scale)
        py = self.height - self.margin - int((y - self.y_min) * self.scale)
        px = max(0, min(self.width - 1, px))
        py = max(0, min(self.height - 1, py))
        return px, py

    # ------------------------------------------------------------------ scene content
    def add_point(self, point_id: int, x: float, y: float) -> None:
        self.pending[point_id] = PointState(point_id=point_id, x=float(x), y=float(y))

    def insert_point(self, point_id: int, x: float, y: float, after: Optional[int]) -> None:
        """Mirror a splice: the point lands right after traversal position ``after``."""
        state = self.pending.pop(point_id, None) or PointState(point_id, float(x), float(y))
        if after is None or not self.order:
            self.order.append(state)
        else:
            self.order.insert(int(after) + 1, state)

    def add_drawn_segment(self, a: Coord, b: Coord) -> None:
        self.drawn.append((a, b))

    def reset(self) -> None:
        self.pending.clear()
        self.order.clear()
        self.drawn.clear()

    def tour_coords(self) -> List[Coord]:
        return [(s.x, s.y) for s in self.order]

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)

    def draw_pending(self, surface: "pygame.Surface") -> None:
        for state in self.pending.values():
            pygame.draw.circle(surface, PENDING_POINT_COLOR, self.world_to_screen(state.x, state.y), 3)

    def draw_tour(self, surface: "pygame.Surface") -> None:
        screen_pts = [self.world_to_screen(x, y) for x, y in self.tour_coords()]
        if len(screen_pts) >= 2:
            pygame.draw.lines(surface, TOUR_EDGE_COLOR, True, screen_pts, 1)
        for sp in screen_pts:
            pygame.draw.circle(surface, TOUR_POINT_COLOR, sp, 4)

    def draw_segments(self, surface: "pygame.Surface") -> None:
        for a, b in self.drawn:
            pygame.draw.line(surface, DRAWN_EDGE_COLOR, self.world_to_screen(*a), self.world_to_screen(*b), 2)

    def draw_highlights(
        self,
        surface: "pygame.Surface",
        highlights: Iterable[InsertHighlight],
    ) -> None:
        by_id = {s.point_id: s for s in self.order}
        for highlight in highlights:
            state = by_id.get(highlight.point_id)
            if state is None:
                continue
            pygame.draw.circle(surface, highlight.color, self.world_to_screen(state.x, state.y), 8, 2)


def closed_path_length(coords: Sequence[Coord]) -> float:
    """Length of the closed polyline through ``coords``."""
    if len(coords) < 2:
        return 0.0
    total = 0.0
    for idx, (x1, y1) in enumerate(coords):
        x2, y2 = coords[(idx + 1) % len(coords)]
        total += ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
    return total


__all__ = [
    "BaseScene",
    "PointState",
    "InsertHighlight",
    "closed_path_length",
    "BACKGROUND_COLOR",
    "PENDING_POINT_COLOR",
    "TOUR_POINT_COLOR",
    "TOUR_EDGE_COLOR",
    "DRAWN_EDGE_COLOR",
    "INSERT_HIGHLIGHT_COLOR",
]
