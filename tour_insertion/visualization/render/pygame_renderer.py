"""Pygame renderer that consumes tour visualization events."""

from __future__ import annotations

from typing import Dict, List, Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from tour_insertion.visualization.render.base_scene import (
    INSERT_HIGHLIGHT_COLOR,
    BaseScene,
    InsertHighlight,
    closed_path_length,
)


class PygameRenderer:
    """Render tour-construction event streams."""

    SPEED_LEVELS = [0.5, 1.0, 2.0, 4.0, 8.0]
    EVENT_INTERVAL = 0.25  # seconds per event at speed multiplier 1.0

    def __init__(self, width: int = 800, height: int = 800, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.cursor = 0
        self.total_events = 0
        self.autoplay = True
        self.speed_index = 1
        self.autoplay_accumulator = 0.0
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.algorithm_name = "unknown"
        self.last_cost: Optional[float] = None
        self.reported_size: Optional[int] = None
        self.reported_length: Optional[float] = None
        self.highlights: List[InsertHighlight] = []
        self.scene_initialized = False
        self.completed = False
        self.last_event_type: Optional[str] = None

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        self.events = list(events)
        self.total_events = len(self.events)
        self.cursor = 0
        self.autoplay_accumulator = 0.0
        self.scene.reset()
        self.scene_initialized = False
        self.algorithm_name = "unknown"
        self.last_cost = None
        self.reported_size = None
        self.reported_length = None
        self.highlights.clear()
        self.completed = False
        self.last_event_type = None
        if self.events:
            self._bootstrap_scene()

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        if not self.scene_initialized:
            self._bootstrap_scene()

        pygame.display.init()
        pygame.display.set_caption("Tour Insertion Visualization")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()
            self._update_highlights(dt)

            if self.autoplay and not self.completed:
                self._autoplay_advance(dt)

            self._draw_frame()

        pygame.display.quit()

    def process_all_events(self) -> None:
        """Advance through all events without opening a window (testing helper)."""
        while self.cursor < self.total_events:
            self._advance_event()

    def step_once(self) -> None:
        """Advance a single event."""
        self._advance_event()

    def current_tour_length(self) -> float:
        """Closed length of the tour as replayed so far."""
        return closed_path_length(self.scene.tour_coords())

    # ------------------------------------------------------------------ internals
    def _bootstrap_scene(self) -> None:
        """Consume initial scene setup events (scene + pending points + algo info)."""
        while self.cursor < self.total_events:
            event_type = self.events[self.cursor].get("type")
            if event_type in {"set_scene", "add_point", "algo_info"}:
                self._advance_event()
                self.scene_initialized = True
                continue
            break
        if not self.scene_initialized and self.cursor < self.total_events:
            self._advance_event()
            self.scene_initialized = True

    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_SPACE:
                    self.autoplay = not self.autoplay
                elif py_event.key == pygame.K_RIGHT:
                    self.autoplay = False
                    self._advance_event()
                elif py_event.key == pygame.K_LEFT:
                    self.autoplay = False
                    self._rewind_event()
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)
                elif py_event.key == pygame.K_r:
                    self._reset_playback()

    def _reset_playback(self) -> None:
        current_autoplay = self.autoplay
        self.load_events(self.events)
        self.autoplay = current_autoplay

    def _autoplay_advance(self, dt: float) -> None:
        interval = self.EVENT_INTERVAL / max(0.1, self.SPEED_LEVELS[self.speed_index])
        self.autoplay_accumulator += dt
        while self.autoplay_accumulator >= interval and self.cursor < self.total_events:
            self.autoplay_accumulator -= interval
            self._advance_event()

    def _advance_event(self) -> None:
        if self.cursor >= self.total_events:
            self.completed = True
            return
        event = self.events[self.cursor]
        self.cursor += 1
        self.last_event_type = event.get("type")
        self._apply_event(event)
        if self.cursor >= self.total_events:
            self.completed = True

    def _rewind_event(self) -> None:
        if self.cursor == 0:
            return
        target = self.cursor - 1
        events_copy = list(self.events)
        self.load_events(events_copy)
        while self.cursor < target:
            self._advance_event()

    # ------------------------------------------------------------------ event application
    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.scene.set_scene(
                x_min=float(event.get("x_min", 0.0)),
                y_min=float(event.get("y_min", 0.0)),
                x_max=float(event.get("x_max", 1.0)),
                y_max=float(event.get("y_max", 1.0)),
            )
            self.scene_initialized = True
        elif event_type == "algo_info":
            self.algorithm_name = str(event.get("name", "unknown"))
        elif event_type == "add_point":
            self.scene.add_point(int(event.get("id", 0)), float(event.get("x", 0.0)), float(event.get("y", 0.0)))
        elif event_type == "insert_point":
            point_id = int(event.get("id", 0))
            after = event.get("after")
            self.scene.insert_point(
                point_id,
                float(event.get("x", 0.0)),
                float(event.get("y", 0.0)),
                None if after is None else int(after),
            )
            self.last_cost = float(event.get("cost", 0.0))
            self.highlights.append(InsertHighlight(point_id=point_id, color=INSERT_HIGHLIGHT_COLOR, ttl=0.6))
        elif event_type == "draw_segment":
            self.scene.add_drawn_segment(
                (float(event.get("x1", 0.0)), float(event.get("y1", 0.0))),
                (float(event.get("x2", 0.0)), float(event.get("y2", 0.0))),
            )
        elif event_type == "tour_info":
            self.reported_size = int(event.get("size", 0))
            self.reported_length = float(event.get("length", 0.0))
        elif event_type == "done":
            self.completed = True
        else:
            print(f"[Renderer] Unhandled event type: {event_type}")

    def _update_highlights(self, dt: float) -> None:
        for item in self.highlights:
            item.ttl -= dt
        self.highlights = [item for item in self.highlights if item.ttl > 0.0]

    # ------------------------------------------------------------------ drawing
    def _draw_frame(self) -> None:
        assert self.screen is not None
        self.scene.draw_background(self.screen)
        self.scene.draw_pending(self.screen)
        self.scene.draw_tour(self.screen)
        self.scene.draw_segments(self.screen)
        self.scene.draw_highlights(self.screen, self.highlights)
        self._draw_hud(self.screen)
        pygame.display.flip()

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        lines = [
            f"Heuristic: {self.algorithm_name}",
            f"Event: {self.cursor}/{self.total_events}",
            f"Autoplay: {'on' if self.autoplay else 'off'} x{self.SPEED_LEVELS[self.speed_index]:.1f}",
            f"Points: {len(self.scene.order)} length={self.current_tour_length():.2f}",
        ]
        if self.last_cost is not None:
            lines.append(f"Last cost: {self.last_cost:.2f}")
        if self.reported_length is not None:
            lines.append(f"Final: size={self.reported_size} length={self.reported_length:.4f}")
        if self.last_event_type:
            lines.append(f"Last: {self.last_event_type}")

        x = 10
        y = 10
        for line in lines:
            text_surface = self.font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameRenderer"]
