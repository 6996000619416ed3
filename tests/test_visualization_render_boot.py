import math
import os
import time

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # type: ignore  # noqa: E402
import pytest  # noqa: E402

from tour_insertion import Point, build_tour  # noqa: E402
from tour_insertion.visualization.adapters import build_insertion_events, build_tour_events  # noqa: E402
from tour_insertion.visualization.render import PygameRenderer  # noqa: E402
from tests.test_utils import DEMO_POINTS, gen_points, rng  # noqa: E402


@pytest.mark.parametrize("heuristic", ["nearest", "smallest"])
def test_renderer_replays_tour_order(heuristic: str) -> None:
    points = [Point(x, y) for x, y in DEMO_POINTS]
    events = build_insertion_events(points, heuristic)

    renderer = PygameRenderer(width=640, height=360, fps=30)
    renderer.load_events(events)
    assert len(renderer.scene.pending) == len(points)
    renderer.process_all_events()

    assert renderer.cursor == renderer.total_events
    assert renderer.completed
    assert not renderer.scene.pending
    tour = build_tour(points, heuristic)
    assert renderer.scene.tour_coords() == [p.as_tuple() for p in tour]
    assert math.isclose(renderer.current_tour_length(), tour.length())
    assert renderer.reported_size == tour.size()
    assert len(renderer.scene.drawn) == tour.size()


def test_renderer_fixed_tour(square) -> None:
    renderer = PygameRenderer(width=400, height=400, fps=30)
    renderer.load_events(build_tour_events(square))
    renderer.process_all_events()
    assert renderer.scene.tour_coords() == [p.as_tuple() for p in square]
    assert math.isclose(renderer.current_tour_length(), 1600.0)


def test_step_once_advances_single_event(square) -> None:
    renderer = PygameRenderer(width=400, height=400, fps=30)
    renderer.load_events(build_tour_events(square))
    cursor = renderer.cursor
    renderer.step_once()
    assert renderer.cursor == cursor + 1
    assert len(renderer.scene.order) == 1


def test_run_without_events_raises() -> None:
    renderer = PygameRenderer(width=200, height=200, fps=30)
    with pytest.raises(RuntimeError):
        renderer.run()


@pytest.mark.slow
def test_renderer_perf_budget() -> None:
    events = build_insertion_events(gen_points(rng(3), 150), "smallest")
    assert len(events) >= 450

    renderer = PygameRenderer(width=640, height=360, fps=30)
    start = time.perf_counter()
    renderer.load_events(events)
    renderer.process_all_events()
    elapsed = time.perf_counter() - start

    assert elapsed < 2.0

    pygame.quit()
