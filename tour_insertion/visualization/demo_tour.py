from __future__ import annotations

import argparse
import json
from typing import Iterable, List

from tour_insertion.algs.geometry import Point
from tour_insertion.algs.heuristics import HEURISTICS, build_tour
from tour_insertion.common.constants import DEFAULT_SEED, make_rng
from tour_insertion.data.gen_instances import PointCloudConfig, draw_points
from tour_insertion.data.io_utils import read_points
from tour_insertion.visualization.adapters import build_insertion_events

PRESETS = {
    "square": [(100.0, 100.0), (500.0, 100.0), (500.0, 500.0), (100.0, 500.0)],
    "ten": [
        (110.0, 225.0),
        (283.0, 379.0),
        (306.0, 360.0),
        (343.0, 110.0),
        (552.0, 199.0),
        (490.0, 285.0),
        (397.0, 566.0),
        (325.0, 554.0),
        (157.0, 443.0),
        (161.0, 280.0),
    ],
}


def parse_points(point_string: str) -> List[Point]:
    data = json.loads(point_string)
    points = []
    for entry in data:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError("points must be [[x, y], ...]")
        points.append(Point(float(entry[0]), float(entry[1])))
    return points


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Greedy tour insertion visualization demo")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="ten")
    parser.add_argument("--points", type=str, help="JSON list of [x, y] pairs")
    parser.add_argument("--file", type=str, help="Point file: width height, then x y pairs")
    parser.add_argument("--random", type=int, metavar="N", help="Draw N uniform random points")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for --random")
    parser.add_argument("--heuristic", choices=HEURISTICS, default="smallest")
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    parser.add_argument("--headless", action="store_true", help="Print the result instead of opening a window")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.points:
        points = parse_points(args.points)
    elif args.file:
        _, _, points = read_points(args.file)
    elif args.random is not None:
        points = draw_points(PointCloudConfig(count=args.random), make_rng(args.seed))
    else:
        points = [Point(x, y) for x, y in PRESETS[args.preset]]

    if args.headless:
        tour = build_tour(points, args.heuristic)
        print(f"Heuristic       : {args.heuristic}")
        print(f"Number of points: {tour.size()}")
        print(f"Tour length     : {tour.length():.4f}")
        return

    from tour_insertion.visualization.render import PygameRenderer

    events = build_insertion_events(points, args.heuristic)
    renderer = PygameRenderer()
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
