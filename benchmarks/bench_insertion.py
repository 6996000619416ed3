from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import Dict, List, Sequence

try:
    from tour_insertion.algs.heuristics import HEURISTICS, build_tour
    from tour_insertion.common.constants import RNG_SEEDS, make_rng
    from tour_insertion.data.gen_instances import PointCloudConfig, draw_points
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from tour_insertion.algs.heuristics import HEURISTICS, build_tour
    from tour_insertion.common.constants import RNG_SEEDS, make_rng
    from tour_insertion.data.gen_instances import PointCloudConfig, draw_points


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def run_benchmark(args: argparse.Namespace) -> None:
    rng = make_rng(args.seed)
    config = PointCloudConfig(width=args.size, height=args.size, count=args.points)

    durations: Dict[str, List[float]] = {name: [] for name in HEURISTICS}
    lengths: Dict[str, List[float]] = {name: [] for name in HEURISTICS}

    for iteration in range(args.warmup + args.n):
        points = draw_points(config, rng)
        for name in HEURISTICS:
            start = time.perf_counter()
            tour = build_tour(points, name)
            elapsed = time.perf_counter() - start
            tour.check_cycle()
            if iteration >= args.warmup:
                durations[name].append(elapsed)
                lengths[name].append(tour.length())

    for name in HEURISTICS:
        times = sorted(durations[name])
        lens = sorted(lengths[name])
        mean = statistics.fmean(times) if times else float("nan")
        median = statistics.median(times) if times else float("nan")
        print(
            f"{name}: mean={mean:.6f},median={median:.6f},p90={percentile(times, 0.9):.6f},"
            f"length_mean={statistics.fmean(lens) if lens else float('nan'):.3f},"
            f"length_p90={percentile(lens, 0.9):.3f}"
        )

    if args.n:
        wins = sum(
            1 for s, n in zip(lengths["smallest"], lengths["nearest"]) if s < n
        )
        print(f"smallest_shorter={wins}/{args.n}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the two insertion heuristics")
    parser.add_argument("--n", type=int, default=20, help="Measured instances")
    parser.add_argument("--warmup", type=int, default=2)
    parser.add_argument("--points", type=int, default=500, help="Points per instance")
    parser.add_argument("--size", type=float, default=600.0, help="Canvas side length")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"])
    run_benchmark(parser.parse_args())


if __name__ == "__main__":
    main()
