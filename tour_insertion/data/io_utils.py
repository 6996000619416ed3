from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from tour_insertion.algs.geometry import Point
from tour_insertion.algs.tour import Tour


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _tokens(text: str) -> Iterable[Tuple[int, str]]:
    for lineno, line in enumerate(text.splitlines(), 1):
        body = line.split("#", 1)[0]
        for token in body.split():
            yield lineno, token


def _parse_float(lineno: int, token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"line {lineno}: expected a number, got {token!r}") from None


def parse_points(text: str) -> Tuple[float, float, List[Point]]:
    """Parse ``width height`` followed by ``x y`` pairs."""
    values = [(lineno, _parse_float(lineno, tok)) for lineno, tok in _tokens(text)]
    if len(values) < 2:
        raise ValueError("point file must start with canvas width and height")
    (_, width), (_, height) = values[0], values[1]
    if not (math.isfinite(width) and width > 0.0 and math.isfinite(height) and height > 0.0):
        raise ValueError("canvas width and height must be positive and finite")
    coords = values[2:]
    if len(coords) % 2:
        raise ValueError(f"line {coords[-1][0]}: dangling x coordinate without y")
    points = []
    for idx in range(0, len(coords), 2):
        lineno, x = coords[idx]
        _, y = coords[idx + 1]
        try:
            points.append(Point(x, y))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: {exc}") from None
    return width, height, points


def read_points(path: str | Path) -> Tuple[float, float, List[Point]]:
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_points(handle.read())


def write_points(path: str | Path, width: float, height: float, points: Sequence[Point]) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(f"{width!r} {height!r}\n")
        for p in points:
            handle.write(f"{p.x!r} {p.y!r}\n")


def tour_record(tour: Tour, heuristic: str) -> Dict[str, Any]:
    return {
        "heuristic": heuristic,
        "size": tour.size(),
        "length": tour.length(),
        "points": [[p.x, p.y] for p in tour],
    }


def write_tour_jsonl(path: str | Path, records: Sequence[Dict[str, Any]]) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, sort_keys=True, separators=(",", ":"), allow_nan=False))
            handle.write("\n")
