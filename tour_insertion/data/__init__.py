"""Point-file I/O and synthetic point clouds."""

from tour_insertion.data.gen_instances import PointCloudConfig, draw_points
from tour_insertion.data.io_utils import (
    read_points,
    tour_record,
    write_points,
    write_tour_jsonl,
)

__all__ = [
    "PointCloudConfig",
    "draw_points",
    "read_points",
    "write_points",
    "tour_record",
    "write_tour_jsonl",
]
