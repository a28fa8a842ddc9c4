"""Geometric queries over loaded point files."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from pointsets.loader import PointFile
from pointsets.point import Point
from utils.logger import Logger
from utils.settings import point_sets as POINTCFG

logger = Logger.get_logger("pointsets.analyzer")


@dataclass(frozen=True)
class PointPair:
    """Two points of one file and the distance between them."""

    first: Point
    second: Point
    distance: float
    source: str


@dataclass(frozen=True)
class PairExtremes:
    closest: PointPair
    farthest: PointPair


@dataclass(frozen=True)
class BoundingCube:
    """Axis-aligned box spanned by a point set."""

    minimum: Point
    maximum: Point

    def corners(self) -> list[Point]:
        """Return the 8 corners, min/max per axis with x varying slowest."""
        return [
            Point(x, y, z)
            for x, y, z in itertools.product(
                (self.minimum.x, self.maximum.x),
                (self.minimum.y, self.maximum.y),
                (self.minimum.z, self.maximum.z),
            )
        ]


def _row_distances(points: np.ndarray) -> Iterator[tuple[int, np.ndarray]]:
    """Yield ``(i, d)``, ``d[k]`` being the distance from row ``i`` to ``i + 1 + k``.

    One row at a time keeps memory linear in the number of points.
    """
    for i in range(len(points) - 1):
        yield i, np.linalg.norm(points[i + 1 :] - points[i], axis=1)


def closest_and_farthest(files: Sequence[PointFile]) -> PairExtremes | None:
    """
    Find the globally closest and farthest point pairs.

    Pairs are only formed within a file. Ties keep the first pair in scan
    order (file order, then ``i < j`` row-major).

    Returns:
        The extremes, or ``None`` if no file holds at least two points.
    """
    closest: PointPair | None = None
    farthest: PointPair | None = None
    min_dist = float("inf")
    max_dist = float("-inf")

    for pf in files:
        for i, dist in _row_distances(pf.as_array()):
            lo, hi = int(np.argmin(dist)), int(np.argmax(dist))
            if dist[lo] < min_dist:
                min_dist = float(dist[lo])
                closest = PointPair(
                    pf.points[i], pf.points[i + 1 + lo], min_dist, pf.name
                )
            if dist[hi] > max_dist:
                max_dist = float(dist[hi])
                farthest = PointPair(
                    pf.points[i], pf.points[i + 1 + hi], max_dist, pf.name
                )

    if closest is None or farthest is None:
        logger.warning("No file holds two or more points, no pair to report")
        return None
    return PairExtremes(closest=closest, farthest=farthest)


def bounding_cube(point_file: PointFile) -> BoundingCube | None:
    """Return the bounding box of ``point_file`` or ``None`` when it is empty."""
    arr = point_file.as_array()
    if len(arr) == 0:
        logger.warning(f"{point_file.name}: no points, bounding cube undefined")
        return None
    return BoundingCube(
        minimum=Point.from_sequence(arr.min(axis=0)),
        maximum=Point.from_sequence(arr.max(axis=0)),
    )


def points_in_sphere(
    point_file: PointFile, center: Point, diameter: float
) -> list[Point]:
    """Return points within ``diameter / 2`` of ``center``, boundary included.

    Points keep their file order.
    """
    if diameter < 0:
        raise ValueError(f"Sphere diameter must be non-negative, got {diameter}")
    arr = point_file.as_array()
    if len(arr) == 0:
        return []
    radius = diameter / 2.0
    dist = np.linalg.norm(arr - np.array(center.as_tuple()), axis=1)
    return [point_file.points[k] for k in np.flatnonzero(dist <= radius)]


def average_distance(point_file: PointFile) -> float:
    """Mean distance over all unordered pairs; 0.0 for fewer than two points."""
    arr = point_file.as_array()
    if len(arr) < 2:
        return 0.0
    n = len(arr)
    total = sum(float(dist.sum()) for _, dist in _row_distances(arr))
    return total / (n * (n - 1) // 2)


def format_point(point: Point, precision: int = POINTCFG.precision) -> str:
    coords = ", ".join(f"{v:.{precision}f}" for v in point.as_tuple())
    return f"({coords})"
