"""Read validated point files into memory."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import numpy as np

from pointsets.header import FileHeader, is_header_line, parse_header
from pointsets.point import Point
from utils.error_tracker import PointCountMismatchError, PointFileOpenError
from utils.logger import Logger

logger = Logger.get_logger("pointsets.loader")


@dataclass(frozen=True)
class PointFile:
    """A suitable point file: header plus exactly the declared points."""

    path: Path
    header: FileHeader
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) != self.header.declared_points:
            raise PointCountMismatchError(
                self.header.declared_points, len(self.points)
            )

    @property
    def name(self) -> str:
        return Path(self.path).name

    def as_array(self) -> np.ndarray:
        """Return points as an ``(n, 3)`` float64 array."""
        if not self.points:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([p.as_tuple() for p in self.points], dtype=np.float64)


def parse_point_line(line: str) -> Point | None:
    """Return the point on ``line`` or ``None`` if it is malformed.

    At least three finite numeric tokens are required. Extra tokens (colour
    channels) must be numeric too and are dropped. ``nan`` and ``inf`` are
    rejected.
    """
    tokens = line.split()
    if len(tokens) < 3:
        return None
    try:
        values = [float(tok) for tok in tokens]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    return Point.from_sequence(values)


def parse_point_file(lines: Iterable[str], path: str | Path = "<memory>") -> PointFile:
    """
    Validate the header and parse the body of a point file.

    Args:
        lines: All lines of the file, terminators optional.
        path: Source path recorded on the result.

    Returns:
        A :class:`PointFile` holding every parsed point.

    Raises:
        HeaderValidationError: if the header is rejected.
        PointCountMismatchError: if the parsed count differs from POINTS.
    """
    it = iter(lines)
    header = parse_header(it)
    points: list[Point] = []
    for lineno, raw in enumerate(it, start=1):
        line = raw.strip()
        if not line:
            continue
        if is_header_line(line):
            logger.debug(f"{path}: skipping header remnant in body line {lineno}")
            continue
        point = parse_point_line(line)
        if point is None:
            logger.debug(f"{path}: skipping malformed body line {lineno}")
            continue
        points.append(point)

    if len(points) != header.declared_points:
        raise PointCountMismatchError(header.declared_points, len(points))
    return PointFile(path=Path(path), header=header, points=tuple(points))


def load_point_file(path: str | Path) -> PointFile:
    """Open ``path`` and parse it with :func:`parse_point_file`."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise PointFileOpenError(f"Error opening file: {path.name} ({exc})") from exc
    point_file = parse_point_file(lines, path)
    logger.debug(f"Loaded {len(point_file.points)} points from {path}")
    return point_file
