"""3D point value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """Immutable 3D coordinate."""

    x: float
    y: float
    z: float

    def distance_to(self, other: Point) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point:
        """Build a point from the first three items of ``values``."""
        return cls(float(values[0]), float(values[1]), float(values[2]))
