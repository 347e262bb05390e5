"""Core toolpath data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Sequence

import numpy as np


class Plane(Enum):
    """Arc plane as (first, second, normal) axis indices, 0=X 1=Y 2=Z.

    Arc angles are measured from the first axis toward the second, so
    G2/G3 turn clockwise/counter-clockwise when viewed down the normal.
    """
    XY = (0, 1, 2)   # G17
    ZX = (2, 0, 1)   # G18
    YZ = (1, 2, 0)   # G19

    @property
    def axes(self) -> tuple[int, int]:
        return self.value[0], self.value[1]

    @property
    def normal_axis(self) -> int:
        return self.value[2]


class Position(NamedTuple):
    """An absolute (x, y, z) location in document units."""
    x: float
    y: float
    z: float

    def distance_to(self, other: Sequence[float]) -> float:
        dx = other[0] - self.x
        dy = other[1] - self.y
        dz = other[2] - self.z
        return (dx * dx + dy * dy + dz * dz) ** 0.5


ORIGIN = Position(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Waypoint:
    """A single emitted point of the flat point stream."""
    position: Position
    is_travel: bool = False   # True for G0 rapids


@dataclass(frozen=True)
class PathSegment:
    """A maximal run of points that share one travel/cut classification."""
    points: tuple[Position, ...] = ()
    is_travel: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return len(self.points) == 0


@dataclass(frozen=True)
class ParsedDocument:
    """Result of interpreting one G-code program.

    ``points``, ``travel_flags`` and ``z_values`` are parallel streams with
    one entry per emitted waypoint.  ``segments`` groups the same geometry
    into drawable polylines that alternate between travel and cutting.
    """

    points: tuple[Position, ...] = ()
    travel_flags: tuple[bool, ...] = ()
    z_values: tuple[float, ...] = ()
    segments: tuple[PathSegment, ...] = field(default_factory=tuple)

    @property
    def total_points(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0 and len(self.segments) == 0

    @property
    def waypoints(self) -> list[Waypoint]:
        return [Waypoint(p, t) for p, t in zip(self.points, self.travel_flags)]

    @property
    def bounds(self) -> Optional[np.ndarray]:
        """2x3 array ``[[xmin, ymin, zmin], [xmax, ymax, zmax]]``, or None."""
        pts = [p for seg in self.segments for p in seg.points] or list(self.points)
        if not pts:
            return None
        arr = np.asarray(pts, dtype=np.float64)
        return np.vstack([arr.min(axis=0), arr.max(axis=0)])

    def as_array(self) -> np.ndarray:
        """Flat point stream as an (N, 3) float array."""
        if not self.points:
            return np.zeros((0, 3), dtype=np.float64)
        return np.asarray(self.points, dtype=np.float64)

    def travel_segments(self) -> list[PathSegment]:
        return [s for s in self.segments if s.is_travel]

    def cutting_segments(self) -> list[PathSegment]:
        return [s for s in self.segments if not s.is_travel]

    def normalized_z_levels(self) -> dict[float, float]:
        return normalize_z_levels(self.z_values)


def normalize_z_levels(z_values: Sequence[float]) -> dict[float, float]:
    """Map each distinct Z value to its position in the [0, 1] Z range.

    A single distinct value, or a range narrower than 1e-4, maps every
    value to 0.5.
    """
    levels = sorted(set(z_values))
    if not levels:
        return {}
    if len(levels) == 1:
        return {levels[0]: 0.5}

    z_min, z_max = levels[0], levels[-1]
    z_range = z_max - z_min
    if z_range < 1e-4:
        return {z: 0.5 for z in levels}
    return {z: (z - z_min) / z_range for z in levels}
