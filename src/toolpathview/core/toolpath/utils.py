"""Geometry helper utilities shared across the toolpath modules."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from shapely.geometry import LineString

# Edges shorter than this carry no usable direction
MIN_EDGE_LENGTH = 1e-4


def xy_array(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Return the XY projection of *points* as an (N, 2) float array."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)[:, :2]


def turn_cosines(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Cosine of the XY turn at every interior vertex of a polyline.

    Element ``k`` belongs to vertex ``k + 1``.  It is the dot product of the
    unit incoming and outgoing edge vectors: 1.0 means straight ahead,
    values near -1.0 mean a reversal.  Vertices next to a degenerate edge
    get NaN.
    """
    xy = xy_array(points)
    if len(xy) < 3:
        return np.zeros(0, dtype=np.float64)

    edges = np.diff(xy, axis=0)
    lengths = np.hypot(edges[:, 0], edges[:, 1])
    incoming, outgoing = edges[:-1], edges[1:]
    len_in, len_out = lengths[:-1], lengths[1:]

    valid = (len_in > MIN_EDGE_LENGTH) & (len_out > MIN_EDGE_LENGTH)
    cos = np.full(len(incoming), np.nan)
    dots = np.einsum("ij,ij->i", incoming[valid], outgoing[valid])
    cos[valid] = np.clip(dots / (len_in[valid] * len_out[valid]), -1.0, 1.0)
    return cos


def count_sharp_corners(
    points: Sequence[Sequence[float]],
    min_angle: float = math.pi / 4,
) -> int:
    """Number of interior vertices that turn by more than *min_angle*."""
    cos = turn_cosines(points)
    cos = cos[~np.isnan(cos)]
    return int(np.count_nonzero(np.arccos(cos) > min_angle))


def footprint(points: Sequence[Sequence[float]]) -> tuple[float, float, float]:
    """Return ``(width, height, perimeter)`` of a polyline's XY projection.

    Width and height are those of the axis-aligned bounding box; the
    perimeter is the open polyline length.
    """
    xy = xy_array(points)
    if len(xy) < 2:
        return 0.0, 0.0, 0.0

    line = LineString(xy)
    minx, miny, maxx, maxy = line.bounds
    return maxx - minx, maxy - miny, line.length


def shape_complexity(area: float, perimeter: float) -> float:
    """Isoperimetric ratio ``perimeter**2 / (4*pi*area)``.

    A circle scores 1.0; elongated or jagged outlines score higher.  A
    zero-area outline with any length is infinitely complex.
    """
    if area <= 0.0:
        return math.inf if perimeter > 0.0 else 0.0
    return (perimeter * perimeter) / (4.0 * math.pi * area)
