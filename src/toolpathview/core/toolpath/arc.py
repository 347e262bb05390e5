"""Circular interpolation (G2/G3) tessellation.

Algorithm
---------
1. Resolve the arc center in the active plane, either from the I/J/K
   offsets (relative to the start point) or from a signed R word.
2. Measure start and end angles around the center and normalize the end
   angle so the sweep runs in the commanded direction.  A zero sweep with
   coincident endpoints is a full circle; with distinct endpoints it is a
   straight line.
3. Pick a target arc length per segment from the radius (small radii get
   finer steps), scale by the detail multiplier and clamp the count.
4. Emit points around the arc and snap the last one onto the exact end
   point so consecutive moves stay connected.

Any arc that cannot be resolved (no center data, near-zero radius)
degrades to a straight line from start to end.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .base import Plane, Position

# Radii below this are treated as a straight line
MIN_RADIUS = 1e-4
# Sweeps below this (radians) are either a full circle or a straight line
ZERO_SWEEP = 1e-4
# Final point must land within this distance of the commanded end point
END_TOLERANCE = 1e-3
# Arcs tighter than this keep every tessellated point
SMALL_RADIUS = 3.0

# (radius upper bound, arc length per segment) for small radii
_RADIUS_TIERS = (
    (1.0, 0.005),
    (3.0, 0.01),
    (10.0, 0.03),
)

_TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class ArcSpec:
    """Geometry of one G2/G3 move."""

    start: Position
    end: Position
    clockwise: bool
    plane: Plane = Plane.XY
    offsets: tuple[Optional[float], Optional[float], Optional[float]] = (None, None, None)
    radius: Optional[float] = None   # signed R word
    detail: float = 1.0

    @property
    def has_offsets(self) -> bool:
        """True when either in-plane offset (of I, J, K) was given."""
        a, b = self.plane.axes
        return self.offsets[a] is not None or self.offsets[b] is not None

    @property
    def has_center_offset(self) -> bool:
        """True when an in-plane offset moves the center off the start point.

        ``I0 J0`` counts as given for :attr:`has_offsets` but leaves the
        center on the start point, so it describes no circle.
        """
        a, b = self.plane.axes
        return any(self.offsets[i] not in (None, 0.0) for i in (a, b))


def center_from_radius(
    u1: float, v1: float,
    u2: float, v2: float,
    radius: float,
    clockwise: bool,
) -> tuple[float, float, float]:
    """Center ``(u, v)`` and radius of an R-form arc in plane coordinates.

    Positive *radius* selects the shorter of the two candidate arcs,
    negative the longer.  When the chord is longer than the diameter the
    center falls on the chord midpoint and the radius becomes half the
    chord.
    """
    abs_radius = abs(radius)
    half_chord = math.hypot(u2 - u1, v2 - v1) / 2.0
    mid_u, mid_v = (u1 + u2) / 2.0, (v1 + v2) / 2.0

    if half_chord >= abs_radius * (1.0 - 1e-9):
        return mid_u, mid_v, half_chord

    offset = math.sqrt(abs_radius ** 2 - half_chord ** 2)
    chord_angle = math.atan2(v2 - v1, u2 - u1)
    # Center sits right of the chord for short CW / long CCW arcs
    if clockwise == (radius > 0):
        center_angle = chord_angle - math.pi / 2.0
    else:
        center_angle = chord_angle + math.pi / 2.0

    return (
        mid_u + offset * math.cos(center_angle),
        mid_v + offset * math.sin(center_angle),
        abs_radius,
    )


def segment_length_for_radius(radius: float, default: float) -> float:
    """Target arc length per segment before the detail multiplier."""
    for limit, length in _RADIUS_TIERS:
        if radius < limit:
            return length
    return default


def _sweep_angle(start_angle: float, end_angle: float, clockwise: bool) -> float:
    if clockwise:
        while end_angle > start_angle:
            end_angle -= _TWO_PI
        while end_angle <= start_angle - _TWO_PI:
            end_angle += _TWO_PI
    else:
        while end_angle < start_angle:
            end_angle += _TWO_PI
        while end_angle >= start_angle + _TWO_PI:
            end_angle -= _TWO_PI
    return end_angle - start_angle


def tessellate_arc(
    spec: ArcSpec,
    max_segments: int = 300,
    min_segments: int = 12,
    corner_min_segments: int = 16,
    min_spacing: float = 0.05,
    helical: bool = False,
) -> list[Position]:
    """Approximate the arc described by *spec* with a polyline.

    Parameters
    ----------
    spec:
        Arc geometry.
    max_segments, min_segments:
        Bounds on the number of chords.
    corner_min_segments:
        Extra floor for near-quarter-circle arcs on small radii.
    min_spacing:
        Arc length per segment for large radii; on those arcs, points
        closer than this to the previous one are skipped.
    helical:
        Interpolate the out-of-plane axis from start to end.  Otherwise
        it is held at the start value and the end point is appended.

    Returns
    -------
    Points from ``spec.start`` to ``spec.end`` inclusive.
    """
    start, end = spec.start, spec.end
    a, b = spec.plane.axes
    n = spec.plane.normal_axis

    if spec.has_offsets:
        ca = start[a] + (spec.offsets[a] or 0.0)
        cb = start[b] + (spec.offsets[b] or 0.0)
        radius = math.hypot(start[a] - ca, start[b] - cb)
    elif spec.radius is not None:
        if abs(spec.radius) < MIN_RADIUS:
            return [start, end]
        ca, cb, radius = center_from_radius(
            start[a], start[b], end[a], end[b], spec.radius, spec.clockwise,
        )
    else:
        return [start, end]

    if radius < MIN_RADIUS:
        return [start, end]

    start_angle = math.atan2(start[b] - cb, start[a] - ca)
    end_angle = math.atan2(end[b] - cb, end[a] - ca)
    sweep = _sweep_angle(start_angle, end_angle, spec.clockwise)

    if abs(sweep) < ZERO_SWEEP:
        if helical:
            gap = math.hypot(end[a] - start[a], end[b] - start[b])
        else:
            gap = start.distance_to(end)
        if gap > END_TOLERANCE:
            return [start, end]
        sweep = -_TWO_PI if spec.clockwise else _TWO_PI

    # Segment count
    step = segment_length_for_radius(radius, min_spacing) / spec.detail
    arc_length = radius * abs(sweep)
    if step > 0:
        segments = math.ceil(arc_length / step)
    else:
        segments = max_segments
    segments = max(segments, min_segments)
    if radius < SMALL_RADIUS and math.pi / 4 < abs(sweep) < math.pi / 2 + 0.2:
        segments = max(segments, corner_min_segments)
    segments = min(segments, max_segments)

    points = [start]
    last = start
    for i in range(1, segments + 1):
        t = i / segments
        angle = start_angle + t * sweep
        coords = list(start)
        coords[a] = ca + radius * math.cos(angle)
        coords[b] = cb + radius * math.sin(angle)
        if helical:
            coords[n] = start[n] + t * (end[n] - start[n])
        pt = Position(*coords)

        if i == segments or radius < SMALL_RADIUS or last.distance_to(pt) >= min_spacing:
            points.append(pt)
            last = pt

    # Snap onto the commanded end point
    if points[-1].distance_to(end) <= END_TOLERANCE:
        points[-1] = end
    else:
        points.append(end)

    return points
