"""Level-of-detail reduction of path segments for rendering.

When a document holds more points than the render budget, each segment
is thinned by keeping every N-th point.  Two things survive thinning:

* sharp turns, so corners stay where they are, and
* small features such as tabs and slots, which get a much gentler skip
  factor because they have few points and are the first thing uniform
  decimation would erase.

The result is a new list of new segments; the input is never modified,
and the same input always gives the same output.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ...config.presets import LodConfig
from .base import ParsedDocument, PathSegment, Position
from .utils import count_sharp_corners, footprint, shape_complexity, turn_cosines

logger = logging.getLogger(__name__)

# Segments this short are never thinned
MIN_POINTS_TO_SIMPLIFY = 8
# Turns whose unit-vector dot product falls below this are kept (~45 degrees)
SHARP_TURN_DOT = 0.7
# Small-feature classification
MIN_COMPLEXITY = 1.1
MIN_SHARP_CORNERS = 2


def is_likely_small_feature(segment: PathSegment, threshold: float) -> bool:
    """Heuristic for tabs, slots and similar small, corner-rich shapes.

    All of the following must hold for the XY footprint:

    1. bounding-box area below ``threshold**2``
    2. width or height below *threshold*
    3. ``perimeter**2 / (4*pi*area)`` above 1.1 (not a plain round loop)
    4. at least two vertices turning by more than 45 degrees
    """
    if len(segment.points) < 3:
        return False

    width, height, perimeter = footprint(segment.points)
    area = width * height

    return (
        area < threshold * threshold
        and (width < threshold or height < threshold)
        and shape_complexity(area, perimeter) > MIN_COMPLEXITY
        and count_sharp_corners(segment.points) >= MIN_SHARP_CORNERS
    )


def simplify_with_skip_factor(
    points: Sequence[Position],
    skip_factor: int,
) -> tuple[Position, ...]:
    """Keep every *skip_factor*-th point plus the endpoints and sharp turns."""
    if skip_factor <= 1 or len(points) <= 3:
        return tuple(points)

    cos = turn_cosines(points)
    sharp = np.zeros(len(points), dtype=bool)
    # NaN (degenerate edge) compares False, so such vertices are not "sharp"
    with np.errstate(invalid="ignore"):
        sharp[1:-1] = cos < SHARP_TURN_DOT

    keep = [points[0]]
    for i in range(1, len(points) - 1):
        if i % skip_factor == 0 or sharp[i]:
            keep.append(points[i])
    keep.append(points[-1])
    return tuple(keep)


def simplify_segments(
    segments: Sequence[PathSegment],
    max_points: int,
    preserve_small_features: bool = True,
    small_feature_threshold: float = 5.0,
) -> list[PathSegment]:
    """Reduce *segments* so their total point count approaches *max_points*.

    Parameters
    ----------
    segments:
        Segments to thin.  Not modified.
    max_points:
        Point budget; 0 means unlimited.
    preserve_small_features:
        Give small features a gentle skip factor.
    small_feature_threshold:
        Size in document units below which a feature counts as small.

    Returns
    -------
    A new list.  Under budget, it holds the input segments unchanged.
    """
    total = sum(len(s.points) for s in segments)
    if max_points <= 0 or total <= max_points:
        return list(segments)

    regular_skip = math.ceil(total / max_points * 2)
    result: list[PathSegment] = []
    small_count = 0

    for seg in segments:
        if len(seg.points) <= MIN_POINTS_TO_SIMPLIFY:
            result.append(seg)
            continue

        if preserve_small_features and is_likely_small_feature(seg, small_feature_threshold):
            small_count += 1
            skip = max(2, math.ceil(len(seg.points) / 20))
        else:
            skip = regular_skip

        result.append(PathSegment(
            simplify_with_skip_factor(seg.points, skip), seg.is_travel,
        ))

    logger.debug(
        f"LOD reduced {total} points to {sum(len(s.points) for s in result)} "
        f"(budget {max_points}, skip {regular_skip}, {small_count} small features)"
    )
    return result


def apply_level_of_detail(
    segments: Sequence[PathSegment],
    config: LodConfig,
) -> list[PathSegment]:
    """Run :func:`simplify_segments` when *config* asks for it."""
    if not config.is_limited:
        return list(segments)
    return simplify_segments(
        segments,
        config.max_points,
        preserve_small_features=config.preserve_small_features,
        small_feature_threshold=config.small_feature_threshold,
    )


def prepare_render_segments(
    document: ParsedDocument,
    is_travel: bool,
    config: LodConfig,
) -> list[PathSegment]:
    """Segments of one class, thinned when the document is over budget.

    The budget check uses the document's whole flat point stream, while
    thinning applies to the selected class only.
    """
    selected = [s for s in document.segments if s.is_travel == is_travel]
    if config.is_limited and document.total_points > config.max_points:
        return apply_level_of_detail(selected, config)
    return selected
