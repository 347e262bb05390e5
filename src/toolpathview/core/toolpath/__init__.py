"""Toolpath geometry package."""

from .base import ORIGIN, ParsedDocument, PathSegment, Plane, Position, Waypoint, normalize_z_levels
from .aggregate import SegmentBuilder
from .arc import ArcSpec, tessellate_arc
from .lod import apply_level_of_detail, prepare_render_segments, simplify_segments
from .cache import CacheKey, SegmentCache

__all__ = [
    "ORIGIN", "ParsedDocument", "PathSegment", "Plane", "Position", "Waypoint",
    "normalize_z_levels", "SegmentBuilder", "ArcSpec", "tessellate_arc",
    "apply_level_of_detail", "prepare_render_segments", "simplify_segments",
    "CacheKey", "SegmentCache",
]
