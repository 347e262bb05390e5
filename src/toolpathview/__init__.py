"""G-code toolpath interpretation and level-of-detail geometry for previews."""

from .config.presets import DetailPreset, LodConfig, ParserConfig, get_preset
from .core.interpreter import parse_gcode
from .core.toolpath.base import ParsedDocument, PathSegment, Position, normalize_z_levels
from .core.toolpath.lod import simplify_segments

__version__ = "0.1.0"

__all__ = [
    "DetailPreset", "LodConfig", "ParserConfig", "get_preset",
    "parse_gcode", "ParsedDocument", "PathSegment", "Position",
    "normalize_z_levels", "simplify_segments",
]
