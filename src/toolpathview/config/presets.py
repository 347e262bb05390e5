"""Parser and level-of-detail configuration with named detail presets.

Distances are in document units (mm or inch, whatever the program uses).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ParserConfig:
    """Settings that shape how a program is interpreted and arcs tessellated."""

    arc_detail: float = 1.0           # segment density multiplier
    max_arc_segments: int = 300       # hard cap per arc
    min_arc_segments: int = 12        # floor for any arc
    corner_min_segments: int = 16     # floor for small quarter-circle corners
    min_segment_spacing: float = 0.05  # large-radius arc points closer than this are skipped
    position_epsilon: float = 0.001   # moves shorter than this are dropped
    helical_arcs: bool = False        # interpolate the out-of-plane axis through arcs
    full_circle_arcs: bool = False    # draw arcs that end where they start

    def __post_init__(self) -> None:
        if self.arc_detail <= 0:
            raise ValueError("arc_detail must be positive")
        if self.max_arc_segments < 1:
            raise ValueError("max_arc_segments must be at least 1")
        if self.min_arc_segments < 1:
            raise ValueError("min_arc_segments must be at least 1")
        if self.min_segment_spacing < 0:
            raise ValueError("min_segment_spacing must not be negative")
        if self.position_epsilon < 0:
            raise ValueError("position_epsilon must not be negative")


@dataclass(frozen=True)
class LodConfig:
    """Settings for render-time point reduction."""

    enabled: bool = True
    max_points: int = 10000                # 0 = no limit
    preserve_small_features: bool = True
    small_feature_threshold: float = 5.0   # bbox size below which a shape is "small"

    def __post_init__(self) -> None:
        if self.max_points < 0:
            raise ValueError("max_points must not be negative")
        if self.small_feature_threshold < 0:
            raise ValueError("small_feature_threshold must not be negative")

    @property
    def is_limited(self) -> bool:
        return self.enabled and self.max_points > 0


@dataclass(frozen=True)
class DetailProfile:
    """A named pairing of parser and LOD settings."""

    name: str
    parser: ParserConfig = field(default_factory=ParserConfig)
    lod: LodConfig = field(default_factory=LodConfig)

    def __str__(self) -> str:
        return (
            f"{self.name}  "
            f"arc detail x{self.parser.arc_detail:g}  "
            f"<= {self.parser.max_arc_segments} segs/arc  "
            f"LOD {'on' if self.lod.enabled else 'off'} "
            f"({self.lod.max_points or 'unlimited'} pts)"
        )


class DetailPreset(Enum):
    STANDARD = "standard"
    HIGH_DETAIL = "high_detail"


_PROFILES: dict[DetailPreset, DetailProfile] = {
    DetailPreset.STANDARD: DetailProfile(
        name="Standard",
        parser=ParserConfig(),
        lod=LodConfig(),
    ),
    DetailPreset.HIGH_DETAIL: DetailProfile(
        name="High detail",
        parser=ParserConfig(
            arc_detail=4.0,
            max_arc_segments=600,
            min_segment_spacing=0.005,
        ),
        lod=LodConfig(
            enabled=False,
            max_points=100000,
            preserve_small_features=True,
            small_feature_threshold=20.0,
        ),
    ),
}


def get_preset(preset: DetailPreset) -> DetailProfile:
    return _PROFILES[preset]


def list_presets() -> list[DetailProfile]:
    return list(_PROFILES.values())
