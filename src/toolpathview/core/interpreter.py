"""G-code motion interpreter: text in, ParsedDocument out.

The interpreter walks the program one line at a time, updating a
caller-owned ``ParserState`` and feeding moves to a ``SegmentBuilder``.
It never raises on bad input: unknown words are ignored, unparseable
numbers are dropped and arcs that cannot be resolved become straight
lines, so a partly broken program still yields whatever geometry it
describes.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config.presets import ParserConfig
from .fields import AXIS_INDEX, Field, FieldKind, parse_fields
from .state import (
    ABSOLUTE_CODE,
    INCREMENTAL_CODE,
    PLANE_CODES,
    SET_ORIGIN_CODE,
    MotionCommand,
    ParserState,
    motion_for_code,
)
from .tokenizer import iter_lines
from .toolpath.aggregate import SegmentBuilder
from .toolpath.arc import ArcSpec, tessellate_arc
from .toolpath.base import ParsedDocument, Position

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ParserConfig()


def interpret_line(
    state: ParserState,
    fields: Sequence[Field],
    builder: SegmentBuilder,
    config: ParserConfig = _DEFAULT_CONFIG,
) -> None:
    """Apply one parsed line to *state*, recording any motion in *builder*.

    Mode words (G17-G19, G90/G91) take effect before the line's axis words
    are resolved, whatever their order on the line.
    """
    axes: dict[int, float] = {}
    offsets: list[Optional[float]] = [None, None, None]
    radius: Optional[float] = None
    motion: Optional[MotionCommand] = None
    set_origin = False

    for f in fields:
        if f.kind is FieldKind.G:
            command = motion_for_code(f.value)
            if command is not None:
                motion = command
            elif f.value in PLANE_CODES:
                state.plane = PLANE_CODES[f.value]
            elif f.value == ABSOLUTE_CODE:
                state.absolute_mode = True
            elif f.value == INCREMENTAL_CODE:
                state.absolute_mode = False
            elif f.value == SET_ORIGIN_CODE:
                set_origin = True
        elif f.kind.is_axis:
            axes[AXIS_INDEX[f.kind]] = f.value
        elif f.kind.is_offset:
            offsets[AXIS_INDEX[f.kind]] = f.value
        elif f.kind is FieldKind.R:
            radius = f.value
        # FieldKind.OTHER (F, S, T, M, ...) has no effect on geometry

    if motion is not None:
        state.last_motion = motion

    if set_origin:
        # G92 redefines the current position; always absolute, never moves
        coords = list(state.position)
        for index, value in axes.items():
            coords[index] = value
        state.position = Position(*coords)
        state.origin_established = True
        return

    if motion is None:
        if not axes:
            return
        motion = state.last_motion
        if motion is MotionCommand.NONE:
            motion = MotionCommand.RAPID

    start = state.position
    target = state.resolve_target(axes)

    # The first rapid of a program is always shown, even from the origin to itself
    if (
        motion is MotionCommand.RAPID
        and not state.origin_established
        and builder.is_empty
    ):
        builder.add_move(start, [target], is_travel=True, include_start=True)
        state.position = target
        return

    moved = start.distance_to(target) > config.position_epsilon

    if motion.is_arc:
        spec = ArcSpec(
            start=start,
            end=target,
            clockwise=motion is MotionCommand.ARC_CW,
            plane=state.plane,
            offsets=(offsets[0], offsets[1], offsets[2]),
            radius=radius,
            detail=config.arc_detail,
        )
        if moved or (config.full_circle_arcs and spec.has_center_offset):
            points = tessellate_arc(
                spec,
                max_segments=config.max_arc_segments,
                min_segments=config.min_arc_segments,
                corner_min_segments=config.corner_min_segments,
                min_spacing=config.min_segment_spacing,
                helical=config.helical_arcs,
            )
            builder.add_move(start, points[1:], is_travel=False)
    elif moved:
        builder.add_move(start, [target], is_travel=motion.is_travel)

    state.position = target


def parse_gcode(text: str, config: Optional[ParserConfig] = None) -> ParsedDocument:
    """Interpret a whole G-code program.

    Parameters
    ----------
    text:
        Program text.  Empty or comment-only text gives an empty document.
    config:
        Arc and filtering settings; defaults to ``ParserConfig()``.

    Returns
    -------
    The ParsedDocument with the flat point stream and path segments.
    """
    config = config or _DEFAULT_CONFIG
    state = ParserState()
    builder = SegmentBuilder()
    debug = logger.isEnabledFor(logging.DEBUG)
    g_codes: set[float] = set()

    for line in iter_lines(text):
        fields = parse_fields(line)
        if debug:
            g_codes.update(f.value for f in fields if f.kind is FieldKind.G)
        interpret_line(state, fields, builder, config)

    document = builder.build()

    if debug:
        travel = len(document.travel_segments())
        logger.debug(
            f"Parsed {document.total_points} points with "
            f"{len(set(document.z_values))} Z levels into "
            f"{len(document.segments)} segments "
            f"({travel} travel, {len(document.segments) - travel} cutting); "
            f"G codes seen: {sorted(g_codes)}"
        )
    return document
