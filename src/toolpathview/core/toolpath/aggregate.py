"""Accumulate emitted moves into the flat point stream and path segments."""

from __future__ import annotations

from typing import Sequence

from .base import ParsedDocument, PathSegment, Position


class SegmentBuilder:
    """Collects moves as the interpreter produces them.

    Keeps two views of the same geometry: a flat stream of emitted points
    with parallel travel flags and Z values, and a list of polylines where
    each change between travel and cutting starts a new segment.  A new
    segment begins with the previous segment's last point so every segment
    can be drawn on its own.
    """

    def __init__(self) -> None:
        self._points: list[Position] = []
        self._travel_flags: list[bool] = []
        self._z_values: list[float] = []
        self._segments: list[PathSegment] = []
        self._current: list[Position] = []
        self._current_is_travel = False

    @property
    def is_empty(self) -> bool:
        """True until the first point is emitted."""
        return not self._points

    @property
    def segment_count(self) -> int:
        return len(self._segments) + (1 if self._current else 0)

    def add_move(
        self,
        start: Position,
        points: Sequence[Position],
        is_travel: bool,
        include_start: bool = False,
    ) -> None:
        """Record a move from *start* through *points*.

        *start* only enters the flat stream when *include_start* is set;
        it is already there for every move but the first.
        """
        if not points:
            return

        if include_start:
            self._emit(start, is_travel)
        for pt in points:
            self._emit(pt, is_travel)

        if not self._current:
            self._current = [start]
            self._current_is_travel = is_travel
        elif self._current_is_travel != is_travel:
            self._close_current()
            self._current = [start]
            self._current_is_travel = is_travel
        elif self._current[-1] != start:
            # Coordinate frame moved (G92); keep the polyline continuous
            self._current.append(start)
        self._current.extend(points)

    def build(self) -> ParsedDocument:
        """Return the document for everything recorded so far."""
        segments = list(self._segments)
        if self._current:
            segments.append(PathSegment(tuple(self._current), self._current_is_travel))
        return ParsedDocument(
            points=tuple(self._points),
            travel_flags=tuple(self._travel_flags),
            z_values=tuple(self._z_values),
            segments=tuple(segments),
        )

    def _emit(self, pt: Position, is_travel: bool) -> None:
        self._points.append(pt)
        self._travel_flags.append(is_travel)
        self._z_values.append(pt.z)

    def _close_current(self) -> None:
        self._segments.append(PathSegment(tuple(self._current), self._current_is_travel))
        self._current = []
