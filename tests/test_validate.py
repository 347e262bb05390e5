"""Tests for document structure validation."""

import math

import pytest

from toolpathview.core.interpreter import parse_gcode
from toolpathview.core.toolpath.base import ParsedDocument, PathSegment, Position
from toolpathview.gcode.validate import validate_document


P0 = Position(0.0, 0.0, 0.0)
P1 = Position(1.0, 0.0, -1.0)


@pytest.fixture
def good_document() -> ParsedDocument:
    return parse_gcode("G0 X0 Y0 Z5\nG1 Z-1\nG2 X10 Y0 I5\nG0 Z5")


def _doc(**kwargs) -> ParsedDocument:
    base = dict(
        points=(P0, P1),
        travel_flags=(True, False),
        z_values=(0.0, -1.0),
        segments=(PathSegment((P0,), True), PathSegment((P0, P1), False)),
    )
    base.update(kwargs)
    return ParsedDocument(**base)


class TestValidation:
    def test_parsed_document_passes(self, good_document):
        result = validate_document(good_document)
        assert result.is_ok

    def test_handbuilt_document_passes(self):
        assert validate_document(_doc()).is_ok

    def test_empty_document_warns(self):
        result = validate_document(ParsedDocument())
        assert result.has_warnings
        assert not result.has_errors

    def test_stream_length_mismatch(self):
        result = validate_document(_doc(travel_flags=(True,)))
        assert result.has_errors
        assert "Stream lengths differ" in result.issues[0].message

    def test_z_mismatch(self):
        result = validate_document(_doc(z_values=(0.0, 3.0)))
        assert result.has_errors

    def test_non_finite_coordinate(self):
        bad = Position(math.inf, 0.0, -1.0)
        result = validate_document(_doc(points=(P0, bad)))
        assert result.has_errors

    def test_empty_segment(self):
        result = validate_document(_doc(segments=(PathSegment((), True),
                                                  PathSegment((P0, P1), False))))
        assert result.has_errors
        assert result.issues[0].segment_index == 0

    def test_adjacent_segments_same_class(self):
        segments = (PathSegment((P0,), False), PathSegment((P0, P1), False))
        result = validate_document(_doc(segments=segments))
        assert result.has_errors
        assert result.issues[0].segment_index == 1
        assert "both cutting" in result.issues[0].message
